"""Basic Palettica usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from palettica import (
    ColorValue,
    CVDMode,
    HarmonyKind,
    harmonies,
    simulate_cvd,
    np_simulate_cvd,
    ideal_text_color,
    hue_to_degrees,
)


def demonstrate_colors() -> None:
    # Parse a color code and read it back in other notations.
    accent = ColorValue.from_hex("#3380CC")
    print("RGBA floats:", accent.value)
    print("CSS codes:", accent.rgb_string, accent.hsl_string)

    h, s, l = accent.to_hsl()
    print(f"Hue for a picker: {hue_to_degrees(h):.1f} degrees")
    print("Text on accent:", ideal_text_color(accent).hex_string)


def demonstrate_harmonies() -> None:
    base = ColorValue(0.8, 0.2, 0.5)
    for kind in HarmonyKind:
        codes = [color.hex_string for color in harmonies(base, kind)]
        print(f"{kind.label:>14}:", ", ".join(codes))


def demonstrate_cvd() -> None:
    palette = [ColorValue(1, 0, 0), ColorValue(0, 1, 0), ColorValue(0, 0, 1)]
    for mode in CVDMode:
        simulated = [simulate_cvd(color, mode).hex_string for color in palette]
        print(f"{mode.short_label:>14}:", ", ".join(simulated))

    # Whole palettes at once
    batch = np.array([color.value for color in palette])
    print("Vectorized deuteranopia:\n", np_simulate_cvd(batch, CVDMode.DEUTERANOPIA).round(3))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_harmonies()
    demonstrate_cvd()
