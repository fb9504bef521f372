import warnings

import numpy as np
import pytest

from palettica import ColorValue
from palettica.harmony import (
    HarmonyKind,
    HUE_OFFSETS,
    harmonies,
    all_harmonies,
    rotate_hue,
    complementary_color,
    analogous_colors,
    triadic_colors,
    split_complementary_colors,
    tetradic_colors,
    harmonious_colors,
    np_harmonies,
)
from .samples import red_harmonies, sample_grid, out_of_range_samples


RED = ColorValue(1.0, 0.0, 0.0, 1.0)


def test_counts():
    assert len(harmonies(RED, HarmonyKind.COMPLEMENTARY)) == 1
    assert len(harmonies(RED, HarmonyKind.ANALOGOUS)) == 2
    assert len(harmonies(RED, HarmonyKind.TRIADIC)) == 2
    assert len(harmonies(RED, HarmonyKind.SPLIT_COMPLEMENTARY)) == 2
    assert len(harmonies(RED, HarmonyKind.TETRADIC)) == 3


def test_offsets_in_turns():
    assert HUE_OFFSETS[HarmonyKind.COMPLEMENTARY] == (0.5,)
    assert HUE_OFFSETS[HarmonyKind.ANALOGOUS] == (-1 / 12, 1 / 12)
    assert HUE_OFFSETS[HarmonyKind.TRIADIC] == (1 / 3, 2 / 3)
    assert HUE_OFFSETS[HarmonyKind.SPLIT_COMPLEMENTARY] == (0.5 - 1 / 12, 0.5 + 1 / 12)
    assert HUE_OFFSETS[HarmonyKind.TETRADIC] == (0.25, 0.5, 0.75)
    assert HarmonyKind.TETRADIC.offsets == (0.25, 0.5, 0.75)


def test_red_harmonies_exact_order():
    for kind, expected in red_harmonies.items():
        result = harmonies(RED, kind)
        assert len(result) == len(expected)
        for color, rgb in zip(result, expected):
            assert color.rgb == pytest.approx(rgb, abs=1e-9)
            assert color.alpha == 1.0


def test_alpha_copied_and_lightness_kept():
    base = ColorValue(0.2, 0.5, 0.8, 0.4)
    _, s, l = base.to_hsl()
    for kind in HarmonyKind:
        for color in harmonies(base, kind):
            assert color.alpha == 0.4
            _, s_out, l_out = color.to_hsl()
            assert s_out == pytest.approx(s, abs=1e-9)
            assert l_out == pytest.approx(l, abs=1e-9)


def test_complementary_is_self_inverse():
    for r, g, b in sample_grid:
        base = ColorValue(r, g, b)
        back = complementary_color(complementary_color(base))
        assert back.rgb == pytest.approx(base.rgb, abs=1e-9)


def test_gray_stays_gray():
    gray = ColorValue(0.5, 0.5, 0.5, 0.3)
    for kind in HarmonyKind:
        for color in harmonies(gray, kind):
            assert color == gray


def test_outputs_in_gamut():
    for r, g, b in sample_grid:
        for colors in all_harmonies(ColorValue(r, g, b)).values():
            assert all(color.in_gamut for color in colors)


def test_kind_accepts_string():
    assert harmonies(RED, "triadic") == harmonies(RED, HarmonyKind.TRIADIC)
    with pytest.raises(ValueError):
        harmonies(RED, "pentadic")


def test_all_harmonies_keys():
    result = all_harmonies(RED)
    assert list(result) == list(HarmonyKind)
    assert [len(v) for v in result.values()] == [1, 2, 2, 2, 3]


def test_rotate_hue():
    assert rotate_hue(RED, 1 / 3).rgb == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert rotate_hue(RED, -2 / 3).rgb == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert rotate_hue(RED, 1.0).rgb == pytest.approx(RED.rgb, abs=1e-9)


def test_named_wrappers():
    base = ColorValue(0.8, 0.2, 0.5)
    assert complementary_color(base) == harmonies(base, HarmonyKind.COMPLEMENTARY)[0]
    assert analogous_colors(base) == harmonies(base, HarmonyKind.ANALOGOUS)
    assert triadic_colors(base) == harmonies(base, HarmonyKind.TRIADIC)
    assert split_complementary_colors(base) == harmonies(base, HarmonyKind.SPLIT_COMPLEMENTARY)
    assert tetradic_colors(base) == harmonies(base, HarmonyKind.TETRADIC)


def test_harmonious_colors_is_deprecated():
    with pytest.warns(DeprecationWarning):
        result = harmonious_colors(RED)
    assert result == analogous_colors(RED)


def test_labels():
    assert HarmonyKind.SPLIT_COMPLEMENTARY.label == "Split-Comp"
    assert HarmonyKind.COMPLEMENTARY.label == "Complementary"


def test_np_harmonies_matches_scalar():
    colors = np.random.default_rng(3).random((6, 4))
    for kind in HarmonyKind:
        result = np_harmonies(colors, kind)
        assert result.shape == (6, len(HUE_OFFSETS[kind]), 4)
        for row, derived in zip(colors, result):
            expected = [c.value for c in harmonies(ColorValue.from_array(row), kind)]
            assert np.allclose(derived, expected, atol=1e-9)


def test_np_harmonies_rgb_only():
    result = np_harmonies(np.array([[1.0, 0.0, 0.0]]), HarmonyKind.TETRADIC)
    assert result.shape == (1, 3, 3)
    assert np.allclose(result[0], red_harmonies["tetradic"], atol=1e-9)

    with pytest.raises(ValueError):
        np_harmonies(np.zeros((2, 2)), HarmonyKind.TRIADIC)


def test_lightness_edge_input_does_not_raise():
    assert complementary_color(ColorValue(2.0, 0.0, 0.0)) == ColorValue(1.0, 1.0, 1.0)
    assert complementary_color(ColorValue(0.5, -0.5, 0.0)) == ColorValue(0.0, 0.0, 0.0)


def test_out_of_range_input_gives_in_gamut_output():
    for r, g, b in out_of_range_samples:
        base = ColorValue(r, g, b, 1.5)
        for kind, colors in all_harmonies(base).items():
            assert len(colors) == len(HUE_OFFSETS[kind])
            for color in colors:
                assert color.in_gamut
                assert color.alpha == 1.0


def test_np_harmonies_out_of_range_matches_scalar():
    colors = np.array([(r, g, b, 1.0) for r, g, b in out_of_range_samples])
    out = np_harmonies(colors, HarmonyKind.TRIADIC)
    expected = np.array([
        [color.value for color in triadic_colors(ColorValue(*rgba))]
        for rgba in colors
    ])

    assert np.all((out >= 0.0) & (out <= 1.0))
    assert np.allclose(out, expected, atol=1e-9)
