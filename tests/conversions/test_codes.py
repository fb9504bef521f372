import pytest

from palettica.conversions import (
    parse_hex,
    format_hex,
    format_rgb,
    format_rgba,
    format_hsl,
    sanitize_hex_input,
    hue_to_degrees,
    degrees_to_hue,
)


def test_parse_six_digit_hex():
    assert parse_hex("#FF0000") == (1.0, 0.0, 0.0, 1.0)
    assert parse_hex("  00ff00\n") == (0.0, 1.0, 0.0, 1.0)


def test_parse_eight_digit_hex():
    r, g, b, a = parse_hex("#FF800080")
    assert (r, b) == (1.0, 0.0)
    assert g == 128 / 255
    assert a == 128 / 255


@pytest.mark.parametrize("text", ["", "#FFF", "12345", "#1234567", "GGGGGG", "#12 34 56"])
def test_parse_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_hex(text)


def test_format_hex():
    assert format_hex(0.0, 0.0, 0.0) == "#000000"
    assert format_hex(1.0, 1.0, 1.0) == "#FFFFFF"
    assert format_hex(128 / 255, 64 / 255, 192 / 255) == "#8040C0"


def test_format_hex_rounds_halves_up():
    # 0.5 * 255 == 127.5
    assert format_hex(1.0, 0.5, 0.0, 0.5) == "#FF800080"


def test_css_strings():
    assert format_rgb(1.0, 0.5, 0.0) == "rgb(255, 128, 0)"
    assert format_rgba(1.0, 0.5, 0.0, 0.5) == "rgba(255, 128, 0, 0.5)"
    assert format_hsl(1.0, 0.0, 0.0) == "hsl(0, 100%, 50%)"
    assert format_hsl(0.2, 0.5, 0.8) == "hsl(210, 60%, 50%)"


def test_sanitize_hex_input():
    assert sanitize_hex_input("#ff80zz00a1b") == "FF8000A1"
    assert sanitize_hex_input("") == ""


def test_degree_boundary():
    assert hue_to_degrees(0.5) == 180.0
    assert degrees_to_hue(90.0) == 0.25
    assert degrees_to_hue(-90.0) == 0.75
    assert degrees_to_hue(360.0) == 0.0


def test_codes_clamp_channels():
    assert format_hex(1.5, -0.2, 0.5, 2.0) == "#FF0080FF"
    assert format_rgb(-1.0, 0.0, 3.0) == "rgb(0, 0, 255)"
    assert format_rgba(1.0, 1.0, 1.0, -0.5) == "rgba(255, 255, 255, 0.0)"
    assert format_hsl(2.0, 0.0, 0.0) == format_hsl(1.0, 0.0, 0.0)
