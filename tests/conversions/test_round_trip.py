import numpy as np

from palettica.conversions import (
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    np_unit_rgb_to_hsl,
    np_hsl_to_unit_rgb,
)
from ..samples import sample_grid


rgb_tolerance = 1e-9


def test_round_trip_rgb_hsl():
    for r, g, b in sample_grid:
        h, s, l = unit_rgb_to_hsl(r, g, b)
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance


def test_round_trip_achromatic():
    for level in np.linspace(0.0, 1.0, 21):
        r, g, b = hsl_to_unit_rgb(*unit_rgb_to_hsl(level, level, level))
        assert r == g == b
        assert abs(r - level) < rgb_tolerance


def test_round_trip_rgb_hsl_numpy():
    rgb = np.random.default_rng(42).random((64, 3))
    hsl = np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    out = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])

    assert np.allclose(out, rgb, atol=rgb_tolerance)
