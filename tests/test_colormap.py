"""Tests for curveribbon/utils/colormap.py."""

import numpy as np
import pytest

from curveribbon.utils.colormap import (
    RAINBOW_COLORS,
    gradient_locations,
    u_coordinates,
    uv_coordinates,
)


def test_rainbow_palette():
    assert RAINBOW_COLORS.shape == (7, 3)
    assert RAINBOW_COLORS.dtype == np.float32
    np.testing.assert_array_equal(RAINBOW_COLORS[0], [1, 0, 0])
    np.testing.assert_array_equal(RAINBOW_COLORS[-1], [0.5, 0, 1])


@pytest.mark.parametrize("count", [2, 7, 20])
def test_u_coordinates_span_unit_interval(count):
    u = u_coordinates(count)
    assert u.shape == (count,) and u.dtype == np.float32
    assert u[0] == 0.0 and u[-1] == 1.0
    np.testing.assert_allclose(np.diff(u), 1.0 / (count - 1), rtol=1e-6)


def test_uv_coordinates_have_zero_v():
    uv = uv_coordinates(4)
    np.testing.assert_allclose(uv, [[0, 0], [1 / 3, 0], [2 / 3, 0], [1, 0]], rtol=1e-6)


class TestGradientLocations:
    def test_one_stop_per_rainbow_colour(self):
        stops = gradient_locations()
        assert stops.shape == (7,) and stops.dtype == np.float32
        np.testing.assert_allclose(stops, np.arange(7) / 6.0, rtol=1e-6)

    def test_custom_palette_with_alpha(self):
        palette = np.ones((3, 4))
        np.testing.assert_allclose(gradient_locations(palette), [0.0, 0.5, 1.0])
