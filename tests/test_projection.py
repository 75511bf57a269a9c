"""Tests for curveribbon/transforms/projection.py."""

import logging

import numpy as np
import pyrr
import pytest

from curveribbon.errors import InvalidParameterError
from curveribbon.transforms.linalg import transform
from curveribbon.transforms.projection import (
    OrthographicParams,
    PerspectiveParams,
    build_orthographic,
    build_perspective,
    viewport_aspect_ratio,
)

_ORTHO_PARAMS = [
    (2.0, 4 / 3, 1.0, 100.0),
    (1.0, 1.0, 0.1, 10.0),
    (5.0, 0.5, -1.0, 1.0),
    (0.3, 16 / 9, 2.0, 3.0),
]

_PERSPECTIVE_PARAMS = [
    (45.0, 4 / 3, 1.0, 100.0),
    (60.0, 1.0, 0.1, 10.0),
    (20.0, 16 / 9, 0.5, 1000.0),
    (120.0, 0.75, 3.0, 7.0),
    (1.0, 2.0, 0.01, 0.02),
]


def _textbook_perspective(fov, aspect, near, far):
    """Symmetric frustum matrix in mathematical (row = output) layout."""
    f = 1.0 / np.tan(np.radians(fov) / 2.0)
    return np.array([
        [f / aspect, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (far + near) / (near - far), 2.0 * far * near / (near - far)],
        [0.0, 0.0, -1.0, 0.0],
    ])


def _ndc(matrix, point):
    clip = transform(matrix, point)
    return clip[:3] / clip[3]


# ---------------------------------------------------------------------------
# Orthographic
# ---------------------------------------------------------------------------

class TestOrthographic:
    @pytest.mark.parametrize("height, aspect, near, far", _ORTHO_PARAMS)
    def test_box_corners_map_to_clip_cube(self, height, aspect, near, far):
        m = build_orthographic(height, aspect, near, far)
        half_w, half_h = aspect * height / 2.0, height / 2.0
        np.testing.assert_allclose(
            transform(m, (-half_w, -half_h, -near)), [-1, -1, -1, 1], atol=1e-9
        )
        np.testing.assert_allclose(
            transform(m, (half_w, half_h, -far)), [1, 1, 1, 1], atol=1e-9
        )

    @pytest.mark.parametrize("args", [
        (0.0, 1.0, 1.0, 10.0),
        (-1.0, 1.0, 1.0, 10.0),
        (1.0, 0.0, 1.0, 10.0),
        (1.0, -2.0, 1.0, 10.0),
        (1.0, 1.0, 10.0, 10.0),
        (1.0, 1.0, 10.0, 1.0),
    ])
    def test_invalid_parameters_raise(self, args):
        with pytest.raises(InvalidParameterError):
            build_orthographic(*args)

    def test_invalid_parameter_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="curveribbon.transforms.projection"):
            with pytest.raises(InvalidParameterError):
                build_orthographic(-1.0, 1.0, 1.0, 10.0)
        assert "camera_height" in caplog.text


# ---------------------------------------------------------------------------
# Perspective
# ---------------------------------------------------------------------------

class TestPerspective:
    @pytest.mark.parametrize("fov, aspect, near, far", _PERSPECTIVE_PARAMS)
    def test_matches_symmetric_frustum(self, fov, aspect, near, far):
        expected = _textbook_perspective(fov, aspect, near, far).T
        np.testing.assert_allclose(
            build_perspective(fov, aspect, near, far), expected, rtol=1e-4, atol=1e-9
        )

    @pytest.mark.parametrize("fov, aspect, near, far", _PERSPECTIVE_PARAMS)
    def test_matches_pyrr(self, fov, aspect, near, far):
        expected = pyrr.matrix44.create_perspective_projection(fov, aspect, near, far)
        np.testing.assert_allclose(
            build_perspective(fov, aspect, near, far), expected, rtol=1e-4, atol=1e-9
        )

    @pytest.mark.parametrize("fov, aspect, near, far", _PERSPECTIVE_PARAMS)
    def test_frustum_corners_map_to_clip_cube(self, fov, aspect, near, far):
        m = build_perspective(fov, aspect, near, far)
        tan_half = np.tan(np.radians(fov) / 2.0)
        for distance, expected in ((near, -1.0), (far, 1.0)):
            half_h = distance * tan_half
            half_w = aspect * half_h
            np.testing.assert_allclose(
                _ndc(m, (-half_w, -half_h, -distance)), [-1, -1, expected], atol=1e-6
            )
            np.testing.assert_allclose(
                _ndc(m, (half_w, half_h, -distance)), [1, 1, expected], atol=1e-6
            )

    def test_w_is_zero_at_center_of_projection(self):
        m = build_perspective(45.0, 4 / 3, 1.0, 100.0)
        assert abs(transform(m, (0.0, 0.0, 0.0))[3]) < 1e-12

    def test_farther_points_appear_smaller(self):
        m = build_perspective(45.0, 1.0, 1.0, 100.0)
        near_x = _ndc(m, (1.0, 0.0, -2.0))[0]
        far_x = _ndc(m, (1.0, 0.0, -4.0))[0]
        np.testing.assert_allclose(far_x, near_x / 2.0)

    @pytest.mark.parametrize("args", [
        (0.0, 1.0, 1.0, 10.0),
        (180.0, 1.0, 1.0, 10.0),
        (-10.0, 1.0, 1.0, 10.0),
        (45.0, 0.0, 1.0, 10.0),
        (45.0, 1.0, 0.0, 10.0),
        (45.0, 1.0, -1.0, 10.0),
        (45.0, 1.0, 10.0, 5.0),
    ])
    def test_invalid_parameters_raise(self, args):
        with pytest.raises(InvalidParameterError):
            build_perspective(*args)


# ---------------------------------------------------------------------------
# Parameter objects and viewport helper
# ---------------------------------------------------------------------------

class TestParams:
    def test_orthographic_params(self):
        params = OrthographicParams(2.0, 4 / 3, 1.0, 100.0)
        np.testing.assert_array_equal(params.matrix(), build_orthographic(2.0, 4 / 3, 1.0, 100.0))

    def test_perspective_params(self):
        params = PerspectiveParams(45.0, 4 / 3, 1.0, 100.0)
        np.testing.assert_array_equal(params.matrix(), build_perspective(45.0, 4 / 3, 1.0, 100.0))

    @pytest.mark.parametrize("width, height, expected", [
        (800, 600, 4 / 3),
        (0, 0, 1.0),
        (800, 0, 800.0),
        (-5, 10, 0.1),
    ])
    def test_viewport_aspect_ratio(self, width, height, expected):
        assert viewport_aspect_ratio(width, height) == pytest.approx(expected)
