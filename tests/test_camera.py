"""Tests for model, view and MVP matrices (curveribbon/transforms/camera.py)."""

import numpy as np
import pytest

from curveribbon.transforms.camera import (
    CameraPose,
    build_model_matrix,
    build_mvp_matrix,
    build_view_matrix,
)
from curveribbon.transforms.linalg import identity, inverse, multiply, transform
from curveribbon.transforms.projection import build_perspective

_POSES = [
    (0, 0, 0, 0, 0, 0),
    (1, 2, 3, 0, 0, 0),
    (0, 0, 5, 90, 0, 0),
    (2, 1, 4, 27, -11, 0),
    (-1, 0, 0, -90, 0, 90),
    (0.5, -3, 7, 123, 45, -60),
]


class TestViewIsInverseOfModel:
    @pytest.mark.parametrize("pose", _POSES)
    def test_view_times_model_is_identity(self, pose):
        view = build_view_matrix(*pose)
        model = build_model_matrix(*pose)
        np.testing.assert_allclose(multiply(view, model), identity(), atol=1e-12)
        np.testing.assert_allclose(multiply(model, view), identity(), atol=1e-12)

    @pytest.mark.parametrize("pose", _POSES)
    def test_view_equals_inverse_model(self, pose):
        np.testing.assert_allclose(
            build_view_matrix(*pose), inverse(build_model_matrix(*pose)), atol=1e-12
        )


class TestModelMatrix:
    def test_translation_only(self):
        m = build_model_matrix(1, 2, 3, 0, 0, 0)
        np.testing.assert_allclose(transform(m, (0, 0, 0)), [1, 2, 3, 1])

    def test_yaw_turns_front_to_the_left(self):
        # the front of a model is the negative z-axis
        m = build_model_matrix(0, 0, 0, 90, 0, 0)
        np.testing.assert_allclose(transform(m, (0, 0, -1, 0)), [-1, 0, 0, 0], atol=1e-12)

    def test_pitch_raises_the_front(self):
        m = build_model_matrix(0, 0, 0, 0, 90, 0)
        np.testing.assert_allclose(transform(m, (0, 0, -1, 0)), [0, 1, 0, 0], atol=1e-12)

    def test_roll_is_about_negative_z(self):
        m = build_model_matrix(0, 0, 0, 0, 0, 90)
        np.testing.assert_allclose(transform(m, (1, 0, 0, 0)), [0, -1, 0, 0], atol=1e-12)

    def test_roll_before_pitch_before_yaw(self):
        # roll moves +x to -y, pitch then moves -y to -z, yaw turns -z to -x
        m = build_model_matrix(0, 0, 0, 90, 90, 90)
        np.testing.assert_allclose(transform(m, (1, 0, 0, 0)), [-1, 0, 0, 0], atol=1e-12)

    def test_scale_before_rotation_before_translation(self):
        m = build_model_matrix(10, 0, 0, 90, 0, 0, 2, 1, 1)
        np.testing.assert_allclose(transform(m, (1, 0, 0)), [10, 0, -2, 1], atol=1e-12)


class TestCameraPose:
    def test_methods_match_functions(self):
        pose = CameraPose(2, 1, 4, 27, -11, 5)
        np.testing.assert_array_equal(pose.view_matrix(), build_view_matrix(2, 1, 4, 27, -11, 5))
        np.testing.assert_array_equal(
            pose.model_matrix(1, 2, 3), build_model_matrix(2, 1, 4, 27, -11, 5, 1, 2, 3)
        )

    def test_pose_is_immutable(self):
        pose = CameraPose()
        with pytest.raises(AttributeError):
            pose.x = 1.0


class TestMvp:
    def test_composition_order(self):
        projection = build_perspective(45, 4 / 3, 1, 100)
        view = build_view_matrix(0, 0, 4, 0, 0, 0)
        model = build_model_matrix(-1, 0, 0, -90, 0, 90)
        expected = multiply(projection, multiply(view, model))
        np.testing.assert_allclose(build_mvp_matrix(projection, view, model), expected)

    def test_camera_sees_point_in_front_at_center(self):
        projection = build_perspective(60, 1.0, 1, 100)
        view = build_view_matrix(0, 0, 4, 0, 0, 0)
        clip = transform(build_mvp_matrix(projection, view, identity()), (0, 0, 0))
        ndc = clip[:3] / clip[3]
        np.testing.assert_allclose(ndc[:2], [0, 0], atol=1e-12)
        assert -1 < ndc[2] < 1
