"""Model, view and model-view-projection matrices from explicit poses.

With no translation and no rotation a model (or camera) sits at the origin
of world space, faces the negative z-axis, has its right side along +x and
its top along +y. Orientations are applied as seen from world space:

1. yaw about the positive y-axis,
2. pitch about the positive x'-axis,
3. roll about the negative z''-axis.
"""

from dataclasses import dataclass

import numpy as np

from .linalg import multiply, rotation, scale, translation

_YAW_AXIS = (0.0, 1.0, 0.0)
_PITCH_AXIS = (1.0, 0.0, 0.0)
_ROLL_AXIS = (0.0, 0.0, -1.0)


def _rotation_deg(angle, axis):
    return rotation(np.radians(angle), axis)


def build_model_matrix(x, y, z, yaw, pitch, roll, sx=1.0, sy=1.0, sz=1.0):
    """Create a model matrix from position, orientation and scale.

    The model is first scaled, then rotated (roll, pitch, yaw), then
    translated: ``T · Ryaw · Rpitch · Rroll · S``.

    Parameters
    ----------
    x, y, z : float
        Position of the model in world space.
    yaw, pitch, roll : float
        Orientation angles in degrees.
    sx, sy, sz : float, optional, default 1.0
        Scale factors along the model's x, y and z axes.

    Returns
    -------
    numpy.ndarray
        4x4 model matrix.
    """
    rot = multiply(
        _rotation_deg(yaw, _YAW_AXIS),
        multiply(_rotation_deg(pitch, _PITCH_AXIS), _rotation_deg(roll, _ROLL_AXIS)),
    )
    return multiply(translation(x, y, z), multiply(rot, scale(sx, sy, sz)))


def build_view_matrix(x, y, z, yaw, pitch, roll):
    """Create a view matrix for a camera at the given position and orientation.

    The world is first translated by the negated camera position and then
    rotated by the negated angles in reverse order (yaw, pitch, roll), so
    the result is the inverse of :func:`build_model_matrix` with unit scale.
    Scaling is left to the projection matrix.

    Parameters
    ----------
    x, y, z : float
        Position of the camera in world space.
    yaw, pitch, roll : float
        Orientation angles of the camera in degrees.

    Returns
    -------
    numpy.ndarray
        4x4 view matrix.
    """
    rot = multiply(
        _rotation_deg(-roll, _ROLL_AXIS),
        multiply(_rotation_deg(-pitch, _PITCH_AXIS), _rotation_deg(-yaw, _YAW_AXIS)),
    )
    return multiply(rot, translation(-x, -y, -z))


def build_mvp_matrix(projection, view, model):
    """Combine projection, view and model matrices into ``P · V · M``.

    Parameters
    ----------
    projection, view, model : numpy.ndarray
        4x4 matrices.

    Returns
    -------
    numpy.ndarray
        4x4 model-view-projection matrix.
    """
    return multiply(projection, multiply(view, model))


@dataclass(frozen=True)
class CameraPose:
    """Position and orientation of a camera or model.

    Attributes
    ----------
    x, y, z : float
        Position in world space.
    yaw, pitch, roll : float
        Orientation angles in degrees.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def model_matrix(self, sx=1.0, sy=1.0, sz=1.0):
        """Return :func:`build_model_matrix` for this pose."""
        return build_model_matrix(self.x, self.y, self.z,
                                  self.yaw, self.pitch, self.roll, sx, sy, sz)

    def view_matrix(self):
        """Return :func:`build_view_matrix` for this pose."""
        return build_view_matrix(self.x, self.y, self.z, self.yaw, self.pitch, self.roll)
