"""Orthographic and perspective projection matrices.

The camera looks down the negative z-axis of camera space. ``z_near`` and
``z_far`` are the (positive) distances of the near and far clipping planes,
i.e. the planes ``z = -z_near`` and ``z = -z_far``.

The perspective matrix is not taken from a closed-form formula. It is
derived with similar triangles: an orthographic camera whose image plane
coincides with the near plane is built first, then a second matrix prepares
the homogeneous ``w`` so that the perspective divide performed later by the
rendering backend shrinks points in proportion to their distance from the
center of projection.
"""

import logging
from dataclasses import dataclass

import numpy as np
import pyrr

from ..errors import InvalidParameterError
from .linalg import identity, multiply, transform

# Module logger
logger = logging.getLogger(__name__)

# Clip-space z of the near image plane and of the far clipping plane.
Z_IMAGE_PLANE = -1.0
Z_FAR_PLANE = 1.0


def _require(condition, message):
    if not condition:
        logger.error("Invalid projection parameter: %s", message)
        raise InvalidParameterError(message)


def viewport_aspect_ratio(width, height):
    """Return ``width / height`` for a viewport, guarding against zero sizes.

    Non-positive dimensions (e.g. a minimized window) are replaced by 1.

    Parameters
    ----------
    width, height : int
        Viewport size in pixels.

    Returns
    -------
    float
        Aspect ratio of the viewport.
    """
    width = width if width > 0 else 1
    height = height if height > 0 else 1
    return width / float(height)


def build_orthographic(camera_height, aspect_ratio, z_near, z_far):
    """Create an orthographic projection matrix.

    Maps the box ``[-w/2, w/2] x [-h/2, h/2] x [-z_far, -z_near]`` of camera
    space, with ``h = camera_height`` and ``w = aspect_ratio * h``, onto the
    canonical clip cube ``[-1, 1]^3``.

    Parameters
    ----------
    camera_height : float
        Height of the visible area in camera space.
    aspect_ratio : float
        Camera width divided by camera height.
    z_near, z_far : float
        Distances of the near and far clipping planes.

    Returns
    -------
    numpy.ndarray
        4x4 projection matrix.

    Raises
    ------
    InvalidParameterError
        If ``camera_height <= 0``, ``aspect_ratio <= 0`` or
        ``z_far <= z_near``.
    """
    _require(camera_height > 0, f"camera_height must be > 0, got {camera_height}")
    _require(aspect_ratio > 0, f"aspect_ratio must be > 0, got {aspect_ratio}")
    _require(z_far > z_near, f"z_far must be > z_near, got z_near={z_near}, z_far={z_far}")

    camera_width = aspect_ratio * camera_height
    x_left, x_right = -camera_width / 2.0, camera_width / 2.0
    y_bottom, y_top = -camera_height / 2.0, camera_height / 2.0
    return pyrr.matrix44.create_orthogonal_projection(
        x_left, x_right, y_bottom, y_top, z_near, z_far, dtype=np.float64
    )


def _w_preparation_matrix(z_center, z_near):
    """Matrix that leaves x and y alone and makes ``w`` linear in clip z.

    ``w`` is 0 at the center of projection and 1 on the image plane, so
    dividing by it scales each point by (image plane distance / point
    distance), which is the similar-triangles rule. The z row is chosen so
    that after the divide the image plane stays at ``Z_IMAGE_PLANE`` and
    the far plane stays at ``Z_FAR_PLANE``. Finally everything is scaled by
    ``z_near`` so that ``w`` equals the camera-space distance; a uniform
    factor does not change the divided result.
    """
    w_slope = 1.0 / (Z_IMAGE_PLANE - z_center)
    w_offset = -z_center / (Z_IMAGE_PLANE - z_center)
    w_far = w_slope * Z_FAR_PLANE + w_offset
    # z'/w must equal z on both clipping planes (w is 1 on the image plane)
    z_slope = (Z_FAR_PLANE * w_far - Z_IMAGE_PLANE) / (Z_FAR_PLANE - Z_IMAGE_PLANE)
    z_offset = Z_IMAGE_PLANE - z_slope * Z_IMAGE_PLANE

    prep = identity()
    # storage is transposed: prep[column, row]
    prep[2, 2] = z_slope
    prep[3, 2] = z_offset
    prep[2, 3] = w_slope
    prep[3, 3] = w_offset
    return prep * z_near


def build_perspective(field_of_view, aspect_ratio, z_near, z_far):
    """Create a perspective projection matrix.

    The center of projection is the origin of camera space and the image
    plane lies at ``z = -z_near``. The result is equal to the usual
    symmetric frustum matrix for the same parameters.

    Parameters
    ----------
    field_of_view : float
        Vertical field of view in degrees, in the open interval (0, 180).
    aspect_ratio : float
        Camera width divided by camera height.
    z_near, z_far : float
        Distances of the near and far clipping planes, ``0 < z_near < z_far``.

    Returns
    -------
    numpy.ndarray
        4x4 projection matrix.

    Raises
    ------
    InvalidParameterError
        If any parameter is out of range.
    """
    _require(0 < field_of_view < 180,
             f"field_of_view must be in (0, 180), got {field_of_view}")
    _require(aspect_ratio > 0, f"aspect_ratio must be > 0, got {aspect_ratio}")
    _require(z_near > 0, f"z_near must be > 0, got {z_near}")
    _require(z_far > z_near, f"z_far must be > z_near, got z_near={z_near}, z_far={z_far}")

    # height of the near plane seen under the field of view
    camera_height = 2.0 * z_near * np.tan(np.radians(field_of_view) / 2.0)
    ortho = build_orthographic(camera_height, aspect_ratio, z_near, z_far)

    # where the center of projection ends up in clipping space
    z_center = transform(ortho, (0.0, 0.0, 0.0, 1.0))[2]

    prep = _w_preparation_matrix(z_center, z_near)
    logger.debug(
        "Perspective fov=%s aspect=%s near=%s far=%s (z_center=%.6f)",
        field_of_view, aspect_ratio, z_near, z_far, z_center,
    )
    return multiply(prep, ortho)


@dataclass(frozen=True)
class OrthographicParams:
    """Parameters of :func:`build_orthographic`."""
    camera_height: float
    aspect_ratio: float
    z_near: float
    z_far: float

    def matrix(self):
        return build_orthographic(self.camera_height, self.aspect_ratio, self.z_near, self.z_far)


@dataclass(frozen=True)
class PerspectiveParams:
    """Parameters of :func:`build_perspective`."""
    field_of_view: float
    aspect_ratio: float
    z_near: float
    z_far: float

    def matrix(self):
        return build_perspective(self.field_of_view, self.aspect_ratio, self.z_near, self.z_far)
