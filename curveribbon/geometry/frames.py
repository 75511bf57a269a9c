"""Cross-section frames propagated along a polyline (frames.py).

Each point of a curve gets a frame: the unit tangent of the curve plus two
unit axes (u, v) spanning the plane perpendicular to it. The u-axis of the
first frame is given by the caller. Every following u-axis is the previous
one projected onto the new perpendicular plane, so the frames turn only as
much as the curve bends and do not twist around it. A per-point banking
angle then rotates the cross-section direction about the tangent without
being carried on to later frames.

The propagation is a fold over the points (:func:`propagate_frame` is one
step) so that it can be checked frame by frame.

Consecutive tangents are assumed never to make a right angle; the
projection of the previous u-axis degenerates there.
"""

import logging
from dataclasses import dataclass
from functools import reduce

import numpy as np

from ..errors import DegenerateGeometryError, InvalidParameterError
from ..transforms.linalg import cross, normalize, rotation, transform

# Module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Frame:
    """Orientation of the cross-section at one curve point.

    ``u_axis`` is perpendicular to ``tangent`` and ``v_axis`` is
    ``cross(previous u, tangent)``, so ``cross(u_axis, v_axis) == -tangent``.
    Banking rotates ``u_axis`` towards ``v_axis``.

    Attributes
    ----------
    position : numpy.ndarray
        Curve point, shape (3,).
    tangent : numpy.ndarray
        Unit tangent of the curve at ``position``.
    u_axis, v_axis : numpy.ndarray
        Unit axes of the un-banked cross-section plane.
    banking_angle : float
        Rotation of the cross-section about the tangent, in degrees.
    section_axis : numpy.ndarray
        ``u_axis`` rotated by ``banking_angle``; the direction along which
        the cross-section is laid out.
    """
    position: np.ndarray
    tangent: np.ndarray
    u_axis: np.ndarray
    v_axis: np.ndarray
    banking_angle: float
    section_axis: np.ndarray


def curve_tangents(points):
    """Return the unit tangent at every point of a polyline.

    The tangent at point ``i`` is the direction from point ``i - 1`` to
    point ``i + 1``. At the first point the curve starts at the point itself
    and at the last point it ends there, so the end tangents are the
    directions of the first and last segments.

    Parameters
    ----------
    points : array_like
        Polyline of shape (N, 3), N >= 2.

    Returns
    -------
    numpy.ndarray
        Unit tangents of shape (N, 3).

    Raises
    ------
    DegenerateGeometryError
        If the neighbours of a point coincide.
    """
    points = np.asarray(points, dtype=np.float64)
    last = len(points) - 1
    tangents = np.empty_like(points)
    for i in range(len(points)):
        chord = points[min(i + 1, last)] - points[max(i - 1, 0)]
        try:
            tangents[i] = normalize(chord)
        except DegenerateGeometryError as err:
            raise DegenerateGeometryError(
                f"Curve has no direction at point {i} {points[i].tolist()}: "
                "neighbouring points coincide."
            ) from err
    return tangents


def propagate_frame(previous_u_axis, position, tangent, banking_angle=0.0):
    """Build the frame at ``position`` from the previous frame's u-axis.

    Parameters
    ----------
    previous_u_axis : array_like
        Un-banked u-axis of the previous frame (or the initial axis).
    position : array_like
        Curve point.
    tangent : array_like
        Unit tangent at ``position``.
    banking_angle : float, optional, default 0.0
        Rotation of the cross-section about the tangent, in degrees.

    Returns
    -------
    Frame
        The new frame.

    Raises
    ------
    DegenerateGeometryError
        If ``previous_u_axis`` is parallel to ``tangent``.
    """
    tangent = np.asarray(tangent, dtype=np.float64)
    v_axis = normalize(cross(previous_u_axis, tangent))
    u_axis = normalize(cross(tangent, v_axis))

    # rotate about -tangent, i.e. from the u-axis towards the v-axis
    banking = rotation(np.radians(banking_angle), -tangent)
    section_axis = transform(banking, np.append(u_axis, 0.0))[:3]

    return Frame(
        position=np.asarray(position, dtype=np.float64),
        tangent=tangent,
        u_axis=u_axis,
        v_axis=v_axis,
        banking_angle=float(banking_angle),
        section_axis=section_axis,
    )


def generate_frames(points, first_axis, banking_angles=None):
    """Propagate cross-section frames along a polyline.

    Parameters
    ----------
    points : array_like
        Polyline of shape (N, 3), N >= 2.
    first_axis : array_like
        Unit vector perpendicular to the curve at its first point; becomes
        the first frame's u-axis. Perpendicularity is not checked: a skewed
        axis is projected onto the plane perpendicular to the first
        tangent, which is only close to the intended direction when the
        skew is small.
    banking_angles : array_like or None, optional
        One banking angle in degrees per point. ``None`` means no banking.

    Returns
    -------
    tuple of Frame
        One frame per point.

    Raises
    ------
    InvalidParameterError
        If there are fewer than two points, the points are not 3-D, or the
        number of banking angles differs from the number of points.
    DegenerateGeometryError
        If a tangent or axis cannot be determined.
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise InvalidParameterError(f"points must have shape (N, 3), got {points.shape}.")
    if points.shape[0] < 2:
        raise InvalidParameterError(f"A curve needs at least 2 points, got {points.shape[0]}.")
    if banking_angles is None:
        banking_angles = np.zeros(points.shape[0])
    banking_angles = np.asarray(banking_angles, dtype=np.float64)
    if banking_angles.shape != (points.shape[0],):
        raise InvalidParameterError(
            f"Expected {points.shape[0]} banking angles, got {banking_angles.size}."
        )

    def step(carry, sample):
        previous_u_axis, frames = carry
        frame = propagate_frame(previous_u_axis, *sample)
        return frame.u_axis, frames + (frame,)

    initial = (np.asarray(first_axis, dtype=np.float64), ())
    _, frames = reduce(step, zip(points, curve_tangents(points), banking_angles), initial)
    logger.debug("Generated %d frames", len(frames))
    return frames
