"""One-call ribbon preparation (prepare.py).

:func:`prepare_ribbon` chains frame generation and strip building and
returns the flat float32 buffers a rendering backend uploads, together with
the mesh they came from.
"""

import logging

import numpy as np

from ..errors import InvalidParameterError
from ..utils.colormap import RAINBOW_COLORS
from ..utils.types import StripLayout
from .frames import generate_frames
from .ribbon import build_ribbon

# Module logger
logger = logging.getLogger(__name__)


def prepare_ribbon(
    points,
    first_axis,
    banking_angles=None,
    width=1.0,
    colors=RAINBOW_COLORS,
    resolution=None,
    layout=StripLayout.ALONG_WIDTH,
    homogeneous=False,
):
    """Prepare rainbow ribbon vertex buffers for GPU upload.

    Parameters
    ----------
    points : array_like
        Polyline of shape (N, 3), N >= 2.
    first_axis : array_like
        Unit vector perpendicular to the curve at its first point.
    banking_angles : array_like or None, optional
        One angle in degrees per point; ``None`` for no banking.
    width : float, optional, default 1.0
        Ribbon width.
    colors : array_like or None, optional, default RAINBOW_COLORS
        One colour per cross-section vertex, shape (K, 3|4). ``None``
        gives UV coordinates instead, in which case ``resolution`` must be
        given.
    resolution : int or None, optional
        Vertices per cross-section; defaults to the number of colours.
    layout : StripLayout, optional, default StripLayout.ALONG_WIDTH
        Strip direction.
    homogeneous : bool, optional, default False
        Emit 4-component positions with ``w = 1``.

    Returns
    -------
    buffers : list of (numpy.ndarray, numpy.ndarray)
        Flat float32 ``(positions, attributes)`` per strip.
    mesh : RibbonMesh
        The strips the buffers were flattened from.

    Raises
    ------
    InvalidParameterError
        If neither ``colors`` nor ``resolution`` is given.
    ValueError
        If the inputs are invalid (see :func:`generate_frames` and
        :func:`build_ribbon`).
    """
    if resolution is None:
        if colors is None:
            raise InvalidParameterError("resolution is required when no colors are given.")
        resolution = len(colors)
    if colors is not None:
        colors = np.asarray(colors, dtype=np.float32)

    frames = generate_frames(points, first_axis, banking_angles)
    mesh = build_ribbon(frames, width, resolution, colors, layout)
    logger.debug("Prepared ribbon: %d strips, %d vertices",
                 len(mesh), sum(mesh.vertex_counts))
    return mesh.flat(homogeneous=homogeneous), mesh
