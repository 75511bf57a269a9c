"""Triangle-strip ribbon meshes built from curve frames (ribbon.py).

A cross-section is a row of vertices laid out along a frame's section axis,
centered on the curve point. A ribbon is the grid of all cross-sections,
cut into triangle strips that a backend can draw directly with a
triangle-strip primitive. Every strip carries a per-vertex attribute array
(colours or UV coordinates) aligned index for index with its positions.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidParameterError
from ..utils.colormap import uv_coordinates
from ..utils.types import StripLayout

# Module logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class RibbonStrip:
    """One triangle strip of a ribbon.

    Attributes
    ----------
    positions : numpy.ndarray
        Vertex positions, shape (K, 3), float32.
    attributes : numpy.ndarray
        Per-vertex colours (K, 3|4) or UV coordinates (K, 2), float32.
    """
    positions: np.ndarray
    attributes: np.ndarray

    @property
    def vertex_count(self):
        return self.positions.shape[0]


@dataclass(frozen=True, eq=False)
class RibbonMesh:
    """A ribbon as a sequence of triangle strips.

    Attributes
    ----------
    strips : tuple of RibbonStrip
        Strips in drawing order.
    layout : StripLayout
        Direction in which the strips run.
    """
    strips: tuple
    layout: StripLayout

    def __len__(self):
        return len(self.strips)

    def __iter__(self):
        return iter(self.strips)

    @property
    def vertex_counts(self):
        """List of vertex counts, one per strip."""
        return [strip.vertex_count for strip in self.strips]

    def flat(self, homogeneous=False):
        """Return flat float32 buffers ready for upload, one pair per strip.

        Parameters
        ----------
        homogeneous : bool, optional, default False
            If True, positions get a fourth component ``w = 1``.

        Returns
        -------
        list of (numpy.ndarray, numpy.ndarray)
            ``(positions, attributes)`` flattened to 1-D float32 arrays.
        """
        buffers = []
        for strip in self.strips:
            positions = strip.positions
            if homogeneous:
                ones = np.ones((positions.shape[0], 1), dtype=np.float32)
                positions = np.concatenate((positions, ones), axis=1)
            buffers.append((
                np.ascontiguousarray(positions, dtype=np.float32).ravel(),
                np.ascontiguousarray(strip.attributes, dtype=np.float32).ravel(),
            ))
        return buffers


def build_cross_section(center, axis, width, vertex_count):
    """Create ``vertex_count`` points spaced evenly along a line piece.

    The line piece has length ``width``, points along ``axis`` and is
    centered on ``center``: point ``k`` is ``center + u_k * axis`` with
    ``u_k`` running linearly from ``-width/2`` to ``width/2``.

    Parameters
    ----------
    center : array_like
        Center of the cross-section, shape (3,).
    axis : array_like
        Unit direction of the cross-section, shape (3,).
    width : float
        Length of the cross-section.
    vertex_count : int
        Number of points, at least 2.

    Returns
    -------
    numpy.ndarray
        Points of shape (vertex_count, 3), float64.

    Raises
    ------
    InvalidParameterError
        If ``vertex_count < 2``.
    """
    if vertex_count < 2:
        raise InvalidParameterError(f"vertex_count must be >= 2, got {vertex_count}.")
    center = np.asarray(center, dtype=np.float64)
    axis = np.asarray(axis, dtype=np.float64)
    u = np.linspace(-width / 2.0, width / 2.0, vertex_count)
    return center + u[:, np.newaxis] * axis


def build_cross_sections(frames, width, vertex_count):
    """Create the cross-section of every frame.

    Parameters
    ----------
    frames : sequence of Frame
        Frames from :func:`curveribbon.geometry.frames.generate_frames`.
    width : float
        Ribbon width.
    vertex_count : int
        Vertices per cross-section, at least 2.

    Returns
    -------
    numpy.ndarray
        Grid of shape (n_frames, vertex_count, 3).
    """
    return np.stack([
        build_cross_section(frame.position, frame.section_axis, width, vertex_count)
        for frame in frames
    ])


def _attribute_grid(attributes, n_sections, vertex_count):
    """Broadcast per-column or per-vertex attributes to (N, K, C)."""
    if attributes is None:
        attributes = uv_coordinates(vertex_count)
    attributes = np.asarray(attributes, dtype=np.float32)
    if attributes.ndim == 2 and attributes.shape[0] == vertex_count:
        return np.broadcast_to(attributes, (n_sections,) + attributes.shape)
    if attributes.ndim == 3 and attributes.shape[:2] == (n_sections, vertex_count):
        return attributes
    raise InvalidParameterError(
        f"attributes must have shape ({vertex_count}, C) or "
        f"({n_sections}, {vertex_count}, C), got {attributes.shape}."
    )


def _interleave(first, second):
    """Alternate rows of two equally shaped arrays: first[0], second[0], ..."""
    return np.stack((first, second), axis=1).reshape((-1,) + first.shape[1:])


def build_strips(sections, attributes=None, layout=StripLayout.ALONG_WIDTH):
    """Cut a grid of cross-sections into triangle strips.

    Parameters
    ----------
    sections : array_like
        Cross-section grid of shape (N, K, 3): N cross-sections of K
        vertices each.
    attributes : array_like or None, optional
        Colours or UVs, either one row per cross-section vertex (K, C),
        shared by all cross-sections, or one per grid vertex (N, K, C).
        ``None`` gives UV coordinates with u spanning [0, 1] across the
        width and v = 0.
    layout : StripLayout, optional, default StripLayout.ALONG_WIDTH
        ``ALONG_WIDTH`` gives N - 1 strips of 2K vertices; strip ``i``
        visits vertex ``k`` of cross-section ``i + 1`` then of
        cross-section ``i``, for k = 0..K-1. ``ALONG_CURVE`` gives K - 1
        strips of 2N vertices; strip ``k`` visits vertex ``k`` then vertex
        ``k + 1`` of each cross-section in curve order.

    Returns
    -------
    RibbonMesh
        The strips.

    Raises
    ------
    InvalidParameterError
        If the grid has fewer than 2 cross-sections or 2 vertices per
        cross-section, or the attributes do not fit the grid.
    """
    sections = np.asarray(sections, dtype=np.float32)
    if sections.ndim != 3 or sections.shape[2] != 3:
        raise InvalidParameterError(f"sections must have shape (N, K, 3), got {sections.shape}.")
    n_sections, vertex_count = sections.shape[:2]
    if n_sections < 2 or vertex_count < 2:
        raise InvalidParameterError(
            f"A ribbon needs at least 2x2 vertices, got {n_sections}x{vertex_count}."
        )
    grid = _attribute_grid(attributes, n_sections, vertex_count)

    if layout == StripLayout.ALONG_WIDTH:
        strips = tuple(
            RibbonStrip(_interleave(sections[i + 1], sections[i]),
                        _interleave(grid[i + 1], grid[i]))
            for i in range(n_sections - 1)
        )
    elif layout == StripLayout.ALONG_CURVE:
        strips = tuple(
            RibbonStrip(_interleave(sections[:, k], sections[:, k + 1]),
                        _interleave(grid[:, k], grid[:, k + 1]))
            for k in range(vertex_count - 1)
        )
    else:
        raise InvalidParameterError(f"Unknown strip layout {layout!r}.")

    logger.debug("Built %d %s strips from a %dx%d grid",
                 len(strips), layout.name, n_sections, vertex_count)
    return RibbonMesh(strips=strips, layout=layout)


def build_ribbon(frames, width, resolution, attributes=None, layout=StripLayout.ALONG_WIDTH):
    """Build a ribbon surface that follows a sequence of frames.

    Parameters
    ----------
    frames : sequence of Frame
        Frames from :func:`curveribbon.geometry.frames.generate_frames`.
    width : float
        Ribbon width.
    resolution : int
        Vertices per cross-section, at least 2.
    attributes : array_like or None, optional
        Colours or UVs, see :func:`build_strips`.
    layout : StripLayout, optional, default StripLayout.ALONG_WIDTH
        Strip direction, see :func:`build_strips`.

    Returns
    -------
    RibbonMesh
        The ribbon strips.
    """
    if len(frames) < 2:
        raise InvalidParameterError(f"A ribbon needs at least 2 frames, got {len(frames)}.")
    sections = build_cross_sections(frames, width, resolution)
    return build_strips(sections, attributes, layout)
