"""Geometry subpackage: curve frames and ribbon meshes.

Architecture
------------
The subpackage has three layers:

**Layer 1: frames** (:mod:`~curveribbon.geometry.frames`):
``generate_frames`` propagates a non-twisting (tangent, u, v) frame along a
polyline and applies per-point banking. ``curve_tangents`` and
``propagate_frame`` expose the individual steps.

**Layer 2: meshes** (:mod:`~curveribbon.geometry.ribbon`):
``build_cross_section`` lays out the vertices of one cross-section;
``build_ribbon`` / ``build_strips`` cut the cross-section grid into
triangle strips carrying colours or UVs.

**Layer 3: preparation** (:mod:`~curveribbon.geometry.prepare`):
``prepare_ribbon`` chains both layers and returns flat float32 buffers.

Sample inputs live in :mod:`~curveribbon.geometry.curves`.
"""
from .curves import (
    band_colors,
    flat_rainbow_sections,
    linear_banking,
    straight_line,
    wavy_rainbow_curve,
)
from .frames import Frame, curve_tangents, generate_frames, propagate_frame
from .prepare import prepare_ribbon
from .ribbon import (
    RibbonMesh,
    RibbonStrip,
    build_cross_section,
    build_cross_sections,
    build_ribbon,
    build_strips,
)

__all__ = [
    # Layer 3: preparation
    'prepare_ribbon',
    # Layer 2: meshes
    'RibbonMesh',
    'RibbonStrip',
    'build_cross_section',
    'build_cross_sections',
    'build_ribbon',
    'build_strips',
    # Layer 1: frames
    'Frame',
    'curve_tangents',
    'generate_frames',
    'propagate_frame',
    # Sample curves
    'straight_line',
    'wavy_rainbow_curve',
    'linear_banking',
    'flat_rainbow_sections',
    'band_colors',
]
