"""Contains the enumeration types used in curveribbon.

Classes
-------
StripLayout
    How :func:`curveribbon.geometry.ribbon.build_ribbon` cuts a ribbon into
    triangle strips.
"""

import enum


class StripLayout(enum.Enum):
    """Direction in which ribbon triangle strips run.

    Attributes
    ----------
    ALONG_WIDTH : int
        One strip per pair of adjacent cross-sections. Each strip zig-zags
        across the ribbon width, alternating between the later and the
        earlier cross-section.
    ALONG_CURVE : int
        One strip per pair of adjacent cross-section vertices. Each strip
        runs the full length of the curve, as used for UV-textured ribbons.
    """
    ALONG_WIDTH = 1
    ALONG_CURVE = 2
