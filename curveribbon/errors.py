"""Exceptions raised by curveribbon.

Both exceptions derive from :class:`ValueError` so that callers catching
``ValueError`` for bad input keep working.
"""


class InvalidParameterError(ValueError):
    """A numeric parameter violates a precondition (e.g. ``z_far <= z_near``)."""


class DegenerateGeometryError(ValueError):
    """A direction needed for a frame or tangent has (numerically) zero length."""
