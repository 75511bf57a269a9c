"""4x4 matrix and 3/4-vector primitives.

Matrices are numpy ``(4, 4)`` arrays laid out the way :mod:`pyrr` lays them
out: ``m[i, j]`` holds column ``i``, row ``j`` of the mathematical matrix.
Flattening a matrix in C order therefore yields the 16 column-major floats
that ``glUniformMatrix4fv(..., transpose=False)`` expects, see
:func:`column_major`.

The functions below use mathematical notation regardless of storage:
``multiply(a, b)`` is ``A·B`` (``B`` applied first) and ``transform(m, v)``
is ``M·v``.
"""

import numpy as np
import pyrr

from ..errors import DegenerateGeometryError

# Lengths below this are treated as zero by normalize().
EPSILON = 1e-10


def identity():
    """Return a new 4x4 identity matrix.

    Returns
    -------
    numpy.ndarray
        4x4 float64 identity matrix.
    """
    return pyrr.matrix44.create_identity(dtype=np.float64)


def translation(x, y, z):
    """Return a matrix translating by ``(x, y, z)``.

    Parameters
    ----------
    x, y, z : float
        Translation components.

    Returns
    -------
    numpy.ndarray
        4x4 translation matrix.
    """
    return pyrr.matrix44.create_from_translation(
        np.array([x, y, z], dtype=np.float64), dtype=np.float64
    )


def scale(sx, sy, sz):
    """Return a matrix scaling by ``(sx, sy, sz)``.

    Parameters
    ----------
    sx, sy, sz : float
        Scale factors along x, y and z.

    Returns
    -------
    numpy.ndarray
        4x4 scale matrix.
    """
    return pyrr.matrix44.create_from_scale(
        np.array([sx, sy, sz], dtype=np.float64), dtype=np.float64
    )


def rotation(angle, axis):
    """Return a right-handed rotation by ``angle`` radians about ``axis``.

    Uses Rodrigues' formula; ``axis`` does not need to be normalized.

    Parameters
    ----------
    angle : float
        Rotation angle in radians (counter-clockwise looking down ``axis``).
    axis : array_like
        3-vector rotation axis.

    Returns
    -------
    numpy.ndarray
        4x4 rotation matrix.

    Raises
    ------
    DegenerateGeometryError
        If ``axis`` has zero length.
    """
    x, y, z = normalize(axis)
    c, s = np.cos(angle), np.sin(angle)
    t = 1.0 - c
    r3 = np.array([
        [t*x*x + c,   t*x*y - s*z, t*x*z + s*y],
        [t*x*y + s*z, t*y*y + c,   t*y*z - s*x],
        [t*x*z - s*y, t*y*z + s*x, t*z*z + c  ],
    ], dtype=np.float64)

    r4 = identity()
    # stored transposed, see module docstring
    r4[:3, :3] = r3.T
    return r4


def multiply(a, b):
    """Return the matrix product ``A·B`` without modifying either operand.

    Parameters
    ----------
    a, b : array_like
        4x4 matrices.

    Returns
    -------
    numpy.ndarray
        New 4x4 matrix applying ``b`` first, then ``a``.
    """
    return pyrr.matrix44.multiply(np.asarray(b, dtype=np.float64),
                                  np.asarray(a, dtype=np.float64))


def transform(m, v):
    """Return the matrix-vector product ``M·v``.

    Parameters
    ----------
    m : array_like
        4x4 matrix.
    v : array_like
        4-vector, or 3-vector interpreted as a point (``w = 1``).

    Returns
    -------
    numpy.ndarray
        Transformed 4-vector.
    """
    v = np.asarray(v, dtype=np.float64)
    if v.shape == (3,):
        v = np.append(v, 1.0)
    if v.shape != (4,):
        raise ValueError(f"Expected a 3- or 4-vector, got shape {v.shape}.")
    return np.dot(v, np.asarray(m, dtype=np.float64))


def inverse(m):
    """Return the inverse of a 4x4 matrix.

    Parameters
    ----------
    m : array_like
        Invertible 4x4 matrix.

    Returns
    -------
    numpy.ndarray
        4x4 inverse matrix.
    """
    # transposition commutes with inversion, so the storage layout is kept
    return pyrr.matrix44.inverse(np.asarray(m, dtype=np.float64))


def normalize(v):
    """Return ``v`` scaled to unit length.

    Parameters
    ----------
    v : array_like
        Vector of any dimension.

    Returns
    -------
    numpy.ndarray
        Unit vector with the direction of ``v``.

    Raises
    ------
    DegenerateGeometryError
        If ``|v|`` is zero (below :data:`EPSILON`).
    """
    v = np.asarray(v, dtype=np.float64)
    length = np.linalg.norm(v)
    if length < EPSILON:
        raise DegenerateGeometryError(f"Cannot normalize zero-length vector {v.tolist()}.")
    return v / length


def cross(a, b):
    """Return the cross product ``a x b`` of two 3-vectors."""
    return np.cross(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))


def dot(a, b):
    """Return the dot product of two vectors as a float."""
    return float(np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)))


def column_major(m):
    """Return the 16 column-major float32 values of a matrix for upload.

    Parameters
    ----------
    m : array_like
        4x4 matrix.

    Returns
    -------
    numpy.ndarray
        Flat float32 array of length 16.
    """
    return np.ascontiguousarray(m, dtype=np.float32).reshape(16)
