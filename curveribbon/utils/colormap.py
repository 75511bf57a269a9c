"""Colour palettes and texture coordinates for ribbon vertices."""

import numpy as np

# Red, orange, yellow, green, cyan, blue, violet.
RAINBOW_COLORS = np.array([
    [1.0, 0.0, 0.0],
    [1.0, 0.5, 0.0],
    [1.0, 1.0, 0.0],
    [0.0, 1.0, 0.0],
    [0.0, 1.0, 1.0],
    [0.0, 0.0, 1.0],
    [0.5, 0.0, 1.0],
], dtype=np.float32)


def u_coordinates(count):
    """Return ``count`` texture coordinates spaced evenly over [0, 1].

    Parameters
    ----------
    count : int
        Number of coordinates, at least 2.

    Returns
    -------
    numpy.ndarray
        Array of shape (count,) and dtype float32.
    """
    return np.linspace(0.0, 1.0, count, dtype=np.float32)


def uv_coordinates(count):
    """Return (u, v) pairs with u from :func:`u_coordinates` and v = 0.

    Parameters
    ----------
    count : int
        Number of coordinates, at least 2.

    Returns
    -------
    numpy.ndarray
        Array of shape (count, 2) and dtype float32.
    """
    uv = np.zeros((count, 2), dtype=np.float32)
    uv[:, 0] = u_coordinates(count)
    return uv


def gradient_locations(colors=RAINBOW_COLORS):
    """Return the u location of each colour stop for a gradient shader.

    The stops are spread evenly across the ribbon width, so the first colour
    sits at u = 0 and the last at u = 1.

    Parameters
    ----------
    colors : array_like, optional
        Colour table of shape (n_colors, 3|4). Defaults to
        :data:`RAINBOW_COLORS`.

    Returns
    -------
    numpy.ndarray
        Array of shape (n_colors,) and dtype float32.
    """
    return u_coordinates(len(colors))
