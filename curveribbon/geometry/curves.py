"""Sample curves and banking profiles for rainbow ribbons."""

import numpy as np

from ..errors import InvalidParameterError
from ..transforms.linalg import normalize
from ..utils.colormap import RAINBOW_COLORS


def straight_line(count, spacing=1.0, direction=(1.0, 0.0, 0.0), start=(0.0, 0.0, 0.0)):
    """Return ``count`` points spaced ``spacing`` apart along ``direction``.

    Parameters
    ----------
    count : int
        Number of points, at least 2.
    spacing : float, optional, default 1.0
        Distance between consecutive points.
    direction : array_like, optional
        Direction of the line; normalized internally.
    start : array_like, optional
        First point.

    Returns
    -------
    numpy.ndarray
        Points of shape (count, 3).
    """
    if count < 2:
        raise InvalidParameterError(f"count must be >= 2, got {count}.")
    steps = np.arange(count, dtype=np.float64)[:, np.newaxis] * spacing
    return np.asarray(start, dtype=np.float64) + steps * normalize(direction)


def wavy_rainbow_curve(count=100, length=2.0, wobble=0.1):
    """Return a curve heading down the negative z-axis with one sideways wave.

    The curve starts at the origin, ends at ``z = -length`` and swings in x
    by ``wobble`` through a full sine period.

    Parameters
    ----------
    count : int, optional, default 100
        Number of points, at least 2.
    length : float, optional, default 2.0
        Extent along the negative z-axis.
    wobble : float, optional, default 0.1
        Amplitude of the sideways wave.

    Returns
    -------
    numpy.ndarray
        Points of shape (count, 3), all with y = 0.
    """
    if count < 2:
        raise InvalidParameterError(f"count must be >= 2, got {count}.")
    t = np.linspace(0.0, 1.0, count)
    points = np.zeros((count, 3))
    points[:, 0] = -np.sin(2.0 * np.pi * t) * wobble
    points[:, 2] = -length * t
    return points


def linear_banking(count, max_angle=90.0):
    """Return banking angles rising linearly from 0 to ``max_angle`` degrees."""
    return np.linspace(0.0, max_angle, count)


def flat_rainbow_sections(step_count=100, color_count=7, length=2.0, width=1.0,
                          wave_cycles=1.3, wave_height=0.125):
    """Return a flat wavy rainbow as a band-edge grid in the xy-plane.

    The rainbow runs along x from ``-length/2`` to ``length/2``, is
    ``width`` tall and is shifted up and down by a sine wave. Row ``c`` of
    the grid is the lower edge of colour band ``c``, sampled at every step.
    No frames are involved: cut the grid with
    :func:`curveribbon.geometry.ribbon.build_strips` using
    ``StripLayout.ALONG_WIDTH``, which emits row ``c + 1`` before row ``c``
    and so gives triangles facing +z.

    Parameters
    ----------
    step_count : int, optional, default 100
        Number of samples along the rainbow.
    color_count : int, optional, default 7
        Number of rows (one per colour band edge).
    length, width : float, optional
        Size of the rainbow.
    wave_cycles : float, optional, default 1.3
        Number of sine periods along the length.
    wave_height : float, optional, default 0.125
        Amplitude of the vertical wave.

    Returns
    -------
    numpy.ndarray
        Grid of shape (color_count, step_count, 3).
    """
    if step_count < 2 or color_count < 2:
        raise InvalidParameterError(
            f"Need at least 2 steps and 2 colours, got {step_count} and {color_count}."
        )
    u = np.linspace(0.0, 1.0, color_count)[:, np.newaxis]
    t = np.linspace(0.0, 1.0, step_count)[np.newaxis, :]
    grid = np.zeros((color_count, step_count, 3))
    grid[..., 0] = (t - 0.5) * length
    grid[..., 1] = (u - 0.5) * width + np.sin(wave_cycles * 2.0 * np.pi * t) * wave_height
    return grid


def band_colors(step_count, colors=RAINBOW_COLORS):
    """Repeat one colour per grid row across ``step_count`` samples.

    Gives the per-vertex attributes for :func:`flat_rainbow_sections`.

    Returns
    -------
    numpy.ndarray
        Array of shape (n_colors, step_count, C) and dtype float32.
    """
    colors = np.asarray(colors, dtype=np.float32)
    return np.repeat(colors[:, np.newaxis, :], step_count, axis=1)
