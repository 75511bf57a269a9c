"""Small shared helpers: enums and colour tables."""

from .colormap import RAINBOW_COLORS, gradient_locations, u_coordinates, uv_coordinates
from .types import StripLayout

__all__ = [
    'RAINBOW_COLORS', 'gradient_locations', 'u_coordinates', 'uv_coordinates',
    'StripLayout',
]
