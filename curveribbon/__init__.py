"""curveribbon: ribbon meshes along 3D curves and camera/projection matrices.

curveribbon computes what a rendering backend needs to draw a ribbon (for
instance a rainbow) that follows a curve through space:

- **Frames**: a non-twisting (tangent, u, v) frame at every point of a
  polyline, with optional per-point banking
- **Ribbons**: triangle-strip vertex buffers with per-vertex colours or UVs
- **Matrices**: model, view, orthographic and perspective projection
  matrices as 16 column-major floats

Window creation, shaders and buffer upload are left to the backend.

For a complete rainbow::

    from curveribbon import generate_frames, build_ribbon, RAINBOW_COLORS
    from curveribbon.geometry import wavy_rainbow_curve, linear_banking

    points = wavy_rainbow_curve(100)
    frames = generate_frames(points, (1, 0, 0), linear_banking(100, 90))
    mesh = build_ribbon(frames, width=1.0, resolution=7, attributes=RAINBOW_COLORS)
    for positions, colors in mesh.flat():
        ...  # upload and draw as GL_TRIANGLE_STRIP

And the matching camera::

    from curveribbon import build_mvp_matrix, build_perspective, CameraPose
    from curveribbon.transforms import column_major

    mvp = build_mvp_matrix(
        build_perspective(45, 4 / 3, 1, 100),
        CameraPose(z=4).view_matrix(),
        CameraPose(x=-1, yaw=-90, roll=90).model_matrix(),
    )
    uniform = column_major(mvp)
"""

from ._config import sys_info  # noqa: F401
from ._version import __version__  # noqa: F401
from .errors import DegenerateGeometryError, InvalidParameterError
from .geometry import Frame, RibbonMesh, build_cross_section, build_ribbon, generate_frames
from .transforms import (
    CameraPose,
    build_model_matrix,
    build_mvp_matrix,
    build_orthographic,
    build_perspective,
    build_view_matrix,
)
from .utils import RAINBOW_COLORS, StripLayout

__all__ = [
    "__version__",
    "sys_info",
    "InvalidParameterError",
    "DegenerateGeometryError",
    "Frame",
    "RibbonMesh",
    "generate_frames",
    "build_cross_section",
    "build_ribbon",
    "CameraPose",
    "build_model_matrix",
    "build_view_matrix",
    "build_mvp_matrix",
    "build_orthographic",
    "build_perspective",
    "RAINBOW_COLORS",
    "StripLayout",
]
