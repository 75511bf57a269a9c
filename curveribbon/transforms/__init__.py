"""Matrix helpers (transforms package).

Functions are re-exported at package level for convenience, e.g.:

    from curveribbon.transforms import build_perspective, build_view_matrix

"""

from .camera import CameraPose, build_model_matrix, build_mvp_matrix, build_view_matrix
from .controls import CameraState, Control, apply_controls
from .linalg import (
    column_major,
    cross,
    dot,
    identity,
    inverse,
    multiply,
    normalize,
    rotation,
    scale,
    transform,
    translation,
)
from .projection import (
    OrthographicParams,
    PerspectiveParams,
    build_orthographic,
    build_perspective,
    viewport_aspect_ratio,
)

__all__ = [
    'identity', 'translation', 'rotation', 'scale', 'multiply', 'transform',
    'inverse', 'normalize', 'cross', 'dot', 'column_major',
    'CameraPose', 'build_model_matrix', 'build_view_matrix', 'build_mvp_matrix',
    'OrthographicParams', 'PerspectiveParams', 'build_orthographic',
    'build_perspective', 'viewport_aspect_ratio',
    'CameraState', 'Control', 'apply_controls',
]
