"""Camera system: view and projection matrices for calibrated devices."""

from .conventions import (
    Z_REFLECT,
    X_MIRROR,
    HANDEDNESS_FIX,
    conjugate,
)
from .utils import (
    ensure_4x4_matrix,
    invert_transform,
    is_rigid_transform,
    compute_tan_half_fov,
    to_column_major,
)
from .pose import InvalidPoseError, build_view_matrix, view_matrix_to_pose
from .projection import (
    InvalidFrustumError,
    build_projection_matrix,
    projection_matrix_from_intrinsics,
    extract_intrinsics,
)

__all__ = [
    "Z_REFLECT",
    "X_MIRROR",
    "HANDEDNESS_FIX",
    "conjugate",
    "ensure_4x4_matrix",
    "invert_transform",
    "is_rigid_transform",
    "compute_tan_half_fov",
    "to_column_major",
    "InvalidPoseError",
    "build_view_matrix",
    "view_matrix_to_pose",
    "InvalidFrustumError",
    "build_projection_matrix",
    "projection_matrix_from_intrinsics",
    "extract_intrinsics",
]
