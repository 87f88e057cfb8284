"""Pose to view matrix conversion."""

from __future__ import annotations
import numpy as np

from .conventions import Z_REFLECT, HANDEDNESS_FIX, conjugate
from .utils import ensure_4x4_matrix, invert_transform, is_rigid_transform, RIGID_ATOL


class InvalidPoseError(ValueError):
    pass


def _require_rigid(m: np.ndarray, what: str, atol: float) -> None:
    if not np.isfinite(m).all():
        raise InvalidPoseError(f"{what} contains NaN or Inf")
    if not is_rigid_transform(m, atol=atol):
        raise InvalidPoseError(
            f"{what} is not a rigid transform (orthonormal rotation, det +1, "
            f"bottom row [0, 0, 0, 1])"
        )


def build_view_matrix(pose, atol: float = RIGID_ATOL) -> np.ndarray:
    """
    Build a render view matrix from a calibrated device pose.
    
    The pose maps device-local space to world space in the right-handed
    computer-vision convention (device looks down +Z). The result maps
    left-handed render-world space to an OpenGL-style view space where the
    device looks down -Z.
    
    Steps:
        1. Invert the pose (world -> device).
        2. Reflect Z so the device looks down -Z.
        3. Conjugate with HANDEDNESS_FIX, which negates the X translation
           and the rotation terms coupling X with Y and Z.
    
    Args:
        pose: (4, 4) local-to-world rigid transform (3x4 or flat 16 accepted)
        atol: Tolerance for the rigidity check
    
    Returns:
        (4, 4) view matrix (float64, row-major)
    
    Raises:
        InvalidPoseError: If the pose is singular, non-finite or not rigid
    """
    try:
        P = ensure_4x4_matrix(pose)
    except ValueError as e:
        raise InvalidPoseError(str(e)) from e
    
    _require_rigid(P, "pose", atol)
    
    try:
        world_to_device = invert_transform(P)
    except np.linalg.LinAlgError as e:
        raise InvalidPoseError(f"pose is singular: {e}") from e
    
    view = Z_REFLECT @ world_to_device
    return conjugate(view, HANDEDNESS_FIX)


def view_matrix_to_pose(view, atol: float = RIGID_ATOL) -> np.ndarray:
    """
    Inverse of `build_view_matrix`: recover the calibration pose.
    
    Undoes the handedness fix and the Z reflection, then inverts.
    """
    try:
        V = ensure_4x4_matrix(view)
    except ValueError as e:
        raise InvalidPoseError(str(e)) from e
    
    world_to_device = Z_REFLECT @ conjugate(V, HANDEDNESS_FIX)
    _require_rigid(world_to_device, "view matrix", atol)
    
    return invert_transform(world_to_device)
