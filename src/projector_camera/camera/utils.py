"""Camera matrix utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np


RIGID_ATOL = 1e-4


def ensure_4x4_matrix(m, dtype=np.float64) -> np.ndarray:
    """
    Convert input to 4x4 numpy array.
    
    Args:
        m: 4x4 array, 3x4 [R|t] block, 3x3 matrix, or flat list of 16 floats
        dtype: Output dtype
    
    Returns:
        4x4 numpy array (a new copy)
    
    Raises:
        ValueError: If input cannot be brought to 4x4
    """
    M = np.array(m, dtype=dtype)
    
    if M.shape == (16,):
        M = M.reshape(4, 4)
    
    if M.shape in ((3, 3), (3, 4)):
        out = np.eye(4, dtype=dtype)
        out[:3, :M.shape[1]] = M
        M = out
    
    if M.shape != (4, 4):
        raise ValueError(
            f"Expected 4x4, 3x4, 3x3 matrix or flat length-16 array, got shape {M.shape}"
        )
    
    return M


def is_rigid_transform(m: np.ndarray, atol: float = RIGID_ATOL) -> bool:
    """
    Check that a 4x4 matrix is a proper rigid transform.
    
    Requires finite entries, bottom row [0, 0, 0, 1] and an orthonormal
    rotation block with determinant +1, all within `atol`.
    """
    M = np.asarray(m, dtype=np.float64)
    if M.shape != (4, 4) or not np.isfinite(M).all():
        return False
    
    if not np.allclose(M[3], [0.0, 0.0, 0.0, 1.0], atol=atol):
        return False
    
    R = M[:3, :3]
    if not np.allclose(R.T @ R, np.eye(3), atol=atol):
        return False
    
    return bool(abs(np.linalg.det(R) - 1.0) <= atol)


def invert_transform(m: np.ndarray) -> np.ndarray:
    """
    Compute inverse of 4x4 transformation matrix.
    
    Args:
        m: 4x4 transformation matrix
    
    Returns:
        Inverted 4x4 matrix
    
    Raises:
        numpy.linalg.LinAlgError: If the matrix is singular
    """
    return np.linalg.inv(m)


def compute_tan_half_fov(
    fx: float, 
    fy: float, 
    width: float, 
    height: float
) -> Tuple[float, float]:
    """
    Compute tangent of half FOV from pinhole camera intrinsics.
    
    For a pinhole camera:
        tan(FOVx/2) = width / (2 * fx)
        tan(FOVy/2) = height / (2 * fy)
    
    Args:
        fx: Focal length in x (pixels)
        fy: Focal length in y (pixels)
        width: Image width (pixels)
        height: Image height (pixels)
    
    Returns:
        (tanfovx, tanfovy): Tangent of half horizontal and vertical FOV
    """
    tanfovx = float(width) / (2.0 * float(fx))
    tanfovy = float(height) / (2.0 * float(fy))
    return tanfovx, tanfovy


def to_column_major(m: np.ndarray) -> np.ndarray:
    """Transposed contiguous copy, for rasterizer APIs that expect column-major storage."""
    return np.ascontiguousarray(np.asarray(m).T)
