"""Point projection through view and projection matrices."""

from __future__ import annotations
from typing import Tuple
import numpy as np


def project_points_to_ndc(
    xyz: np.ndarray,
    view_matrix: np.ndarray,
    proj_matrix: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Project render-world points to normalized device coordinates.
    
    Args:
        xyz: (N, 3) render-world positions
        view_matrix: (4, 4) view matrix (row-major)
        proj_matrix: (4, 4) projection matrix (row-major)
    
    Returns:
        ndc: (N, 3) NDC coordinates (x, y, depth), NaN where invalid
        valid: (N,) boolean mask, True for finite points in front of the device
    """
    xyz = np.asarray(xyz, dtype=np.float64).reshape(-1, 3)
    N = xyz.shape[0]
    
    # Homogeneous coordinates
    xyz_homogeneous = np.concatenate([xyz, np.ones((N, 1))], axis=1)
    
    full = np.asarray(proj_matrix, dtype=np.float64) @ np.asarray(view_matrix, dtype=np.float64)
    clip = xyz_homogeneous @ full.T
    
    # Perspective division
    w = clip[:, 3]
    valid = np.isfinite(clip).all(axis=1) & (w > 0)
    
    ndc = np.full((N, 3), np.nan, dtype=np.float64)
    ndc[valid] = clip[valid, :3] / w[valid, None]
    
    return ndc, valid


def ndc_to_pixel(ndc: np.ndarray, width: float, height: float) -> np.ndarray:
    """
    Map NDC x, y to device pixel coordinates (u, v).
    
    Inverse of the pixel placement produced by `build_projection_matrix`:
    x_ndc = 1 - 2u/w and y_ndc = 2v/h - 1.
    """
    ndc = np.atleast_2d(np.asarray(ndc, dtype=np.float64))
    u = (1.0 - ndc[:, 0]) * 0.5 * float(width)
    v = (ndc[:, 1] + 1.0) * 0.5 * float(height)
    return np.stack([u, v], axis=1)
