"""Projection matrix construction."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from .conventions import X_MIRROR, conjugate
from .utils import ensure_4x4_matrix


DEFAULT_ZNEAR = 0.1
DEFAULT_ZFAR = 100.0


class InvalidFrustumError(ValueError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidFrustumError(msg)


def extract_intrinsics(intrinsics) -> Tuple[float, float, float, float]:
    """
    Read (fx, fy, cx, cy) from a camera matrix.
    
    Accepts the 3x3 intrinsic matrix or the same values embedded in a 4x4.
    """
    K = ensure_4x4_matrix(intrinsics)
    return float(K[0, 0]), float(K[1, 1]), float(K[0, 2]), float(K[1, 2])


def build_projection_matrix(
    fx: float,
    fy: float,
    cx: float,
    cy: float,
    width: float,
    height: float,
    znear: float = DEFAULT_ZNEAR,
    zfar: float = DEFAULT_ZFAR
) -> np.ndarray:
    """
    Build an off-axis perspective projection from pixel intrinsics.
    
    The core matrix is the right-handed OpenGL frustum written in pixel
    units, with the principal point offset in column 2:
    
        2*fx/w,      0,   1 - 2*cx/w,                      0
             0, 2*fy/h,   1 - 2*cy/h,                      0
             0,      0,  -(f+n)/(f-n),         -2*f*n/(f-n)
             0,      0,           -1,                      0
    
    It is then bracketed by X_MIRROR on both sides to flip the horizontal
    axis into the render convention. View-space depth -znear maps to
    NDC depth -1 and -zfar to +1.
    
    Args:
        fx, fy: Focal lengths (pixels)
        cx, cy: Principal point (pixels)
        width, height: Device resolution (pixels)
        znear, zfar: Near and far clipping planes (world units)
    
    Returns:
        4x4 projection matrix (row-major, float64)
    
    Raises:
        InvalidFrustumError: If width/height <= 0, znear <= 0, zfar <= znear,
            or the intrinsics are non-finite or have non-positive focal lengths
    """
    w = float(width)
    h = float(height)
    n = float(znear)
    f = float(zfar)
    
    _require(np.isfinite([fx, fy, cx, cy, w, h, n, f]).all(), "frustum parameters must be finite")
    _require(w > 0 and h > 0, f"width and height must be > 0, got {w}x{h}")
    _require(n > 0, f"znear must be > 0, got {n}")
    _require(f > n, f"zfar must be > znear, got znear={n} zfar={f}")
    _require(fx > 0 and fy > 0, f"focal lengths must be > 0, got fx={fx} fy={fy}")
    
    P = np.zeros((4, 4), dtype=np.float64)
    
    # Scale factors to map from pixels to NDC [-1, 1]
    P[0, 0] = 2.0 * fx / w
    P[1, 1] = 2.0 * fy / h
    
    # Principal point offset (lens shift)
    P[0, 2] = 1.0 - 2.0 * cx / w
    P[1, 2] = 1.0 - 2.0 * cy / h
    
    # Depth encoding, NDC z in [-1, 1]
    P[2, 2] = -(f + n) / (f - n)
    P[2, 3] = -2.0 * f * n / (f - n)
    
    # clip.w = -z_view
    P[3, 2] = -1.0
    
    return conjugate(P, X_MIRROR)


def projection_matrix_from_intrinsics(
    intrinsics,
    width: float,
    height: float,
    znear: float = DEFAULT_ZNEAR,
    zfar: float = DEFAULT_ZFAR
) -> np.ndarray:
    """Same as `build_projection_matrix`, reading fx, fy, cx, cy from a camera matrix."""
    fx, fy, cx, cy = extract_intrinsics(intrinsics)
    return build_projection_matrix(fx, fy, cx, cy, width, height, znear, zfar)
