"""Rotation matrix / quaternion conversion."""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion, scalar first."""
    w: float
    x: float
    y: float
    z: float
    
    def as_wxyz(self) -> np.ndarray:
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)
    
    def as_xyzw(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)


def _sign(v: float) -> float:
    # zero counts as positive
    return 1.0 if v >= 0.0 else -1.0


def rotation_matrix_to_quaternion(m) -> Quaternion:
    """
    Convert a rotation matrix to a unit quaternion.
    
    Args:
        m: (3, 3) rotation matrix, or (4, 4) transform whose upper-left
           block is a rotation
    
    Returns:
        Quaternion (w, x, y, z) with w >= 0
    
    Notes:
        - Each component magnitude comes from the diagonal,
          sqrt(max(0, 1 +/- m00 +/- m11 +/- m22)) / 2, then x, y, z take the
          sign of the skew terms m21-m12, m02-m20, m10-m01.
        - The input is not checked for orthonormality; a non-rotation gives
          a meaningless but finite result.
        - For 180 degree rotations the skew terms vanish, so the sign of
          the affected components is arbitrary (magnitudes stay correct).
    """
    R = np.asarray(m, dtype=np.float64)[:3, :3]
    m00, m11, m22 = R[0, 0], R[1, 1], R[2, 2]
    
    w = np.sqrt(max(0.0, 1.0 + m00 + m11 + m22)) / 2.0
    x = np.sqrt(max(0.0, 1.0 + m00 - m11 - m22)) / 2.0
    y = np.sqrt(max(0.0, 1.0 - m00 + m11 - m22)) / 2.0
    z = np.sqrt(max(0.0, 1.0 - m00 - m11 + m22)) / 2.0
    
    x *= _sign(x * (R[2, 1] - R[1, 2]))
    y *= _sign(y * (R[0, 2] - R[2, 0]))
    z *= _sign(z * (R[1, 0] - R[0, 1]))
    
    return Quaternion(float(w), float(x), float(y), float(z))


def quaternion_to_rotation_matrix(q: Quaternion) -> np.ndarray:
    """
    Convert a quaternion to a 3x3 rotation matrix.
    
    The quaternion is normalized first.
    """
    w, x, y, z = q.as_wxyz() / np.linalg.norm(q.as_wxyz())
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ], dtype=np.float64)
