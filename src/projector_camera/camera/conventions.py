"""Coordinate-convention correction matrices."""

from __future__ import annotations
import numpy as np


# Camera looks down +z (calibration) -> camera looks down -z (view space)
Z_REFLECT = np.diag([1.0, 1.0, -1.0, 1.0])

# Horizontal flip of clip space, brackets the core projection
X_MIRROR = np.diag([-1.0, 1.0, 1.0, 1.0])

# Right-handed calibration world <-> left-handed render world
HANDEDNESS_FIX = np.diag([-1.0, 1.0, 1.0, 1.0])

for _m in (Z_REFLECT, X_MIRROR, HANDEDNESS_FIX):
    _m.setflags(write=False)
del _m


def conjugate(m: np.ndarray, c: np.ndarray) -> np.ndarray:
    """
    Apply a self-inverse correction on both sides: c @ m @ c.
    
    With a diagonal sign matrix this negates every entry (i, j) where
    exactly one of c[i, i], c[j, j] is negative.
    """
    return c @ m @ c
