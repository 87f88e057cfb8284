"""Debug utilities."""

from __future__ import annotations
import os
import numpy as np

DEBUG_ENV_VAR = "PROJCAM_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix_info(name: str, m):
    """Print a matrix with its shape and determinant."""
    if is_debug_enabled():
        M = np.asarray(m)
        det = np.linalg.det(M) if M.ndim == 2 and M.shape[0] == M.shape[1] else float("nan")
        body = np.array2string(M, precision=5, suppress_small=True)
        print(f"[{name}] shape={M.shape} det={det:.5g}\n{body}")
