import numpy as np
import pytest

from projector_camera.camera.conventions import HANDEDNESS_FIX, X_MIRROR, Z_REFLECT, conjugate


def test_correction_matrices_are_sign_diagonals():
    assert np.array_equal(Z_REFLECT, np.diag([1.0, 1.0, -1.0, 1.0]))
    assert np.array_equal(X_MIRROR, np.diag([-1.0, 1.0, 1.0, 1.0]))
    assert np.array_equal(HANDEDNESS_FIX, np.diag([-1.0, 1.0, 1.0, 1.0]))
    for c in (Z_REFLECT, X_MIRROR, HANDEDNESS_FIX):
        assert np.array_equal(c @ c, np.eye(4))


def test_correction_matrices_are_read_only():
    with pytest.raises(ValueError):
        Z_REFLECT[2, 2] = 1.0


def test_handedness_conjugation_negates_x_coupling_terms(rng):
    m = rng.normal(size=(4, 4))
    m[3] = [0.0, 0.0, 0.0, 1.0]

    expected = m.copy()
    for i, j in [(0, 3), (0, 1), (1, 0), (0, 2), (2, 0)]:
        expected[i, j] = -expected[i, j]

    assert np.allclose(conjugate(m, HANDEDNESS_FIX), expected)
