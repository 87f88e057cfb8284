import numpy as np
import pytest

from projector_camera.camera.utils import (
    compute_tan_half_fov,
    ensure_4x4_matrix,
    is_rigid_transform,
    to_column_major,
)
from projector_camera.utils.conversion import to_numpy_array, to_torch_tensor
from projector_camera.utils.debug import debug_matrix_info, debug_print, is_debug_enabled


def test_ensure_4x4_embeds_smaller_blocks():
    K = ensure_4x4_matrix([[800, 0, 640], [0, 800, 360], [0, 0, 1]])
    assert K.shape == (4, 4)
    assert K[0, 2] == 640.0 and K[3, 3] == 1.0 and K[2, 3] == 0.0
    assert ensure_4x4_matrix(list(range(16)))[1, 0] == 4.0
    with pytest.raises(ValueError):
        ensure_4x4_matrix(np.zeros((2, 5)))


def test_ensure_4x4_copies():
    m = np.eye(4)
    out = ensure_4x4_matrix(m)
    out[0, 0] = 5.0
    assert m[0, 0] == 1.0


def test_is_rigid_transform():
    assert is_rigid_transform(np.eye(4))
    assert not is_rigid_transform(np.diag([1.0, -1.0, 1.0, 1.0]))
    assert not is_rigid_transform(np.eye(3))


def test_tan_half_fov_and_column_major():
    assert compute_tan_half_fov(800, 400, 1280, 720) == (0.8, 0.9)
    m = np.arange(16.0).reshape(4, 4)
    assert np.array_equal(to_column_major(m), m.T)


def test_to_numpy_array():
    out = to_numpy_array([[1, 2], [3, 4]])
    assert out.dtype == np.float64


def test_to_torch_tensor():
    torch = pytest.importorskip("torch")
    t = to_torch_tensor(np.eye(4))
    assert t.dtype == torch.float32
    assert np.array_equal(to_numpy_array(t), np.eye(4))


def test_debug_output_is_gated(monkeypatch, capsys):
    assert not is_debug_enabled()
    debug_print("hidden")
    debug_matrix_info("view", np.eye(4))
    assert capsys.readouterr().out == ""

    monkeypatch.setenv("PROJCAM_DEBUG", "1")
    assert is_debug_enabled()
    debug_print("shown")
    debug_matrix_info("view", np.eye(4))
    out = capsys.readouterr().out
    assert "shown" in out
    assert "[view] shape=(4, 4) det=1" in out

    monkeypatch.setenv("PROJCAM_DEBUG", "false")
    assert not is_debug_enabled()
