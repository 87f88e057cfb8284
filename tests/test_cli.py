import json

import numpy as np
import pytest

from projector_camera.camera import build_projection_matrix
from projector_camera.cli import main
from test_config import ENSEMBLE_YAML


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "ensemble.yaml"
    path.write_text(ENSEMBLE_YAML, encoding="utf-8")
    return str(path)


def test_prints_matrices(config_path, capsys):
    assert main([config_path]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "left"
    assert out["column_major"] is False
    assert np.allclose(
        out["projection_matrix"],
        build_projection_matrix(800, 800, 640, 360, 1280, 720, 0.1, 100.0),
    )
    assert np.allclose(out["camera_position"], [-0.5, 1.0, -2.0])
    assert np.allclose(out["orientation_wxyz"], [1.0, 0.0, 0.0, 0.0])


def test_projector_and_clip_overrides(config_path, capsys):
    assert main([config_path, "--projector", "1", "--znear", "0.5", "--zfar", "10", "--column-major"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["name"] == "right"
    expected = build_projection_matrix(810, 805, 630, 355, 1280, 720, 0.5, 10.0)
    assert np.allclose(np.array(out["projection_matrix"]).T, expected)


def test_dotlist_override(config_path, capsys):
    assert main([config_path, "camera.projector_index=1"]) == 0
    assert json.loads(capsys.readouterr().out)["name"] == "right"


def test_bad_index_reports_error(config_path, capsys):
    assert main([config_path, "--projector", "5"]) == 2
    assert "out of range" in capsys.readouterr().err


def test_bad_frustum_reports_error(config_path, capsys):
    assert main([config_path, "--znear", "5", "--zfar", "1"]) == 2
    assert "zfar" in capsys.readouterr().err


def test_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "not found" in capsys.readouterr().err


def _write(tmp_path, text):
    path = tmp_path / "ensemble.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_top_level_list_reports_error(tmp_path, capsys):
    path = _write(tmp_path, "- width: 1280\n  height: 720\n")
    assert main([path]) == 2
    assert "config must be a mapping" in capsys.readouterr().err


def test_non_mapping_projector_reports_error(tmp_path, capsys):
    path = _write(tmp_path, "projectors: [5]\n")
    assert main([path]) == 2
    assert "projectors[0]" in capsys.readouterr().err


def test_null_clip_plane_reports_error(tmp_path, capsys):
    path = _write(tmp_path, ENSEMBLE_YAML.replace("zfar: 100.0", "zfar: ~"))
    assert main([path]) == 2
    assert "camera.zfar must not be null" in capsys.readouterr().err


def test_malformed_yaml_reports_error(tmp_path, capsys):
    path = _write(tmp_path, "camera: [0.1, 100.0\n")
    assert main([path]) == 1
    assert capsys.readouterr().err.startswith("error:")
