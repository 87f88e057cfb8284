"""Projector records and the per-device camera driver."""

from .config import CameraConfig, load_config
from .projector import (
    ProjectorRecord,
    ProjectorCamera,
    select_projector,
    camera_from_projector,
    camera_from_config,
)

__all__ = [
    "CameraConfig",
    "load_config",
    "ProjectorRecord",
    "ProjectorCamera",
    "select_projector",
    "camera_from_projector",
    "camera_from_config",
]
