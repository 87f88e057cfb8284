"""Camera configuration."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional
from dataclasses import dataclass
from pathlib import Path

from omegaconf import OmegaConf

from ..camera.projection import DEFAULT_ZNEAR, DEFAULT_ZFAR


@dataclass
class CameraConfig:
    """
    Render camera settings shared by every device of the ensemble.
    
    Attributes:
        znear: Near clipping plane (world units)
        zfar: Far clipping plane (world units)
        projector_index: Which projector record this process renders for
        column_major: Emit transposed matrices for column-major APIs
    """
    znear: float = DEFAULT_ZNEAR
    zfar: float = DEFAULT_ZFAR
    projector_index: int = 0
    column_major: bool = False
    
    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> 'CameraConfig':
        """Create CameraConfig from dictionary."""
        cfg = cfg or {}
        if not isinstance(cfg, Mapping):
            raise ValueError(f"camera config must be a mapping, got {type(cfg).__name__}")
        for key in ('znear', 'zfar', 'projector_index', 'column_major'):
            if key in cfg and cfg[key] is None:
                raise ValueError(f"camera.{key} must not be null")
        return cls(
            znear=float(cfg.get('znear', DEFAULT_ZNEAR)),
            zfar=float(cfg.get('zfar', DEFAULT_ZFAR)),
            projector_index=int(cfg.get('projector_index', 0)),
            column_major=bool(cfg.get('column_major', False)),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'znear': self.znear,
            'zfar': self.zfar,
            'projector_index': self.projector_index,
            'column_major': self.column_major,
        }


def load_config(
    config_path,
    overrides: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Load a YAML configuration file.
    
    Args:
        config_path: Path to YAML config
        overrides: Dotlist overrides, e.g. ["camera.zfar=50"]
    
    Returns:
        Plain (resolved) dictionary
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    
    config = OmegaConf.load(path)
    overrides = list(overrides)
    if overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(overrides))
    
    return OmegaConf.to_container(config, resolve=True)
