"""Per-device render camera from a projector calibration record."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence, Tuple
from dataclasses import dataclass, field
import numpy as np

from ..camera.utils import (
    ensure_4x4_matrix,
    invert_transform,
    compute_tan_half_fov,
    to_column_major,
)
from ..camera.pose import build_view_matrix
from ..camera.projection import (
    DEFAULT_ZNEAR,
    DEFAULT_ZFAR,
    extract_intrinsics,
    projection_matrix_from_intrinsics,
)
from ..utils.rotation import Quaternion, rotation_matrix_to_quaternion
from ..utils.conversion import to_torch_tensor
from ..utils.debug import debug_print, debug_matrix_info
from .config import CameraConfig


def _freeze(obj, names) -> None:
    for name in names:
        arr = np.array(getattr(obj, name), dtype=np.float64)
        arr.setflags(write=False)
        object.__setattr__(obj, name, arr)


@dataclass(frozen=True)
class ProjectorRecord:
    """
    One calibrated projector of the ensemble.
    
    Attributes:
        pose: (4, 4) projector-local to world transform (right-handed, +Z forward)
        intrinsics: (4, 4) camera matrix with fx, fy, cx, cy at the standard positions
        width, height: Calibration resolution (pixels)
        name: Optional label
    """
    pose: np.ndarray
    intrinsics: np.ndarray
    width: float
    height: float
    name: str = ""
    
    def __post_init__(self):
        """Store read-only copies of the matrices."""
        _freeze(self, ('pose', 'intrinsics'))
    
    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> 'ProjectorRecord':
        """
        Create a record from a configuration dictionary.
        
        Intrinsics come from an 'intrinsics' matrix (3x3 or 4x4) or from
        'fx', 'fy', 'cx', 'cy' keys. 'pose' is a 4x4 (or flat 16) matrix and
        defaults to identity.
        """
        if not isinstance(cfg, Mapping):
            raise ValueError(f"projector record must be a mapping, got {cfg!r}")
        if cfg.get('width') is None or cfg.get('height') is None:
            raise ValueError("projector record requires 'width' and 'height'")
        width = float(cfg['width'])
        height = float(cfg['height'])
        
        if 'intrinsics' in cfg:
            K = ensure_4x4_matrix(cfg['intrinsics'])
        else:
            missing = [k for k in ('fx', 'fy', 'cx', 'cy') if cfg.get(k) is None]
            if missing:
                raise ValueError(f"projector record is missing intrinsics: {missing}")
            K = np.eye(4, dtype=np.float64)
            K[0, 0] = float(cfg['fx'])
            K[1, 1] = float(cfg['fy'])
            K[0, 2] = float(cfg['cx'])
            K[1, 2] = float(cfg['cy'])
        
        pose = cfg.get('pose')
        pose = ensure_4x4_matrix(np.eye(4) if pose is None else pose)
        
        return cls(
            pose=pose,
            intrinsics=K,
            width=width,
            height=height,
            name=str(cfg.get('name', "")),
        )


@dataclass(frozen=True)
class ProjectorCamera:
    """
    Fixed camera parameters for rendering as one projector.
    
    Attributes:
        width, height: Render resolution (pixels)
        view_matrix: (4, 4) render-world to view transform (row-major)
        projection_matrix: (4, 4) view to clip transform (row-major)
        tanfovx, tanfovy: Tangent of half FOV
        position: (3,) device position in render-world space
        orientation: Rotation of the calibration pose
    """
    width: float
    height: float
    view_matrix: np.ndarray
    projection_matrix: np.ndarray
    tanfovx: float
    tanfovy: float
    position: np.ndarray
    orientation: Quaternion
    name: str = field(default="")
    
    def __post_init__(self):
        """Store read-only copies of the matrices."""
        _freeze(self, ('view_matrix', 'projection_matrix', 'position'))
    
    @property
    def full_transform(self) -> np.ndarray:
        """World -> clip space."""
        return self.projection_matrix @ self.view_matrix
    
    def column_major(self) -> Tuple[np.ndarray, np.ndarray]:
        """(view, projection) transposed for column-major consumers."""
        return to_column_major(self.view_matrix), to_column_major(self.projection_matrix)
    
    def as_torch(self, device: str = "cpu", column_major: bool = False) -> Dict[str, Any]:
        """Matrices as float32 tensors for a torch rasterizer."""
        if column_major:
            view, proj = self.column_major()
            full = to_column_major(self.full_transform)
        else:
            view, proj, full = self.view_matrix, self.projection_matrix, self.full_transform
        return {
            "view_matrix": to_torch_tensor(view, device=device),
            "projection_matrix": to_torch_tensor(proj, device=device),
            "full_transform": to_torch_tensor(full, device=device),
            "camera_position": to_torch_tensor(self.position, device=device),
        }


def select_projector(projectors: Sequence[ProjectorRecord], index: int) -> ProjectorRecord:
    """Pick the record this process renders for."""
    if not 0 <= index < len(projectors):
        raise IndexError(
            f"projector index {index} out of range for ensemble of {len(projectors)}"
        )
    return projectors[index]


def camera_from_projector(
    projector: ProjectorRecord,
    znear: float = DEFAULT_ZNEAR,
    zfar: float = DEFAULT_ZFAR
) -> ProjectorCamera:
    """
    Compute the render camera for one projector.
    
    Called once per device selection; the result stays fixed for the
    session unless the calibration changes.
    
    Raises:
        InvalidPoseError: If the pose is not a rigid transform
        InvalidFrustumError: If resolution or clip planes are invalid
    """
    view = build_view_matrix(projector.pose)
    proj = projection_matrix_from_intrinsics(
        projector.intrinsics, projector.width, projector.height, znear, zfar
    )
    
    fx, fy, _cx, _cy = extract_intrinsics(projector.intrinsics)
    tanfovx, tanfovy = compute_tan_half_fov(fx, fy, projector.width, projector.height)
    
    position = invert_transform(view)[:3, 3].copy()
    orientation = rotation_matrix_to_quaternion(projector.pose)
    
    debug_print(f"[camera] projector '{projector.name}' {projector.width:g}x{projector.height:g} "
                f"znear={znear} zfar={zfar}")
    debug_matrix_info("view", view)
    debug_matrix_info("projection", proj)
    
    return ProjectorCamera(
        width=projector.width,
        height=projector.height,
        view_matrix=view,
        projection_matrix=proj,
        tanfovx=tanfovx,
        tanfovy=tanfovy,
        position=position,
        orientation=orientation,
        name=projector.name,
    )


def camera_from_config(cfg: Dict[str, Any], index: Optional[int] = None) -> ProjectorCamera:
    """
    Build the render camera from a full configuration dictionary.
    
    Args:
        cfg: Dictionary with 'camera' settings and a 'projectors' list
        index: Overrides camera.projector_index when given
    """
    if not isinstance(cfg, Mapping):
        raise ValueError(f"config must be a mapping, got {type(cfg).__name__}")
    camera_cfg = CameraConfig.from_dict(cfg.get('camera'))
    
    entries = cfg.get('projectors') or []
    if not isinstance(entries, (list, tuple)):
        raise ValueError(f"'projectors' must be a list, got {type(entries).__name__}")
    records = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ValueError(f"projectors[{i}] must be a mapping, got {entry!r}")
        records.append(ProjectorRecord.from_dict(entry))
    if index is None:
        index = camera_cfg.projector_index
    
    record = select_projector(records, index)
    return camera_from_projector(record, camera_cfg.znear, camera_cfg.zfar)
