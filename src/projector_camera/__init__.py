"""
projector_camera - Render cameras for calibrated projector ensembles

Turns a projector calibration (pose + intrinsic matrix, computer-vision
convention) into the view and off-axis projection matrices a renderer needs
to draw imagery pre-warped for that projector.

Components:
    - Camera: View/projection construction and convention corrections
    - Core: Projector records, configuration and the per-device driver
    - Utils: Quaternions, point projection, conversion, debug output

Example:
    >>> from projector_camera import ProjectorRecord, camera_from_projector
    >>> 
    >>> record = ProjectorRecord.from_dict({
    ...     "width": 1280, "height": 720,
    ...     "fx": 800.0, "fy": 800.0, "cx": 640.0, "cy": 360.0,
    ... })
    >>> camera = camera_from_projector(record, znear=0.1, zfar=100.0)
    >>> float(camera.projection_matrix[0, 0])
    1.25
"""

__version__ = "0.1.0"

# Camera
from .camera import (
    Z_REFLECT,
    X_MIRROR,
    HANDEDNESS_FIX,
    InvalidPoseError,
    InvalidFrustumError,
    build_view_matrix,
    view_matrix_to_pose,
    build_projection_matrix,
    projection_matrix_from_intrinsics,
    extract_intrinsics,
    ensure_4x4_matrix,
    invert_transform,
)

# Core
from .core import (
    CameraConfig,
    load_config,
    ProjectorRecord,
    ProjectorCamera,
    select_projector,
    camera_from_projector,
    camera_from_config,
)

# Utils
from .utils import (
    Quaternion,
    rotation_matrix_to_quaternion,
    quaternion_to_rotation_matrix,
    project_points_to_ndc,
    ndc_to_pixel,
    to_torch_tensor,
    to_numpy_array,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Camera
    "Z_REFLECT",
    "X_MIRROR",
    "HANDEDNESS_FIX",
    "InvalidPoseError",
    "InvalidFrustumError",
    "build_view_matrix",
    "view_matrix_to_pose",
    "build_projection_matrix",
    "projection_matrix_from_intrinsics",
    "extract_intrinsics",
    "ensure_4x4_matrix",
    "invert_transform",
    
    # Core
    "CameraConfig",
    "load_config",
    "ProjectorRecord",
    "ProjectorCamera",
    "select_projector",
    "camera_from_projector",
    "camera_from_config",
    
    # Utils
    "Quaternion",
    "rotation_matrix_to_quaternion",
    "quaternion_to_rotation_matrix",
    "project_points_to_ndc",
    "ndc_to_pixel",
    "to_torch_tensor",
    "to_numpy_array",
    "debug_print",
    "is_debug_enabled",
]
