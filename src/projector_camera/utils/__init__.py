"""Common utilities."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
)
from .rotation import (
    Quaternion,
    rotation_matrix_to_quaternion,
    quaternion_to_rotation_matrix,
)
from .projection_2d import project_points_to_ndc, ndc_to_pixel
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",
    
    # Rotation
    "Quaternion",
    "rotation_matrix_to_quaternion",
    "quaternion_to_rotation_matrix",
    
    # Projection
    "project_points_to_ndc",
    "ndc_to_pixel",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
