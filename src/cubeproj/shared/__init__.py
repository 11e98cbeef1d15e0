"""Shared utilities for cubeproj.

Matrix algebra and rotation builders used by every higher-level module.
"""

from cubeproj.shared.matrix import (
    identity4x4,
    multiply4x4,
    transpose4x4,
    uniform_matrix4x4,
)
from cubeproj.shared.rotation import (
    radians,
    rot_x,
    rot_xyz,
    rot_y,
    rot_z,
    sin_cos,
)

__all__ = [
    # Matrix algebra
    "multiply4x4",
    "uniform_matrix4x4",
    "identity4x4",
    "transpose4x4",
    # Rotation utilities
    "radians",
    "sin_cos",
    "rot_x",
    "rot_y",
    "rot_z",
    "rot_xyz",
]
