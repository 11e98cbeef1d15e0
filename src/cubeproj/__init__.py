"""
cubeproj - Cube Perspective Projection

Projects a rotated, scaled and translated unit cube onto a 2D viewing
plane through an independently posed camera.

Features:
- 4x4 homogeneous matrix algebra (NumPy)
- Per-axis rotations composed as Rx @ Ry @ Rz (degrees)
- Cube world matrix composed as T @ (S @ R)
- World-to-camera matrix (compatible or exact rigid inverse)
- Perspective projection with explicit degenerate-point errors
- Pose presets with dict/JSON loading

Example:
    >>> from cubeproj import BoxPose, CameraPose, render_scene
    >>>
    >>> points = render_scene(BoxPose(rx=20, ry=30), CameraPose(zoom=1.5))
    >>> len(points)
    8

Example - Fluent Builder:
    >>> from cubeproj import Scene
    >>>
    >>> points = Scene().rotate(20, 30, 0).scale(1.5).camera(ry=5).render()
"""

__version__ = "0.1.0"

# Camera transforms
from cubeproj.camera import (
    camera_wrt_world_matrix,
    exact_world_wrt_camera_matrix,
    world_wrt_camera_matrix,
)

# Config values and presets
from cubeproj.config import (
    RENDER_CONFIG,
    BoxPose,
    CameraPose,
    RenderConfig,
    get_box_preset,
    get_camera_preset,
    load_box_json,
    load_camera_json,
)

# Geometry
from cubeproj.geometry import CORNER_NAMES, UNIT_CUBE, Cube, NormalUnitCube

# Render pipeline
from cubeproj.pipeline import Scene, project_center, render_cube, render_scene
from cubeproj.point import Point, ProjectedPoint

# Projection
from cubeproj.projection import DegenerateProjectionError, project_point

# Matrix and rotation utilities
from cubeproj.shared import (
    identity4x4,
    multiply4x4,
    rot_x,
    rot_xyz,
    rot_y,
    rot_z,
    transpose4x4,
    uniform_matrix4x4,
)

# Affine transforms
from cubeproj.transform import apply_transform, scale_matrix, translation_matrix

# Verification utilities
from cubeproj.verification import MatrixVerifier

__all__ = [
    # Version
    "__version__",
    # Data structures
    "Point",
    "ProjectedPoint",
    "Cube",
    "NormalUnitCube",
    "UNIT_CUBE",
    "CORNER_NAMES",
    # Config values
    "BoxPose",
    "CameraPose",
    "RenderConfig",
    "RENDER_CONFIG",
    "get_box_preset",
    "get_camera_preset",
    "load_box_json",
    "load_camera_json",
    # Matrix utilities
    "multiply4x4",
    "uniform_matrix4x4",
    "identity4x4",
    "transpose4x4",
    # Rotation utilities
    "rot_x",
    "rot_y",
    "rot_z",
    "rot_xyz",
    # Affine transforms
    "translation_matrix",
    "scale_matrix",
    "apply_transform",
    # Camera
    "world_wrt_camera_matrix",
    "exact_world_wrt_camera_matrix",
    "camera_wrt_world_matrix",
    # Projection
    "project_point",
    "DegenerateProjectionError",
    # Pipeline
    "render_scene",
    "render_cube",
    "project_center",
    "Scene",
    # Verification
    "MatrixVerifier",
]
