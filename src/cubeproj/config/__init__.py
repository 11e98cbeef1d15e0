"""Configuration for cubeproj.

Pose values, render constants and named presets.
"""

from cubeproj.config.operations import OperationSpec
from cubeproj.config.presets import (
    BOX_PRESETS,
    CAMERA_PRESETS,
    box_from_dict,
    box_to_dict,
    camera_from_dict,
    camera_to_dict,
    get_box_preset,
    get_camera_preset,
    load_box_json,
    load_camera_json,
    save_box_json,
    save_camera_json,
)
from cubeproj.config.render import RENDER_CONFIG, RenderConfig
from cubeproj.config.values import BoxPose, CameraPose

__all__ = [
    # Values
    "BoxPose",
    "CameraPose",
    # Render settings
    "RenderConfig",
    "RENDER_CONFIG",
    "OperationSpec",
    # Presets
    "BOX_PRESETS",
    "CAMERA_PRESETS",
    "get_box_preset",
    "get_camera_preset",
    "box_from_dict",
    "camera_from_dict",
    "box_to_dict",
    "camera_to_dict",
    "load_box_json",
    "load_camera_json",
    "save_box_json",
    "save_camera_json",
]
