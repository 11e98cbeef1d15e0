"""Preset library for box and camera poses.

Provides pre-configured pose objects for common views,
with support for loading from dict and JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cubeproj.config.values import BoxPose, CameraPose

logger = logging.getLogger(__name__)

# ============================================================================
# Box Presets
# ============================================================================

UPRIGHT = BoxPose()

ISOMETRIC = BoxPose(rx=35.264, ry=45.0)

TILTED = BoxPose(rx=20.0, ry=30.0, rz=10.0)

DOUBLE_SIZE = BoxPose.from_scale(2.0)

HALF_SIZE = BoxPose.from_scale(0.5)

FLAT_SLAB = BoxPose(rx=15.0, ry=25.0, sy=0.25)

TALL_TOWER = BoxPose(ry=30.0, sx=0.5, sy=2.0, sz=0.5)

# ============================================================================
# Camera Presets
# ============================================================================

FRONT_VIEW = CameraPose()

CLOSE_UP = CameraPose(tz=-2.0)

WIDE_ANGLE = CameraPose(zoom=0.5)

TELEPHOTO = CameraPose(tz=5.0, zoom=2.5)

HIGH_ANGLE = CameraPose(rx=-20.0, ty=2.0)

# ============================================================================
# Preset Dictionaries
# ============================================================================

BOX_PRESETS: dict[str, BoxPose] = {
    "upright": UPRIGHT,
    "isometric": ISOMETRIC,
    "tilted": TILTED,
    "double_size": DOUBLE_SIZE,
    "half_size": HALF_SIZE,
    "flat_slab": FLAT_SLAB,
    "tall_tower": TALL_TOWER,
}

CAMERA_PRESETS: dict[str, CameraPose] = {
    "front_view": FRONT_VIEW,
    "close_up": CLOSE_UP,
    "wide_angle": WIDE_ANGLE,
    "telephoto": TELEPHOTO,
    "high_angle": HIGH_ANGLE,
}

_BOX_FIELDS = ("rx", "ry", "rz", "sx", "sy", "sz", "tx", "ty", "tz")
_CAMERA_FIELDS = ("rx", "ry", "rz", "tx", "ty", "tz", "zoom")

# ============================================================================
# Loading Functions
# ============================================================================


def get_box_preset(name: str) -> BoxPose:
    """Get box preset by name.

    :param name: Preset name (case-insensitive)
    :returns: BoxPose preset
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in BOX_PRESETS:
        available = ", ".join(BOX_PRESETS.keys())
        raise KeyError(f"Unknown box preset '{name}'. Available: {available}")
    return BOX_PRESETS[name_lower]


def get_camera_preset(name: str) -> CameraPose:
    """Get camera preset by name.

    :param name: Preset name (case-insensitive)
    :returns: CameraPose preset
    :raises KeyError: If preset not found
    """
    name_lower = name.lower()
    if name_lower not in CAMERA_PRESETS:
        available = ", ".join(CAMERA_PRESETS.keys())
        raise KeyError(f"Unknown camera preset '{name}'. Available: {available}")
    return CAMERA_PRESETS[name_lower]


# ============================================================================
# Dict/JSON Loading
# ============================================================================


def _numeric_fields(d: dict, valid_fields: tuple[str, ...], kind: str) -> dict[str, float]:
    kwargs = {}
    for k, v in d.items():
        if k not in valid_fields:
            logger.debug("[Presets] Ignoring unknown %s field '%s'", kind, k)
            continue
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise ValueError(f"{kind} field '{k}': expected number, got {type(v).__name__}")
        kwargs[k] = float(v)
    return kwargs


def box_from_dict(d: dict) -> BoxPose:
    """Create BoxPose from dictionary.

    Unknown keys are ignored; missing keys take their neutral value.

    :param d: Dictionary with box pose parameters
    :returns: BoxPose instance
    :raises ValueError: If a known field is not a number

    Example:
        >>> box_from_dict({"ry": 45, "sx": 2})
        BoxPose(rx=0.0, ry=45.0, rz=0.0, sx=2.0, sy=1.0, sz=1.0, tx=0.0, ty=0.0, tz=0.0)
    """
    return BoxPose(**_numeric_fields(d, _BOX_FIELDS, "box"))


def camera_from_dict(d: dict) -> CameraPose:
    """Create CameraPose from dictionary.

    :param d: Dictionary with camera pose parameters
    :returns: CameraPose instance
    :raises ValueError: If a known field is not a number
    """
    return CameraPose(**_numeric_fields(d, _CAMERA_FIELDS, "camera"))


def load_box_json(path: str | Path) -> BoxPose:
    """Load BoxPose from JSON file.

    :param path: Path to JSON file
    :returns: BoxPose instance
    """
    with open(path) as f:
        d = json.load(f)
    return box_from_dict(d)


def load_camera_json(path: str | Path) -> CameraPose:
    """Load CameraPose from JSON file.

    :param path: Path to JSON file
    :returns: CameraPose instance
    """
    with open(path) as f:
        d = json.load(f)
    return camera_from_dict(d)


# ============================================================================
# Saving Functions
# ============================================================================


def box_to_dict(values: BoxPose) -> dict:
    """Convert BoxPose to dictionary.

    :param values: BoxPose instance
    :returns: Dictionary representation
    """
    return {name: getattr(values, name) for name in _BOX_FIELDS}


def camera_to_dict(values: CameraPose) -> dict:
    """Convert CameraPose to dictionary.

    :param values: CameraPose instance
    :returns: Dictionary representation
    """
    return {name: getattr(values, name) for name in _CAMERA_FIELDS}


def save_box_json(values: BoxPose, path: str | Path) -> None:
    """Save BoxPose to JSON file.

    :param values: BoxPose instance
    :param path: Output path
    """
    with open(path, "w") as f:
        json.dump(box_to_dict(values), f, indent=2)


def save_camera_json(values: CameraPose, path: str | Path) -> None:
    """Save CameraPose to JSON file.

    :param values: CameraPose instance
    :param path: Output path
    """
    with open(path, "w") as f:
        json.dump(camera_to_dict(values), f, indent=2)
