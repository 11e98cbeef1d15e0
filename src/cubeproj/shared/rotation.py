"""Elemental rotation matrices about the X, Y and Z axes.

Angles are given in degrees. Each builder returns a 4x4 homogeneous
matrix with a zero translation column, so rotations compose directly
with the affine builders in :mod:`cubeproj.transform.api`.

Composition Convention: rot_xyz(e) = Rx @ Ry @ Rz
"""

from __future__ import annotations

import math

import numpy as np

from cubeproj.shared.matrix import multiply4x4
from cubeproj.types import Vector3


def radians(theta_degrees: float) -> float:
    """Convert degrees to radians (``theta * pi / 180``)."""
    return (theta_degrees * math.pi) / 180


def sin_cos(theta_degrees: float) -> tuple[float, float]:
    """Sine and cosine of an angle given in degrees.

    :param theta_degrees: Angle in degrees
    :returns: Tuple of (sin, cos)
    """
    theta = radians(theta_degrees)
    return math.sin(theta), math.cos(theta)


def rot_x(theta: float) -> np.ndarray:
    """Right-handed rotation about the X axis.

    :param theta: Angle in degrees
    :returns: 4x4 rotation matrix
    """
    s, c = sin_cos(theta)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def rot_y(theta: float) -> np.ndarray:
    """Right-handed rotation about the Y axis.

    :param theta: Angle in degrees
    :returns: 4x4 rotation matrix
    """
    s, c = sin_cos(theta)
    return np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def rot_z(theta: float) -> np.ndarray:
    """Right-handed rotation about the Z axis.

    :param theta: Angle in degrees
    :returns: 4x4 rotation matrix
    """
    s, c = sin_cos(theta)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def rot_xyz(euler: Vector3) -> np.ndarray:
    """Combined rotation from Euler angles.

    Composes as ``Rx @ Ry @ Rz``. Rotation matrices do not commute, so
    this order is part of the contract: Rz acts on a point first.

    :param euler: Euler angles [3] (x, y, z) in degrees
    :returns: 4x4 rotation matrix

    Example:
        >>> R = rot_xyz((30, 45, 0))
        >>> np.allclose(R, rot_x(30) @ rot_y(45))
        True
    """
    ex, ey, ez = _unpack3(euler)
    rxy = multiply4x4(rot_x(ex), rot_y(ey))
    return multiply4x4(rxy, rot_z(ez))


def _unpack3(v: Vector3) -> tuple[float, float, float]:
    """Unpack a 3-vector into floats."""
    arr = np.asarray(v, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {np.asarray(v).shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])
