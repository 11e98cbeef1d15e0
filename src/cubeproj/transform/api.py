"""
Affine transform builders and point transformation.

Functions:

- ``translation_matrix()`` / ``scale_matrix()``: 4x4 homogeneous builders.
- ``compose_world_matrix()``: rotation, then scale, then translation.
- ``apply_transform()``: map a labeled point through a 4x4 matrix.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from cubeproj.point import Point
from cubeproj.shared.matrix import _as_matrix4x4, multiply4x4
from cubeproj.shared.rotation import _unpack3, rot_xyz
from cubeproj.types import Matrix4x4, Vector3

# ============================================================================
# 4x4 Homogeneous Transformation Matrix Building
# ============================================================================


def translation_matrix(translation: Vector3) -> Matrix4x4:
    """Build 4x4 translation matrix.

    :param translation: Translation vector [3] (x, y, z)
    :returns: Identity with last column (x, y, z, 1)
    """
    T = np.eye(4, dtype=np.float64)
    T[:3, 3] = _unpack3(translation)
    return T


def scale_matrix(scale: Vector3) -> Matrix4x4:
    """Build 4x4 scale matrix.

    :param scale: Per-axis scale factors [3] (x, y, z)
    :returns: Diagonal matrix (x, y, z, 1)
    """
    sx, sy, sz = _unpack3(scale)
    S = np.eye(4, dtype=np.float64)
    S[0, 0] = sx
    S[1, 1] = sy
    S[2, 2] = sz
    return S


def compose_world_matrix(
    rotation: Vector3, scale: Vector3, translation: Vector3
) -> Matrix4x4:
    """Compose an object-to-world matrix.

    Build transformation: T @ (S @ R) (applied right-to-left), so the
    rotation acts first, then the scale, then the translation.

    :param rotation: Euler angles [3] in degrees
    :param scale: Per-axis scale factors [3]
    :param translation: Translation vector [3]
    :returns: 4x4 homogeneous transformation matrix
    """
    R = rot_xyz(rotation)
    S = scale_matrix(scale)
    T = translation_matrix(translation)
    return multiply4x4(T, multiply4x4(S, R))


# ============================================================================
# Point Transformation
# ============================================================================


def apply_transform(point: Point, matrix: Matrix4x4) -> Point:
    """Apply a 4x4 homogeneous transformation matrix to a point.

    Treats the point as (x, y, z, 1) and uses only the first three rows
    of the matrix, so the result is the affine image of the point.

    :param point: Input point
    :param matrix: 4x4 transformation matrix
    :returns: New point carrying the same label
    """
    M = _as_matrix4x4(matrix)
    # Extract 3x3 combined rotation/scale matrix and translation vector
    R = M[:3, :3]
    t = M[:3, 3]
    x, y, z = R @ point.as_array() + t
    return Point(float(x), float(y), float(z), point.label)


def apply_transform_many(points: Iterable[Point], matrix: Matrix4x4) -> tuple[Point, ...]:
    """Apply one matrix to a sequence of points, preserving order."""
    return tuple(apply_transform(p, matrix) for p in points)
