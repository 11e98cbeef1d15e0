"""World-to-camera transforms derived from a camera pose.

The camera pose is a position plus Euler orientation (degrees). Its
forward matrix is ``T(position) @ R``. Two inverses are provided:

- ``world_wrt_camera_matrix()``: transposed rotation with the negated
  position placed directly in the last column. This is only the true
  inverse when the orientation is the identity; renders default to it
  so existing output stays unchanged.
- ``exact_world_wrt_camera_matrix()``: the rigid inverse
  ``R^T @ T(-position)``.
"""

from __future__ import annotations

import numpy as np

from cubeproj.shared.matrix import multiply4x4
from cubeproj.shared.rotation import _unpack3, rot_xyz
from cubeproj.transform.api import translation_matrix
from cubeproj.types import Matrix4x4, Vector3

_ORIGIN = (0.0, 0.0, 0.0)


def camera_wrt_world_matrix(
    position: Vector3 = _ORIGIN, orientation: Vector3 = _ORIGIN
) -> Matrix4x4:
    """Camera-to-world matrix: rotate by the orientation, then move to position.

    :param position: Camera position [3]
    :param orientation: Euler angles [3] in degrees
    :returns: 4x4 homogeneous matrix
    """
    return multiply4x4(translation_matrix(position), rot_xyz(orientation))


def world_wrt_camera_matrix(
    position: Vector3 = _ORIGIN, orientation: Vector3 = _ORIGIN
) -> Matrix4x4:
    """World-to-camera matrix with an un-rotated translation.

    Upper-left 3x3 is ``R^T`` (the inverse of an orthonormal rotation);
    the last column is ``-position`` without rotating it into camera axes.

    :param position: Camera position [3]
    :param orientation: Euler angles [3] in degrees
    :returns: 4x4 homogeneous matrix
    """
    r = rot_xyz(orientation)
    tx, ty, tz = _unpack3(position)
    return np.array(
        [
            [r[0, 0], r[1, 0], r[2, 0], -tx],
            [r[0, 1], r[1, 1], r[2, 1], -ty],
            [r[0, 2], r[1, 2], r[2, 2], -tz],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def exact_world_wrt_camera_matrix(
    position: Vector3 = _ORIGIN, orientation: Vector3 = _ORIGIN
) -> Matrix4x4:
    """World-to-camera matrix as the exact rigid inverse.

    Negates the position, then rotates by ``R^T``, so that
    ``exact_world_wrt_camera_matrix(p, o) @ camera_wrt_world_matrix(p, o)``
    is the identity.

    :param position: Camera position [3]
    :param orientation: Euler angles [3] in degrees
    :returns: 4x4 homogeneous matrix
    """
    px, py, pz = _unpack3(position)
    R_inv = np.eye(4, dtype=np.float64)
    R_inv[:3, :3] = rot_xyz(orientation)[:3, :3].T
    return multiply4x4(R_inv, translation_matrix((-px, -py, -pz)))
