"""Tests for world-to-camera matrices.

Tests cover:
- Transposed rotation block
- Un-rotated, negated translation column
- Divergence from the exact inverse under camera rotation
- Exact inverse round trip
"""

import numpy as np

from cubeproj.camera import (
    camera_wrt_world_matrix,
    exact_world_wrt_camera_matrix,
    world_wrt_camera_matrix,
)
from cubeproj.point import Point
from cubeproj.shared.matrix import identity4x4
from cubeproj.shared.rotation import rot_xyz
from cubeproj.transform.api import apply_transform
from cubeproj.verification import MatrixVerifier


class TestWorldWrtCameraMatrix:
    """Test the compatible world-to-camera matrix."""

    def test_default_pose_is_identity(self):
        """Test the default camera pose gives the identity."""
        assert np.allclose(world_wrt_camera_matrix(), identity4x4())

    def test_rotation_block_is_transpose(self):
        """Test upper-left 3x3 equals R^T."""
        orientation = (15, -40, 70)
        M = world_wrt_camera_matrix((1, 2, 3), orientation)
        assert np.allclose(M[:3, :3], rot_xyz(orientation)[:3, :3].T)
        MatrixVerifier.assert_orthonormal(M)
        MatrixVerifier.assert_affine(M)

    def test_translation_not_rotated(self):
        """Test last column is -position regardless of orientation."""
        M = world_wrt_camera_matrix((1, 2, 3), (30, 60, 90))
        assert np.array_equal(M[:3, 3], [-1, -2, -3])

    def test_pure_translation_is_exact(self):
        """Test the matrix is the true inverse when orientation is zero."""
        position = (1.5, -2.0, 7.0)
        approx = world_wrt_camera_matrix(position, (0, 0, 0))
        exact = exact_world_wrt_camera_matrix(position, (0, 0, 0))
        assert np.allclose(approx, exact)
        assert np.allclose(approx @ camera_wrt_world_matrix(position), identity4x4())

    def test_rotated_camera_does_not_round_trip(self):
        """Test forward pose followed by this inverse does not recover the point."""
        position, orientation = (1, 2, 3), (0, 90, 0)
        forward = camera_wrt_world_matrix(position, orientation)
        approx = world_wrt_camera_matrix(position, orientation)

        p = Point(0.5, -0.25, 2.0, "p")
        recovered = apply_transform(apply_transform(p, forward), approx)

        assert not np.allclose(recovered.as_array(), p.as_array())
        assert not np.allclose(approx @ forward, identity4x4())

    def test_rotation_only_is_exact(self):
        """Test a camera at the origin inverts exactly even when rotated."""
        orientation = (25, 35, 45)
        approx = world_wrt_camera_matrix((0, 0, 0), orientation)
        assert np.allclose(approx @ camera_wrt_world_matrix((0, 0, 0), orientation), identity4x4())


class TestExactWorldWrtCameraMatrix:
    """Test the exact rigid inverse."""

    def test_round_trip(self):
        """Test exact inverse composed with the forward pose is the identity."""
        for position, orientation in [
            ((1, 2, 3), (0, 90, 0)),
            ((-4, 0.5, 10), (12, -70, 33)),
            ((0, 0, 5), (180, 45, -90)),
        ]:
            forward = camera_wrt_world_matrix(position, orientation)
            exact = exact_world_wrt_camera_matrix(position, orientation)
            assert np.allclose(exact @ forward, identity4x4(), atol=1e-12)
            assert np.allclose(forward @ exact, identity4x4(), atol=1e-12)

    def test_point_round_trip(self):
        """Test a point survives forward then exact inverse."""
        position, orientation = (1, 2, 3), (0, 90, 0)
        p = Point(0.5, -0.25, 2.0, "p")
        moved = apply_transform(p, camera_wrt_world_matrix(position, orientation))
        recovered = apply_transform(moved, exact_world_wrt_camera_matrix(position, orientation))

        assert np.allclose(recovered.as_array(), p.as_array())
        assert recovered.label == "p"

    def test_matches_numpy_inverse(self):
        """Test against a general matrix inverse."""
        forward = camera_wrt_world_matrix((3, -1, 2), (10, 20, 30))
        exact = exact_world_wrt_camera_matrix((3, -1, 2), (10, 20, 30))
        assert np.allclose(exact, np.linalg.inv(forward))

    def test_camera_position_maps_to_origin(self):
        """Test the camera position is the camera-space origin."""
        position = (2, 3, 4)
        exact = exact_world_wrt_camera_matrix(position, (40, 50, 60))
        p = apply_transform(Point(*position, "eye"), exact)
        assert np.allclose(p.as_array(), [0, 0, 0])
