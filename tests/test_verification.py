"""Tests for MatrixVerifier."""

import numpy as np
import pytest

from cubeproj.point import Point
from cubeproj.shared.rotation import rot_xyz
from cubeproj.transform.api import scale_matrix, translation_matrix
from cubeproj.verification import MatrixVerifier


class TestOrthonormal:
    """Test orthonormal checks."""

    def test_rotation_passes(self):
        """Test a rotation is orthonormal."""
        assert MatrixVerifier.is_orthonormal(rot_xyz((10, 20, 30)))

    def test_scale_fails(self):
        """Test a non-unit scale is not orthonormal."""
        assert not MatrixVerifier.is_orthonormal(scale_matrix((2, 1, 1)))
        with pytest.raises(AssertionError, match="not orthonormal"):
            MatrixVerifier.assert_orthonormal(scale_matrix((2, 1, 1)))

    def test_reflection_fails(self):
        """Test a reflection (det = -1) is rejected."""
        assert not MatrixVerifier.is_orthonormal(scale_matrix((-1, 1, 1)))

    def test_accepts_3x3(self):
        """Test 3x3 input is accepted."""
        assert MatrixVerifier.is_orthonormal(np.eye(3))


class TestAffine:
    """Test affine checks."""

    def test_builders_are_affine(self):
        """Test builders keep last row [0, 0, 0, 1]."""
        MatrixVerifier.assert_affine(translation_matrix((1, 2, 3)))
        MatrixVerifier.assert_affine(scale_matrix((1, 2, 3)))
        MatrixVerifier.assert_affine(rot_xyz((1, 2, 3)))

    def test_bad_last_row(self):
        """Test a perspective-like last row is rejected."""
        M = np.eye(4)
        M[3, 2] = 1.0
        assert not MatrixVerifier.is_affine(M)
        with pytest.raises(AssertionError, match="not affine"):
            MatrixVerifier.assert_affine(M)

    def test_wrong_shape(self):
        """Test non-4x4 input is not affine."""
        assert not MatrixVerifier.is_affine(np.eye(3))
        with pytest.raises(AssertionError):
            MatrixVerifier.assert_affine(np.eye(3))


class TestPointsClose:
    """Test point sequence comparison."""

    def test_equal_sequences(self):
        """Test matching sequences pass."""
        a = [Point(1, 2, 3, "a"), Point(4, 5, 6, "b")]
        b = [Point(1, 2, 3 + 1e-12, "a"), Point(4, 5, 6, "b")]
        MatrixVerifier.assert_points_close(a, b)

    def test_count_mismatch(self):
        """Test different lengths fail."""
        with pytest.raises(AssertionError, match="count mismatch"):
            MatrixVerifier.assert_points_close([Point(0, 0, 0, "a")], [])

    def test_label_mismatch(self):
        """Test different labels fail."""
        with pytest.raises(AssertionError, match="Label mismatch at 0"):
            MatrixVerifier.assert_points_close([Point(0, 0, 0, "a")], [Point(0, 0, 0, "b")])

    def test_coordinate_mismatch(self):
        """Test different coordinates fail."""
        with pytest.raises(AssertionError, match="Coordinate mismatch at 0"):
            MatrixVerifier.assert_points_close([Point(0, 0, 0, "a")], [Point(0, 0, 1, "a")])
