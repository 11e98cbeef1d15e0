"""Matrix and point verification utilities.

This module provides checks for the structural invariants of the
transforms built by cubeproj: orthonormal rotations and affine matrices
whose last row is ``[0, 0, 0, 1]``.

Example:
    >>> from cubeproj.verification import MatrixVerifier
    >>>
    >>> MatrixVerifier.assert_orthonormal(rot_xyz((10, 20, 30)))
    >>> MatrixVerifier.assert_points_close(render_a, render_b)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from cubeproj.point import Point

logger = logging.getLogger(__name__)

_AFFINE_LAST_ROW = np.array([0.0, 0.0, 0.0, 1.0])


class MatrixVerifier:
    """Utilities for verifying transform invariants."""

    @staticmethod
    def is_orthonormal(matrix, atol: float = 1e-9) -> bool:
        """Check that the upper-left 3x3 block is a proper rotation.

        :param matrix: 4x4 or 3x3 matrix
        :param atol: Absolute tolerance
        :return: True if R @ R^T == I and det(R) == 1
        """
        R = np.asarray(matrix, dtype=np.float64)[:3, :3]
        return bool(
            np.allclose(R @ R.T, np.eye(3), atol=atol)
            and np.isclose(np.linalg.det(R), 1.0, atol=atol)
        )

    @staticmethod
    def is_affine(matrix, atol: float = 1e-12) -> bool:
        """Check that a 4x4 matrix has last row ``[0, 0, 0, 1]``.

        :param matrix: 4x4 matrix
        :param atol: Absolute tolerance
        :return: True if the matrix is affine
        """
        M = np.asarray(matrix, dtype=np.float64)
        return M.shape == (4, 4) and bool(np.allclose(M[3], _AFFINE_LAST_ROW, atol=atol))

    @staticmethod
    def assert_orthonormal(matrix, atol: float = 1e-9) -> None:
        """Assert the rotation block of a matrix is orthonormal.

        :param matrix: 4x4 or 3x3 matrix
        :param atol: Absolute tolerance
        :raises AssertionError: If R @ R^T != I or det(R) != 1
        """
        if not MatrixVerifier.is_orthonormal(matrix, atol):
            R = np.asarray(matrix, dtype=np.float64)[:3, :3]
            raise AssertionError(
                f"Rotation block is not orthonormal: det={np.linalg.det(R):.12f}, "
                f"max |R R^T - I|={np.abs(R @ R.T - np.eye(3)).max():.3e}"
            )
        logger.debug("[MatrixVerifier] Orthonormal check passed")

    @staticmethod
    def assert_affine(matrix) -> None:
        """Assert a 4x4 matrix has last row ``[0, 0, 0, 1]``.

        :param matrix: 4x4 matrix
        :raises AssertionError: If the matrix is not affine
        """
        if not MatrixVerifier.is_affine(matrix):
            M = np.asarray(matrix)
            last_row = M[3].tolist() if M.ndim == 2 and M.shape[0] == 4 else None
            raise AssertionError(
                f"Matrix is not affine: shape={M.shape}, last row={last_row}"
            )

    @staticmethod
    def assert_points_close(
        points_a: Sequence[Point],
        points_b: Sequence[Point],
        atol: float = 1e-9,
    ) -> None:
        """Assert two point sequences match in order, label and coordinates.

        :param points_a: First sequence
        :param points_b: Second sequence
        :param atol: Absolute tolerance on coordinates
        :raises AssertionError: If lengths, labels or coordinates differ
        """
        if len(points_a) != len(points_b):
            raise AssertionError(
                f"Point count mismatch: {len(points_a)} vs {len(points_b)}"
            )

        for i, (a, b) in enumerate(zip(points_a, points_b, strict=True)):
            if a.label != b.label:
                raise AssertionError(f"Label mismatch at {i}: '{a.label}' vs '{b.label}'")
            if not np.allclose(a.as_array(), b.as_array(), atol=atol):
                raise AssertionError(
                    f"Coordinate mismatch at {i} ('{a.label}'): "
                    f"{a.as_array().tolist()} vs {b.as_array().tolist()}"
                )

        logger.debug("[MatrixVerifier] %d points match (atol=%g)", len(points_a), atol)
