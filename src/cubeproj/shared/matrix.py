"""Fixed-size 4x4 matrix algebra.

All functions return new arrays and never modify their inputs.
Matrices are row-major float64 numpy arrays of shape (4, 4).
"""

from __future__ import annotations

import numpy as np


def _as_matrix4x4(m) -> np.ndarray:
    arr = np.asarray(m, dtype=np.float64)
    if arr.shape != (4, 4):
        raise ValueError(f"Matrix must be shape (4, 4), got {arr.shape}")
    return arr


def uniform_matrix4x4(d: float) -> np.ndarray:
    """Build a scratch 4x4 matrix with every element set to ``d``.

    :param d: Fill value
    :returns: 4x4 matrix
    """
    return np.full((4, 4), d, dtype=np.float64)


def identity4x4() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def multiply4x4(matrix_a, matrix_b) -> np.ndarray:
    """Multiply two 4x4 matrices.

    ``C[i][j] = sum_k A[i][k] * B[k][j]``. Order matters: the result
    applies ``matrix_b`` first, then ``matrix_a``, to a column vector.

    :param matrix_a: Left operand [4, 4]
    :param matrix_b: Right operand [4, 4]
    :returns: Product matrix [4, 4]
    :raises ValueError: If either operand is not 4x4

    Example:
        >>> m = multiply4x4(identity4x4(), rot_x(30))
    """
    a = _as_matrix4x4(matrix_a)
    b = _as_matrix4x4(matrix_b)
    return a @ b


def transpose4x4(m) -> np.ndarray:
    """Return a transposed copy of a 4x4 matrix."""
    return _as_matrix4x4(m).T.copy()
