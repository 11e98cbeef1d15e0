"""Type aliases for cubeproj.

Provides unified type hints for array-like parameters across all modules.
"""

from collections.abc import Sequence

import numpy as np

# 3D vector type (position, euler angles, scale, etc.)
Vector3 = tuple[float, float, float] | Sequence[float] | np.ndarray

# 4x4 homogeneous matrix (row-major)
Matrix4x4 = np.ndarray
