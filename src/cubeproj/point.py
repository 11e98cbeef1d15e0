"""Labeled 3D point value type."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point:
    """Immutable labeled point.

    The label identifies which cube corner a numeric result belongs to.
    It is carried unchanged through every transform and projection.

    After projection, ``x``/``y`` hold screen coordinates and ``z`` holds
    the projection constant rather than a depth.

    Example:
        >>> p = Point(1.0, 2.0, 3.0, "front-top-left")
        >>> p.as_array()
        array([1., 2., 3.])
    """

    x: float
    y: float
    z: float
    label: str = ""

    def as_array(self) -> np.ndarray:
        """Coordinates as a float64 array [3]."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr, label: str = "") -> Point:
        """Create a point from a 3-element array.

        :param arr: Coordinates [3]
        :param label: Point label
        :returns: Point instance
        """
        arr = np.asarray(arr, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Point must have 3 coordinates, got {arr.shape[0]}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]), label)


# Projected output reuses the point type
ProjectedPoint = Point
