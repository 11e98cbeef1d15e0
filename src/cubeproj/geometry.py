"""Canonical unit-cube geometry and per-instance world transforms.

Corner layout (local space)::

       E4------F5      y
       |`.    | `.     |
       |  `A0-----B1   *----- x
       |   |  |   |     \\
       G6--|--H7  |      \\
        `. |   `. |       z
          `C2-----D3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from cubeproj.point import Point
from cubeproj.transform.api import compose_world_matrix

if TYPE_CHECKING:
    from cubeproj.config.values import BoxPose


@dataclass(frozen=True)
class NormalUnitCube:
    """Read-only template: center plus 8 corners at (+-1, +-1, +-1)."""

    center: Point = Point(0.0, 0.0, 0.0, "cube-center")
    points: tuple[Point, ...] = (
        Point(-1.0, +1.0, +1.0, "front-top-left"),  # A0
        Point(+1.0, +1.0, +1.0, "front-top-right"),  # B1
        Point(-1.0, -1.0, +1.0, "front-bottom-left"),  # C2
        Point(+1.0, -1.0, +1.0, "front-bottom-right"),  # D3
        Point(-1.0, +1.0, -1.0, "back-top-left"),  # E4
        Point(+1.0, +1.0, -1.0, "back-top-right"),  # F5
        Point(-1.0, -1.0, -1.0, "back-bottom-left"),  # G6
        Point(+1.0, -1.0, -1.0, "back-bottom-right"),  # H7
    )

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(p.label for p in self.points)


# Shared template, constructed once
UNIT_CUBE = NormalUnitCube()

CORNER_NAMES = UNIT_CUBE.labels
FRONT_CORNERS = CORNER_NAMES[:4]
BACK_CORNERS = CORNER_NAMES[4:]


@dataclass(frozen=True)
class Cube:
    """One cube instance: the shared template plus its own world matrix.

    The world matrix is ``T @ (S @ R)``: rotate first, then scale, then
    translate. The template points are exposed untouched; callers map
    them with the matrix they need.

    Example:
        >>> cube = Cube(rotation=(0, 45, 0), scale=(2, 1, 1))
        >>> cube.points[0].label
        'front-top-left'
    """

    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)
    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    template: NormalUnitCube = field(default=UNIT_CUBE, repr=False)

    @property
    def wrt_world_matrix(self) -> np.ndarray:
        """Cube-to-world matrix, recomputed on every access."""
        return compose_world_matrix(self.rotation, self.scale, self.translation)

    @property
    def points(self) -> tuple[Point, ...]:
        return self.template.points

    @property
    def center(self) -> Point:
        return self.template.center

    @classmethod
    def from_pose(cls, pose: BoxPose) -> Cube:
        """Create a cube instance from a box pose.

        :param pose: Box rotation (degrees), scale and translation
        :returns: Cube instance
        """
        return cls(
            rotation=pose.rotation,
            scale=pose.scale,
            translation=pose.translation,
        )
