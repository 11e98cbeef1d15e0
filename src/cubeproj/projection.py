"""Perspective projection of camera-space points."""

from __future__ import annotations

import math

from cubeproj.point import Point


class DegenerateProjectionError(ArithmeticError):
    """Raised when a point cannot be projected to finite screen coordinates.

    Happens when the point lies in the camera's z-plane (z == 0) or when
    any coordinate is already non-finite.
    """

    def __init__(self, message: str, point: Point):
        super().__init__(message)
        self.point = point


def project_point(point: Point, projection_constant: float) -> Point:
    """Project a camera-space point onto the screen.

    ``screen_x = x / z * k``, ``screen_y = y / z * k``. The third slot of
    the result stores ``k`` itself, not a depth.

    :param point: Camera-space point
    :param projection_constant: Focal scalar ``k``
    :returns: Projected point with the same label
    :raises DegenerateProjectionError: If z is zero or a result is non-finite

    Example:
        >>> project_point(Point(2, 4, 10, "p"), 300)
        Point(x=60.0, y=120.0, z=300, label='p')
    """
    if point.z == 0:
        raise DegenerateProjectionError(
            f"Cannot project '{point.label}': camera-space z is 0 "
            "(point lies in the camera plane)",
            point,
        )

    screen_x = (point.x / point.z) * projection_constant
    screen_y = (point.y / point.z) * projection_constant

    if not all(math.isfinite(v) for v in (screen_x, screen_y, projection_constant)):
        raise DegenerateProjectionError(
            f"Non-finite projection for '{point.label}': "
            f"({screen_x}, {screen_y}) from ({point.x}, {point.y}, {point.z})",
            point,
        )

    return Point(screen_x, screen_y, projection_constant, point.label)
