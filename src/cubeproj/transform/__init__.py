"""
Affine transform module - translation/scale builders and point mapping.

Example:
    >>> from cubeproj.point import Point
    >>> from cubeproj.transform import apply_transform, translation_matrix
    >>> p = apply_transform(Point(0, 0, 0, "origin"), translation_matrix((1, 2, 3)))
"""

from cubeproj.transform.api import (
    apply_transform,
    apply_transform_many,
    compose_world_matrix,
    scale_matrix,
    translation_matrix,
)

__all__ = [
    "translation_matrix",
    "scale_matrix",
    "compose_world_matrix",
    "apply_transform",
    "apply_transform_many",
]
