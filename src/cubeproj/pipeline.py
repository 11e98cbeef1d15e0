"""Cube render pipeline.

Turns a box pose and a camera pose into the eight projected cube corners,
in canonical corner order.

Example:
    >>> from cubeproj import BoxPose, CameraPose, render_scene
    >>>
    >>> points = render_scene(BoxPose(ry=30), CameraPose(zoom=1.5))
    >>> [p.label for p in points][:2]
    ['front-top-left', 'front-top-right']
    >>>
    >>> # Fluent builder
    >>> points = Scene().rotate(0, 30, 0).scale(2.0).zoom(1.5).render()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

import numpy as np

from cubeproj.camera import exact_world_wrt_camera_matrix, world_wrt_camera_matrix
from cubeproj.config.presets import box_from_dict, camera_from_dict
from cubeproj.config.render import RENDER_CONFIG, RenderConfig
from cubeproj.config.values import BoxPose, CameraPose
from cubeproj.geometry import UNIT_CUBE, Cube
from cubeproj.point import Point
from cubeproj.projection import project_point
from cubeproj.shared.matrix import multiply4x4
from cubeproj.transform.api import apply_transform

logger = logging.getLogger(__name__)


def _as_box_pose(box: BoxPose | Mapping) -> BoxPose:
    if isinstance(box, BoxPose):
        return box
    if isinstance(box, Mapping):
        return box_from_dict(dict(box))
    raise TypeError(f"Expected BoxPose or mapping, got {type(box).__name__}")


def _as_camera_pose(camera: CameraPose | Mapping) -> CameraPose:
    if isinstance(camera, CameraPose):
        return camera
    if isinstance(camera, Mapping):
        return camera_from_dict(dict(camera))
    raise TypeError(f"Expected CameraPose or mapping, got {type(camera).__name__}")


def camera_matrix(camera: CameraPose, config: RenderConfig = RENDER_CONFIG) -> np.ndarray:
    """World-to-camera matrix for a camera pose.

    The camera sits ``config.z_translate_offset`` further along z than its
    pose says, so the default pose never coincides with the cube plane.

    :param camera: Camera pose
    :param config: Render configuration
    :returns: 4x4 world-to-camera matrix
    """
    position = (camera.tx, camera.ty, camera.tz + config.z_translate_offset)
    orientation = camera.orientation
    if config.exact_camera_inverse:
        return exact_world_wrt_camera_matrix(position, orientation)
    return world_wrt_camera_matrix(position, orientation)


def render_cube(cube: Cube, matrix, projection_constant: float) -> tuple[Point, ...]:
    """Transform and project every template corner of a cube.

    :param cube: Cube instance
    :param matrix: 4x4 cube-to-camera matrix
    :param projection_constant: Focal scalar ``k``
    :returns: Projected corners in canonical order
    :raises DegenerateProjectionError: If a corner lands in the camera plane
    """
    return tuple(
        project_point(apply_transform(point, matrix), projection_constant)
        for point in cube.points
    )


def cube_wrt_camera_matrix(
    box: BoxPose | Mapping,
    camera: CameraPose | Mapping,
    config: RenderConfig = RENDER_CONFIG,
) -> np.ndarray:
    """Compose the cube-to-camera matrix ``worldToCamera @ cubeToWorld``."""
    box = _as_box_pose(box)
    camera = _as_camera_pose(camera)
    cube = Cube.from_pose(box)
    return multiply4x4(camera_matrix(camera, config), cube.wrt_world_matrix)


def render_scene(
    box: BoxPose | Mapping,
    camera: CameraPose | Mapping,
    config: RenderConfig = RENDER_CONFIG,
) -> tuple[Point, ...]:
    """Project the eight corners of a posed cube through a posed camera.

    Consumers index the result positionally, so the order always matches
    :data:`cubeproj.geometry.CORNER_NAMES`.

    :param box: Box pose (BoxPose or mapping with rx..tz keys)
    :param camera: Camera pose (CameraPose or mapping with rx..tz, zoom keys)
    :param config: Render configuration
    :returns: Tuple of 8 projected points
    :raises DegenerateProjectionError: If a corner lands in the camera plane
    """
    box = _as_box_pose(box)
    camera = _as_camera_pose(camera)

    projection_constant = config.projection_constant(camera.zoom)
    cube = Cube.from_pose(box)
    matrix = multiply4x4(camera_matrix(camera, config), cube.wrt_world_matrix)

    logger.debug(
        "[Render] box=%s camera=%s k=%.3f exact_inverse=%s",
        box,
        camera,
        projection_constant,
        config.exact_camera_inverse,
    )
    return render_cube(cube, matrix, projection_constant)


def project_center(
    box: BoxPose | Mapping,
    camera: CameraPose | Mapping,
    config: RenderConfig = RENDER_CONFIG,
) -> Point:
    """Project the cube center through the same transforms as its corners.

    :returns: Projected center labeled ``cube-center``
    :raises DegenerateProjectionError: If the center lands in the camera plane
    """
    camera = _as_camera_pose(camera)
    matrix = cube_wrt_camera_matrix(box, camera, config)
    return project_point(
        apply_transform(UNIT_CUBE.center, matrix), config.projection_constant(camera.zoom)
    )


@dataclass
class Scene:
    """Fluent builder for a single cube/camera render.

    Each call replaces one part of the pose and returns self.

    Example:
        >>> points = (Scene()
        ...     .rotate(20, 30, 0)
        ...     .scale(1.5)
        ...     .translate(0, 0, -1)
        ...     .camera(ry=5)
        ...     .zoom(2.0)
        ...     .render())
    """

    box: BoxPose = field(default_factory=BoxPose)
    cam: CameraPose = field(default_factory=CameraPose)
    config: RenderConfig = RENDER_CONFIG

    # ========================================================================
    # Box Methods
    # ========================================================================

    def rotate(self, rx: float, ry: float, rz: float) -> Scene:
        """Set box rotation.

        :param rx: X rotation in degrees
        :param ry: Y rotation in degrees
        :param rz: Z rotation in degrees
        :returns: Self for chaining
        """
        self.box = replace(self.box, rx=rx, ry=ry, rz=rz)
        return self

    def scale(self, sx: float, sy: float | None = None, sz: float | None = None) -> Scene:
        """Set box scale (uniform when only ``sx`` is given).

        :returns: Self for chaining
        """
        self.box = replace(
            self.box,
            sx=sx,
            sy=sx if sy is None else sy,
            sz=sx if sz is None else sz,
        )
        return self

    def translate(self, tx: float, ty: float, tz: float) -> Scene:
        """Set box translation.

        :returns: Self for chaining
        """
        self.box = replace(self.box, tx=tx, ty=ty, tz=tz)
        return self

    # ========================================================================
    # Camera Methods
    # ========================================================================

    def camera(self, **kwargs: float) -> Scene:
        """Update camera pose fields (rx, ry, rz, tx, ty, tz, zoom).

        :returns: Self for chaining
        """
        self.cam = replace(self.cam, **kwargs)
        return self

    def zoom(self, factor: float) -> Scene:
        """Set camera zoom.

        :param factor: Multiplier on the base projection constant
        :returns: Self for chaining
        """
        self.cam = replace(self.cam, zoom=factor)
        return self

    def exact_inverse(self, enabled: bool = True) -> Scene:
        """Use the exact rigid camera inverse.

        :returns: Self for chaining
        """
        self.config = replace(self.config, exact_camera_inverse=enabled)
        return self

    # ========================================================================
    # Execution
    # ========================================================================

    def render(self) -> tuple[Point, ...]:
        """Render the current scene.

        :returns: Tuple of 8 projected points in canonical order
        """
        return render_scene(self.box, self.cam, self.config)

    def reset(self) -> Scene:
        """Reset box and camera to their default poses."""
        self.box = BoxPose()
        self.cam = CameraPose()
        self.config = RENDER_CONFIG
        return self
