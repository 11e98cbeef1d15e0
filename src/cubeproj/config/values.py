"""Pose value dataclasses.

This module provides the value-holding dataclasses that describe one
render: the box pose (rotation, scale, translation) and the camera pose
(orientation, position, zoom).
"""

from __future__ import annotations

from dataclasses import dataclass

from cubeproj.config.render import RENDER_CONFIG


@dataclass(frozen=True)
class BoxPose:
    """Pose of the cube in world space.

    Rotation is in degrees and is applied first, then the per-axis scale,
    then the translation.

    Example:
        >>> pose = BoxPose(ry=45, sx=2.0, tz=-1.0)
        >>> pose.rotation
        (0.0, 45, 0.0)
    """

    # Euler rotation in degrees (neutral=0.0)
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0

    # Per-axis scale (neutral=1.0)
    sx: float = 1.0
    sy: float = 1.0
    sz: float = 1.0

    # Translation (neutral=0.0)
    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0

    @property
    def rotation(self) -> tuple[float, float, float]:
        return (self.rx, self.ry, self.rz)

    @property
    def scale(self) -> tuple[float, float, float]:
        return (self.sx, self.sy, self.sz)

    @property
    def translation(self) -> tuple[float, float, float]:
        return (self.tx, self.ty, self.tz)

    def clamp(self) -> BoxPose:
        """Clamp rotation and scale to valid ranges.

        :returns: New BoxPose with clamped values
        """
        angle = RENDER_CONFIG.rotation_angle
        scale = RENDER_CONFIG.scale_factor
        return BoxPose(
            rx=angle.validate(self.rx),
            ry=angle.validate(self.ry),
            rz=angle.validate(self.rz),
            sx=scale.validate(self.sx),
            sy=scale.validate(self.sy),
            sz=scale.validate(self.sz),
            tx=self.tx,
            ty=self.ty,
            tz=self.tz,
        )

    def is_neutral(self) -> bool:
        """Check if this pose leaves the unit cube unchanged.

        :returns: True if rotation and translation are zero and scale is one
        """
        return (
            all(abs(v) < 1e-9 for v in self.rotation)
            and all(abs(v - 1.0) < 1e-9 for v in self.scale)
            and all(abs(v) < 1e-9 for v in self.translation)
        )

    # Factory methods
    @classmethod
    def from_rotation(cls, rx: float, ry: float, rz: float) -> BoxPose:
        """Create a pose with only rotation set.

        :param rx: X rotation in degrees
        :param ry: Y rotation in degrees
        :param rz: Z rotation in degrees
        :returns: BoxPose with only rotation set
        """
        return cls(rx=rx, ry=ry, rz=rz)

    @classmethod
    def from_scale(cls, sx: float, sy: float | None = None, sz: float | None = None) -> BoxPose:
        """Create a pose with only scale set.

        A single factor gives a uniform scale.

        :param sx: X scale (or uniform scale)
        :param sy: Y scale, defaults to ``sx``
        :param sz: Z scale, defaults to ``sx``
        :returns: BoxPose with only scale set
        """
        return cls(
            sx=sx,
            sy=sx if sy is None else sy,
            sz=sx if sz is None else sz,
        )

    @classmethod
    def from_translation(cls, x: float, y: float, z: float) -> BoxPose:
        """Create a pose with only translation set."""
        return cls(tx=x, ty=y, tz=z)


@dataclass(frozen=True)
class CameraPose:
    """Pose of the camera.

    The render pipeline adds a forward standoff to ``tz`` before building
    the camera matrix, so the all-zero pose looks at the cube from a
    distance. ``zoom`` multiplies the base projection constant.

    Example:
        >>> cam = CameraPose(ry=10, zoom=2.0)
        >>> cam.orientation
        (0.0, 10, 0.0)
    """

    # Euler orientation in degrees (neutral=0.0)
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0

    # Position (neutral=0.0)
    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0

    # Multiplicative (neutral=1.0)
    zoom: float = 1.0

    @property
    def orientation(self) -> tuple[float, float, float]:
        return (self.rx, self.ry, self.rz)

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.tx, self.ty, self.tz)

    def clamp(self) -> CameraPose:
        """Clamp orientation and zoom to valid ranges.

        :returns: New CameraPose with clamped values
        """
        angle = RENDER_CONFIG.rotation_angle
        return CameraPose(
            rx=angle.validate(self.rx),
            ry=angle.validate(self.ry),
            rz=angle.validate(self.rz),
            tx=self.tx,
            ty=self.ty,
            tz=self.tz,
            zoom=RENDER_CONFIG.zoom.validate(self.zoom),
        )

    def is_neutral(self) -> bool:
        """Check if this is the default camera pose.

        :returns: True if orientation and position are zero and zoom is one
        """
        return (
            all(abs(v) < 1e-9 for v in self.orientation)
            and all(abs(v) < 1e-9 for v in self.position)
            and RENDER_CONFIG.zoom.is_neutral(self.zoom)
        )

    # Factory methods
    @classmethod
    def from_orientation(cls, rx: float, ry: float, rz: float) -> CameraPose:
        """Create a camera pose with only orientation set (degrees)."""
        return cls(rx=rx, ry=ry, rz=rz)

    @classmethod
    def from_position(cls, x: float, y: float, z: float) -> CameraPose:
        """Create a camera pose with only position set."""
        return cls(tx=x, ty=y, tz=z)

    @classmethod
    def from_zoom(cls, zoom: float) -> CameraPose:
        """Create a camera pose with only zoom set."""
        return cls(zoom=zoom)
