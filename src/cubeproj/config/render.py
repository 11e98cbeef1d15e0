"""Render configuration.

This module defines the constants of the render pipeline together with
the parameter specifications used to validate box and camera poses.
"""

from __future__ import annotations

from dataclasses import dataclass

from cubeproj.config.operations import OperationSpec


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the cube render pipeline.

    Attributes:
        base_projection_constant: Focal scalar at zoom 1.0
        z_translate_offset: Forward standoff added to the camera z position
        exact_camera_inverse: Use the exact rigid inverse for the camera
            instead of the transposed-rotation/un-rotated-translation form
    """

    base_projection_constant: float = 300.0
    z_translate_offset: float = 5.0
    exact_camera_inverse: bool = False

    zoom: OperationSpec = OperationSpec(
        name="zoom",
        min_value=0.01,
        max_value=100.0,
        default=1.0,
        neutral=1.0,
        description="Multiplier on the base projection constant: 1.0=no change",
    )

    rotation_angle: OperationSpec = OperationSpec(
        name="rotation_angle",
        min_value=-360.0,
        max_value=360.0,
        default=0.0,
        neutral=0.0,
        description="Rotation angle in degrees: 0=no rotation",
    )

    scale_factor: OperationSpec = OperationSpec(
        name="scale_factor",
        min_value=-1000.0,
        max_value=1000.0,
        default=1.0,
        neutral=1.0,
        description="Per-axis scale multiplier: 1.0=no change, negative mirrors",
    )

    def projection_constant(self, zoom: float) -> float:
        """Projection constant for a camera zoom.

        :param zoom: Camera zoom
        :returns: ``base_projection_constant * zoom``
        """
        return self.base_projection_constant * zoom

    def get_spec(self, name: str) -> OperationSpec:
        """Get operation spec by name.

        :param name: Operation name
        :return: OperationSpec for the operation
        :raises AttributeError: If operation not found
        """
        spec = getattr(self, name)
        if not isinstance(spec, OperationSpec):
            raise AttributeError(f"'{name}' is not an operation spec")
        return spec

    def get_all_specs(self) -> dict[str, OperationSpec]:
        """Get all operation specs as a dictionary.

        :return: Dictionary mapping operation names to specs
        """
        return {
            "zoom": self.zoom,
            "rotation_angle": self.rotation_angle,
            "scale_factor": self.scale_factor,
        }


# Singleton instance for use throughout the codebase
RENDER_CONFIG = RenderConfig()
