"""Operation specifications for render configuration.

This module defines the OperationSpec dataclass that specifies parameter
ranges, defaults, and neutral values for pose parameters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OperationSpec:
    """Specification for a pose parameter.

    Attributes:
        name: Parameter name (e.g., "zoom", "rotation_angle")
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        default: Default value when not specified
        neutral: Value that causes no change (identity)
        description: Human-readable description
    """

    name: str
    min_value: float
    max_value: float
    default: float
    neutral: float
    description: str = ""

    def validate(self, value: float) -> float:
        """Validate and clamp value to allowed range.

        :param value: Value to validate
        :returns: Clamped value within [min_value, max_value]
        :raises ValueError: If value is not a number
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")

        # Clamp to range
        return max(self.min_value, min(self.max_value, float(value)))

    def is_neutral(self, value: float, tolerance: float = 1e-9) -> bool:
        """Check if value is effectively neutral (no change).

        :param value: Value to check
        :param tolerance: Tolerance for floating point comparison
        :returns: True if value is within tolerance of neutral
        """
        return abs(value - self.neutral) < tolerance

    def __repr__(self) -> str:
        return (
            f"OperationSpec({self.name}, "
            f"range=[{self.min_value}, {self.max_value}], "
            f"default={self.default}, neutral={self.neutral})"
        )
