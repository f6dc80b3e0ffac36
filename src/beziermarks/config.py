"""Sampling parameters and defaults for the marker sketch."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Tuple

from .bezier import Vec2

DEFAULT_STEP = 0.001
DEFAULT_SPACING = 10.0
SPACING_RANGE: Tuple[float, float] = (1.0, 100.0)
OFFSET_RANGE: Tuple[float, float] = (0.0, 1000.0)
DEFAULT_CONTROL_POINTS: Tuple[Vec2, Vec2, Vec2, Vec2] = (
    (50.0, 50.0),
    (60.0, 250.0),
    (200.0, 200.0),
    (250.0, 50.0),
)


class SamplingConfigError(ValueError):
    """Raised when sampling parameters would not terminate or make no sense."""


@dataclass(frozen=True)
class SamplingConfig:
    """Arc-length offset, marker spacing and integrator step.

    ``offset`` and ``spacing`` share the units of the control points;
    ``step`` is a parametric increment.
    """

    offset: float = 0.0
    spacing: float = DEFAULT_SPACING
    step: float = DEFAULT_STEP

    def validate(self) -> "SamplingConfig":
        for name in ("offset", "spacing", "step"):
            if not math.isfinite(getattr(self, name)):
                raise SamplingConfigError(f"{name} must be finite")
        if self.step <= 0:
            raise SamplingConfigError("step must be positive")
        if self.spacing <= 0:
            raise SamplingConfigError("spacing must be positive")
        if self.offset < 0:
            raise SamplingConfigError("offset must be >= 0")
        return self

    def clamped(self) -> "SamplingConfig":
        """Return a copy with spacing and offset held to the slider ranges."""
        return replace(
            self,
            spacing=_clamp(self.spacing, *SPACING_RANGE),
            offset=_clamp(self.offset, *OFFSET_RANGE),
        )


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


__all__ = [
    "DEFAULT_CONTROL_POINTS",
    "DEFAULT_SPACING",
    "DEFAULT_STEP",
    "OFFSET_RANGE",
    "SPACING_RANGE",
    "SamplingConfig",
    "SamplingConfigError",
]
