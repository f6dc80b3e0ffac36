"""Arc-length sampling of markers along a cubic Bezier curve."""

from .arc_length import advance_to_length, curve_length, delta_arc_length
from .bezier import (
    Vec2,
    evaluate_derivative,
    evaluate_features,
    evaluate_position,
    evaluate_positions,
    evaluate_tangents,
    flatten,
)
from .config import (
    DEFAULT_CONTROL_POINTS,
    DEFAULT_SPACING,
    DEFAULT_STEP,
    OFFSET_RANGE,
    SPACING_RANGE,
    SamplingConfig,
    SamplingConfigError,
)
from .sampler import Marker, place_markers, sample_curve, sample_features

__all__ = [
    "Vec2",
    "evaluate_position",
    "evaluate_derivative",
    "evaluate_features",
    "evaluate_positions",
    "evaluate_tangents",
    "flatten",
    "delta_arc_length",
    "advance_to_length",
    "curve_length",
    "SamplingConfig",
    "SamplingConfigError",
    "DEFAULT_CONTROL_POINTS",
    "DEFAULT_SPACING",
    "DEFAULT_STEP",
    "SPACING_RANGE",
    "OFFSET_RANGE",
    "Marker",
    "sample_curve",
    "sample_features",
    "place_markers",
]
