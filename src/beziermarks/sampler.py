"""Places evenly spaced markers along a cubic Bezier by arc length."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .arc_length import advance_to_length
from .bezier import Vec2, evaluate_features
from .config import SamplingConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    """A sampled parameter with the features needed to draw a marker."""

    t: float
    position: Vec2
    tangent: Vec2
    angle: float


def sample_curve(
    p0: Vec2,
    p1: Vec2,
    p2: Vec2,
    p3: Vec2,
    offset: float,
    spacing: float,
    step: float,
) -> List[float]:
    """Return increasing parameters spaced ``spacing`` apart along the curve.

    The first sample sits ``offset`` along the curve; ``offset == 0``
    includes ``t = 0``. Sampling stops at the first target that lies past
    ``t = 1``. Lengths are tracked nominally: each target is measured from
    the previous target rather than from the length the integrator actually
    accumulated. ``spacing`` and ``step`` must be positive.
    """
    samples: List[float] = []
    if offset == 0:
        samples.append(0.0)
        target = spacing
    else:
        target = offset

    length = 0.0
    t = 0.0
    while True:
        t = advance_to_length(length, target, t, step, p0, p1, p2, p3, t_limit=1.0)
        if t > 1.0:
            break
        samples.append(t)
        length = target
        target += spacing

    logger.debug(
        "sampled %d markers (offset=%s, spacing=%s, step=%s)",
        len(samples),
        offset,
        spacing,
        step,
    )
    return samples


def sample_features(
    p0: Vec2,
    p1: Vec2,
    p2: Vec2,
    p3: Vec2,
    offset: float,
    spacing: float,
    step: float,
) -> List[Marker]:
    """Like :func:`sample_curve` but with position and heading for each sample."""
    markers: List[Marker] = []
    for t in sample_curve(p0, p1, p2, p3, offset, spacing, step):
        position, tangent, angle = evaluate_features(t, p0, p1, p2, p3)
        markers.append(Marker(t=t, position=position, tangent=tangent, angle=angle))
    return markers


def place_markers(
    control_points: Sequence[Vec2], config: SamplingConfig | None = None
) -> List[Marker]:
    """Validate the inputs and return the markers for four control points."""
    if len(control_points) != 4:
        raise ValueError("A cubic Bezier requires exactly four control points")
    settings = (config or SamplingConfig()).validate()
    p0, p1, p2, p3 = (_as_point(point) for point in control_points)
    return sample_features(
        p0, p1, p2, p3, settings.offset, settings.spacing, settings.step
    )


def _as_point(value) -> Vec2:
    return float(value[0]), float(value[1])


__all__ = ["Marker", "sample_curve", "sample_features", "place_markers"]
