"""Numerical arc length along a cubic Bezier segment."""

from __future__ import annotations

import math

import numpy as np

from .bezier import Vec2, evaluate_derivative, evaluate_tangents


def delta_arc_length(delta_t: float, dx: float, dy: float) -> float:
    """Rectangular-rule length swept over ``delta_t`` at tangent ``(dx, dy)``."""
    return math.sqrt(dx * dx + dy * dy) * delta_t


def advance_to_length(
    current_length: float,
    target_length: float,
    current_t: float,
    step: float,
    p0: Vec2,
    p1: Vec2,
    p2: Vec2,
    p3: Vec2,
    *,
    t_limit: float | None = None,
) -> float:
    """Step ``t`` forward until the accumulated length reaches ``target_length``.

    ``current_length`` must be the arc length from 0 to ``current_t``. The
    speed is sampled at the end of each ``step`` interval.

    Without ``t_limit`` the loop has no bound: targets beyond the end of the
    segment extrapolate the cubic past ``t = 1``, and a zero-length curve
    never returns. With ``t_limit`` the loop also stops once ``t`` exceeds
    it, and the returned ``t > t_limit`` tells the caller the target was not
    reached on the segment. ``step`` must be positive.
    """
    while current_length < target_length:
        current_t += step
        if t_limit is not None and current_t > t_limit:
            break
        dx, dy = evaluate_derivative(current_t, p0, p1, p2, p3)
        current_length += delta_arc_length(step, dx, dy)
    return current_t


def curve_length(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, *, step: float) -> float:
    """Approximate the total length over ``[0, 1]`` with the stepping rule."""
    if step <= 0:
        raise ValueError("step must be positive")
    count = max(1, int(round(1.0 / step)))
    ts = np.arange(1, count + 1, dtype=np.float64) / count
    tangents = evaluate_tangents(ts, p0, p1, p2, p3)
    speeds = np.hypot(tangents[:, 0], tangents[:, 1])
    return float(speeds.sum() / count)


__all__ = ["delta_arc_length", "advance_to_length", "curve_length"]
