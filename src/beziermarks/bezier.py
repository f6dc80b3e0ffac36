"""Evaluation helpers for a single cubic Bezier segment."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Vec2 = Tuple[float, float]


def evaluate_position(t: float, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> Vec2:
    """Return the point B(t) on the curve.

    Any real ``t`` is accepted; only ``[0, 1]`` lies on the drawn segment.
    """
    x = _bernstein(t, p0[0], p1[0], p2[0], p3[0])
    y = _bernstein(t, p0[1], p1[1], p2[1], p3[1])
    return x, y


def evaluate_derivative(t: float, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> Vec2:
    """Return the velocity vector B'(t)."""
    x = _bernstein_derivative(t, p0[0], p1[0], p2[0], p3[0])
    y = _bernstein_derivative(t, p0[1], p1[1], p2[1], p3[1])
    return x, y


def evaluate_features(
    t: float, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2
) -> Tuple[Vec2, Vec2, float]:
    """Return position, tangent and heading angle (radians) at ``t``.

    A zero-length tangent gives ``atan2(0, 0) == 0.0``.
    """
    position = evaluate_position(t, p0, p1, p2, p3)
    tangent = evaluate_derivative(t, p0, p1, p2, p3)
    angle = math.atan2(tangent[1], tangent[0])
    return position, tangent, angle


def evaluate_positions(
    ts: Sequence[float] | np.ndarray, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2
) -> np.ndarray:
    """Evaluate many parameters at once, returning an ``(N, 2)`` array."""
    t_arr = np.asarray(ts, dtype=np.float64)
    xs = _bernstein(t_arr, p0[0], p1[0], p2[0], p3[0])
    ys = _bernstein(t_arr, p0[1], p1[1], p2[1], p3[1])
    return np.column_stack((xs, ys))


def evaluate_tangents(
    ts: Sequence[float] | np.ndarray, p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2
) -> np.ndarray:
    """Vectorised counterpart of :func:`evaluate_derivative`."""
    t_arr = np.asarray(ts, dtype=np.float64)
    dxs = _bernstein_derivative(t_arr, p0[0], p1[0], p2[0], p3[0])
    dys = _bernstein_derivative(t_arr, p0[1], p1[1], p2[1], p3[1])
    return np.column_stack((dxs, dys))


def flatten(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, *, segments: int) -> np.ndarray:
    """Return a polyline approximation with ``segments + 1`` vertices."""
    if segments < 1:
        raise ValueError("segments must be >= 1")
    ts = np.linspace(0.0, 1.0, segments + 1)
    points = evaluate_positions(ts, p0, p1, p2, p3)
    # pin endpoints to the control points
    points[0] = p0
    points[-1] = p3
    return points


def _bernstein(t, a: float, b: float, c: float, d: float):
    u = 1.0 - t
    return u**3 * a + 3.0 * u**2 * t * b + 3.0 * u * t**2 * c + t**3 * d


def _bernstein_derivative(t, a: float, b: float, c: float, d: float):
    u = 1.0 - t
    return 3.0 * u**2 * (b - a) + 6.0 * u * t * (c - b) + 3.0 * t**2 * (d - c)


__all__ = [
    "Vec2",
    "evaluate_position",
    "evaluate_derivative",
    "evaluate_features",
    "evaluate_positions",
    "evaluate_tangents",
    "flatten",
]
