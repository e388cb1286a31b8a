"""
Swarm Geometry - Plane math for a wrap-around (toroidal) world

All functions are pure. Angles are radians. The scalar helpers are used by
single boids; toroidal_distances() is the vectorised form used for
neighbour queries over a whole snapshot at once.
"""

import math
from typing import Sequence

import numpy as np


def toroidal_distance(ax: float, ay: float, bx: float, by: float,
                      width: float, height: float) -> float:
    """
    Shortest distance between two points on a width x height torus.

    Per axis the separation is min(gap, size - gap).
    """
    gap_x = abs(ax - bx)
    gap_y = abs(ay - by)
    dx = min(gap_x, width - gap_x)
    dy = min(gap_y, height - gap_y)
    return math.sqrt(dx * dx + dy * dy)


def toroidal_distances(x: float, y: float, xs: np.ndarray, ys: np.ndarray,
                       width: float, height: float) -> np.ndarray:
    """Distance from (x, y) to every point in (xs, ys) on the torus."""
    gap_x = np.abs(xs - x)
    gap_y = np.abs(ys - y)
    dx = np.minimum(gap_x, width - gap_x)
    dy = np.minimum(gap_y, height - gap_y)
    return np.sqrt(dx * dx + dy * dy)


def wrap(value: float, lo: float, hi: float) -> float:
    """
    Wrap value into [lo, hi) modulo the span.

    Used for positions (lo=-padding) and angles (lo=-pi, hi=pi). Values
    already in range come back unchanged.

    Raises:
        ValueError: hi <= lo, or value is not finite.
    """
    if hi <= lo:
        raise ValueError(f"wrap bounds must satisfy hi > lo, got [{lo}, {hi})")
    if not math.isfinite(value):
        raise ValueError(f"cannot wrap non-finite value {value}")

    if lo <= value < hi:
        return value

    span = hi - lo
    value = lo + math.fmod(value - lo, span)
    if value < lo:
        value += span
    # Rounding can land exactly on hi (or a hair under lo); both mean lo
    if value >= hi or value < lo:
        value = lo
    return value


def clamp(value: float, limit: float) -> float:
    """Clamp value to [-limit, limit]."""
    return min(limit, max(-limit, value))


def mean_angle(angles: Sequence[float]) -> float:
    """
    Circular mean of angles (radians).

    Repeat an angle to weight it, e.g. mean_angle([a, a, a, b]) is 3:1.
    """
    if len(angles) == 0:
        raise ValueError("mean_angle needs at least one angle")

    n = len(angles)
    sum_x = 0.0
    sum_y = 0.0
    for a in angles:
        sum_x += math.cos(a)
        sum_y += math.sin(a)
    return math.atan2(sum_y / n, sum_x / n)


def bearing(from_x: float, from_y: float, to_x: float, to_y: float) -> float:
    """Heading (radians) pointing from one point toward another."""
    return math.atan2(to_y - from_y, to_x - from_x)
