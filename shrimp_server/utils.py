"""Geometry primitives used by the authoritative game server."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random


@dataclass
class Vec2:
    """A light‑weight two dimensional vector for positions and offsets."""

    x: float
    y: float

    def copy(self) -> "Vec2":
        """Return a shallow copy of the vector."""

        return Vec2(self.x, self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``; NaN collapses to ``low``."""

    if math.isnan(value):
        return low
    return max(low, min(high, value))


def clamp_to_map(x: float, y: float, width: float, height: float) -> Vec2:
    """Return ``(x, y)`` clamped into the ``[0, width] x [0, height]`` rectangle."""

    return Vec2(clamp(x, 0.0, width), clamp(y, 0.0, height))


def random_point_in_map(rng: random.Random, width: float, height: float, margin: float) -> Vec2:
    """Return a uniformly random point at least ``margin`` away from every edge."""

    return Vec2(rng.uniform(margin, width - margin), rng.uniform(margin, height - margin))


def step_towards(position: Vec2, target: Vec2, max_distance: float) -> Vec2:
    """Move ``position`` in a straight line towards ``target``.

    The step never overshoots: when the target is closer than ``max_distance``
    the target itself is returned.
    """

    offset = target - position
    distance = offset.length()
    if distance <= max_distance or distance == 0:
        return target.copy()
    return position + offset * (max_distance / distance)
