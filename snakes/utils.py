"""Geometry primitives used by the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
import math
import random
from typing import Iterator

GOLDEN_RATIO: float = (1 + math.sqrt(5)) / 2


@dataclass(frozen=True)
class Vec2:
    """An immutable two dimensional vector.

    Covers what the universe needs for snakes and pickups: addition,
    subtraction, scaling, negation, rotation and distance computations.
    Instances are shared freely between successive universe states, hence
    ``frozen``.
    """

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""

        return math.hypot(self.x, self.y)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_sq_to(self, other: "Vec2") -> float:
        """Return the squared distance between this vector and ``other``."""

        return (self - other).length_sq()

    def normalized(self) -> "Vec2":
        """Return a normalised copy of the vector.

        The zero vector normalises to ``Vec2(0, 0)``.
        """

        length = self.length()
        if length == 0:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def rotated(self, angle: float) -> "Vec2":
        """Return the vector rotated counter-clockwise by ``angle`` radians."""

        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def to_tuple(self) -> tuple[float, float]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y


def random_point_in_area(width: float, height: float, rng=random) -> Vec2:
    """Return a uniformly random point in the ``width`` x ``height`` area centred at the origin."""

    return Vec2(rng.uniform(-width / 2, width / 2), rng.uniform(-height / 2, height / 2))


def golden_spiral(start: Vec2) -> Iterator[Vec2]:
    """Yield ``start`` and its successive rotations by the golden angle.

    Consecutive points land far apart and never repeat, which spreads spawn
    locations around the field.
    """

    angle = 2 * math.pi / GOLDEN_RATIO
    point = start
    while True:
        yield point
        point = point.rotated(angle)
