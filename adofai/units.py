"""Small numeric helpers: a 2D vector and tempo conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable two-dimensional vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector2:
        return Vector2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        """Squared Euclidean length of the vector."""
        return self.x * self.x + self.y * self.y

    def normalise(self) -> Vector2:
        """Vector of unit length in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2(0.0, 0.0)
        return self / length


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg / 180.0 * math.pi


def bpm2crotchet(bpm: float) -> float:
    """Seconds per beat for a tempo in beats per minute."""
    return 60.0 / bpm


def bpm2mspb(bpm: float) -> float:
    """Milliseconds per beat for a tempo in beats per minute."""
    return 60000.0 / bpm