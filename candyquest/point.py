"""Two-dimensional points with integer or float coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """An immutable 2D point."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return self.negated()

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def negated(self) -> Point:
        return Point(-self.x, -self.y)

    def _is_integral(self, other: Point) -> bool:
        return all(isinstance(v, int) for v in (self.x, self.y, other.x, other.y))

    def distance_to(self, other: Point) -> Number:
        """Euclidean distance; truncated to an int for integer points."""
        fx = self.x - other.x
        fy = self.y - other.y
        distance = math.sqrt(fx * fx + fy * fy)
        return int(distance) if self._is_integral(other) else distance

    def distance_no_sqrt(self, other: Point) -> Number:
        fx = self.x - other.x
        fy = self.y - other.y
        return fx * fx + fy * fy

    def distance_manhattan(self, other: Point) -> Number:
        return abs(other.x - self.x) + abs(other.y - self.y)