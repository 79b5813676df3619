"""Integer points on a 2D plane, usable as grid coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass(frozen=True, order=False)
class Point:
    """A point in a 2D space; y grows downwards."""

    x: int = 0
    y: int = 0

    @classmethod
    def origin(cls) -> Point:
        return cls(0, 0)

    @classmethod
    def unit_up(cls) -> Point:
        return cls(0, -1)

    @classmethod
    def unit_down(cls) -> Point:
        return cls(0, 1)

    @classmethod
    def unit_left(cls) -> Point:
        return cls(-1, 0)

    @classmethod
    def unit_right(cls) -> Point:
        return cls(1, 0)

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Point:
        """Build a point from an (x, y) pair, checking both fit in 32 bits."""
        x, y = pair
        if not _I32_MIN <= x <= _I32_MAX:
            raise ValueError(f"x value too large: {x}")
        if not _I32_MIN <= y <= _I32_MAX:
            raise ValueError(f"y value too large: {y}")
        return cls(int(x), int(y))

    def up(self) -> Point:
        return self + Point.unit_up()

    def down(self) -> Point:
        return self + Point.unit_down()

    def left(self) -> Point:
        return self + Point.unit_left()

    def right(self) -> Point:
        return self + Point.unit_right()

    def manhattan_dist(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def euclidean_dist(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def neighbors(self) -> tuple[Point, Point, Point, Point]:
        """The four orthogonal neighbours: up, down, left, right."""
        return (self.up(), self.down(), self.left(), self.right())

    def neighbors_diag(self) -> tuple[Point, ...]:
        """The orthogonal neighbours followed by the four diagonal ones."""
        return (
            self.up(),
            self.down(),
            self.left(),
            self.right(),
            self.up().left(),
            self.up().right(),
            self.down().left(),
            self.down().right(),
        )

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Point:
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)