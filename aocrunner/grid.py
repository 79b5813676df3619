"""A rectangular grid stored as a flat list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from .point import Point

T = TypeVar("T")


@dataclass(eq=True)
class Grid(Generic[T]):
    """A 2D structure backed by a list, indexed by Point or (x, y)."""

    width: int
    height: int
    data: list[T]

    def __post_init__(self) -> None:
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"data has {len(self.data)} elements, expected "
                f"{self.width * self.height}"
            )

    @classmethod
    def from_data(cls, width: int, height: int, data: list[T]) -> Grid[T]:
        return cls(width, height, list(data))

    @classmethod
    def map_from_str(cls, string: str, mapper: Callable[[str], T]) -> Grid[T]:
        """Build a grid from text, one row per line, mapping each character."""
        lines = string.splitlines()
        if not lines:
            raise ValueError("cannot build a grid from empty text")
        width = len(lines[0])
        if width == 0:
            raise ValueError("first line of the grid is empty")
        data = [mapper(ch) for ch in string if not ch.isspace()]
        height = len(data) // width
        return cls(width, height, data[: width * height])

    @classmethod
    def from_str(cls, string: str) -> Grid[str]:
        return cls.map_from_str(string, lambda ch: ch)

    @classmethod
    def new(cls, width: int, height: int, default: T) -> Grid[T]:
        return cls(width, height, [default] * (width * height))

    def get(self, pos: Point) -> T | None:
        """The element at pos, or None when pos is outside the grid."""
        return self[pos] if self.is_in_bounds(pos) else None

    def get_or(self, pos: Point, default: T) -> T:
        return self[pos] if self.is_in_bounds(pos) else default

    def is_in_bounds(self, pos: Point) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def enumerate(self) -> Iterator[tuple[Point, T]]:
        """Yield (position, element) pairs in row-major order."""
        for i, value in enumerate(self.data):
            yield self._coords(i), value

    def find(self, elem: T) -> Point | None:
        """The first position holding elem, or None."""
        return next(self.find_all(elem), None)

    def find_all(self, elem: T) -> Iterator[Point]:
        return (pos for pos, value in self.enumerate() if value == elem)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, key: Point | tuple[int, int]) -> T:
        return self.data[self._index(key)]

    def __setitem__(self, key: Point | tuple[int, int], value: T) -> None:
        self.data[self._index(key)] = value

    def __str__(self) -> str:
        return "".join(
            "".join(str(self.data[y * self.width + x]) for x in range(self.width))
            + "\n"
            for y in range(self.height)
        )

    def _index(self, key: Point | tuple[int, int]) -> int:
        x, y = key
        if x < 0:
            raise IndexError(f"X index not valid: {x}")
        if y < 0:
            raise IndexError(f"Y index not valid: {y}")
        if x >= self.width:
            raise IndexError(f"x index out of bounds: {x} but width is {self.width}")
        if y >= self.height:
            raise IndexError(f"y index out of bounds: {y} but height is {self.height}")
        return y * self.width + x

    def _coords(self, index: int) -> Point:
        return Point(index % self.width, index // self.width)