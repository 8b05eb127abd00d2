"""Classes and functions for representing the game board."""

from collections.abc import Callable, Iterable
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Point(NamedTuple):
    """An (x, y) position on the board."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        """Return the point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def dist(self, other: "Point") -> int:
        """Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)


NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Orthogonal steps in the order west, east, north, south."""


class Grid(Generic[T]):
    """Store a 2D matrix of cells as a 1D list.

    Contains support for both 1D (row-major) and 2D point indexing.  Copies never share
    the backing list, so a search branch may own its grid outright.
    """

    def __init__(self, width: int, height: int, tiles: Iterable[T]) -> None:
        self.width = width
        self.height = height
        self.tiles: list[T] = list(tiles)
        if len(self.tiles) != width * height:
            raise ValueError(
                f"Grid of {width}x{height} needs {width * height} tiles, got {len(self.tiles)}."
            )

    def copy(self) -> "Grid[T]":
        """Generate a copy of the grid."""
        return Grid(self.width, self.height, self.tiles.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.tiles == other.tiles
        )

    def __repr__(self) -> str:
        return f"Grid({self.width}, {self.height}, {self.tiles!r})"

    def __str__(self) -> str:
        """Returns the rows of the grid joined by newlines."""
        return "\n".join("".join(str(tile) for tile in row) for row in self.rows())

    def rows(self) -> list[list[T]]:
        """Split the backing list into rows."""
        return [
            self.tiles[start : start + self.width]
            for start in range(0, len(self.tiles), self.width)
        ]

    def is_valid(self, p: Point) -> bool:
        """Whether the point lies on the grid."""
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def get_point(self, p: Point) -> Point | None:
        """Return the point if it lies on the grid, else None."""
        return p if self.is_valid(p) else None

    def _index(self, idx: int | tuple[int, int]) -> int:
        if isinstance(idx, int):
            if not 0 <= idx < len(self.tiles):
                raise IndexError(f"Index {idx} out of range for grid.")
            return idx
        if isinstance(idx, tuple) and len(idx) == 2:
            p = Point(*idx)
            if not self.is_valid(p):
                raise IndexError(f"Point {tuple(idx)} is off the {self.width}x{self.height} grid.")
            return self.get_1d_idx(p)
        raise IndexError("Invalid index type for Grid.")

    def __getitem__(self, idx: int | tuple[int, int]) -> T:
        """Get cell content by 1D (row-major order) index or (x, y) point."""
        return self.tiles[self._index(idx)]

    def __setitem__(self, idx: int | tuple[int, int], value: T) -> None:
        """Set cell content by 1D (row-major order) index or (x, y) point."""
        self.tiles[self._index(idx)] = value

    def get(self, p: Point) -> T:
        return self[p]

    def set(self, p: Point, value: T) -> None:
        self[p] = value

    def replace(self, p: Point, value: T) -> "Grid[T]":
        """Return a copy of the grid with a single cell changed."""
        new = self.copy()
        new[p] = value
        return new

    def neighbors(self, p: Point) -> list[Point]:
        """Valid orthogonal neighbors of a point (west, east, north, south)."""
        return [n for dx, dy in NEIGHBOR_OFFSETS if self.is_valid(n := p.offset(dx, dy))]

    def map(self, fn: Callable[[T], U]) -> "Grid[U]":
        """Apply a function to every cell, keeping the dimensions."""
        return Grid(self.width, self.height, map(fn, self.tiles))

    def points(self) -> Iterable[Point]:
        """All points of the grid, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield Point(x, y)

    def get_1d_idx(self, p: Point) -> int:
        """Convert a point to a 1D index."""
        return p.y * self.width + p.x
