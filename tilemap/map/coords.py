"""
Coordinates Module - Fixed-arity integer coordinates and extent computation.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

Coord = Tuple[int, ...]
Extent = Tuple[Coord, Coord]


@dataclass(frozen=True)
class CoordinateSpace:
    """
    Describes how coordinates of one arity take part in extent computation.

    Coordinates themselves are plain tuples of non-negative integers; the
    space only fixes their arity and provides the elementwise reductions.

    Attributes:
        arity: Number of axes (1 for strips, 2 for grids, 3+ for volumes)
    """
    arity: int

    def __post_init__(self):
        if self.arity < 1:
            raise ValueError(f"Coordinate arity must be at least 1, got {self.arity}")

    def default(self) -> Coord:
        """The all-zero coordinate."""
        return (0,) * self.arity

    def is_valid(self, coord: Coord) -> bool:
        """Check that a coordinate is a tuple of this space's arity."""
        return isinstance(coord, tuple) and len(coord) == self.arity

    def elementwise_min(self, a: Coord, b: Coord) -> Coord:
        return tuple(min(x, y) for x, y in zip(a, b))

    def elementwise_max(self, a: Coord, b: Coord) -> Coord:
        return tuple(max(x, y) for x, y in zip(a, b))

    def get_extent(self, coords: Iterable[Coord]) -> Extent:
        """
        Compute the inclusive bounding box of a collection of coordinates.

        Each axis is reduced independently.

        Args:
            coords: Coordinates to bound (may be empty)

        Returns:
            (min, max) tuple. An empty input gives (default, default),
            which callers must not mistake for data being present.
        """
        it = iter(coords)
        first = next(it, None)
        if first is None:
            origin = self.default()
            return (origin, origin)

        lo = hi = first
        for coord in it:
            lo = self.elementwise_min(lo, coord)
            hi = self.elementwise_max(hi, coord)
        return (lo, hi)

    def get_size(self, coords: Iterable[Coord]) -> Coord:
        """
        Compute the dense width of a zero-based region holding the coordinates.

        Args:
            coords: Coordinates to measure (may be empty)

        Returns:
            Per-axis max + 1. An empty input gives the all-zero coordinate.
        """
        coords = list(coords)
        if not coords:
            return self.default()
        _, hi = self.get_extent(coords)
        return size_of(hi)


def size_of(hi: Coord) -> Coord:
    """Dense width of a zero-based region whose inclusive maximum is hi."""
    return tuple(v + 1 for v in hi)


LINE = CoordinateSpace(1)
PLANE = CoordinateSpace(2)
VOLUME = CoordinateSpace(3)
