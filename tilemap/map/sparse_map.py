"""
Sparse Map Module - Coordinate-indexed tile storage for puzzle grids.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

from .coords import PLANE, Coord, CoordinateSpace, Extent, size_of

T = TypeVar("T")

Predicate = Callable[[Coord, T], bool]


@dataclass
class SparseMap(Generic[T]):
    """
    Sparse mapping from coordinates to tiles.

    Absent coordinates are empty; the map never stores an explicit empty
    marker. Extents are recomputed from the stored keys on every query
    unless fixed_extent is set, in which case it is returned verbatim.

    Attributes:
        space: Coordinate space fixing the arity of all keys
        data: Occupied coordinates and their tiles
        fixed_extent: Optional (min, max) bounding box overriding the computed one
    """
    space: CoordinateSpace = PLANE
    data: Dict[Coord, T] = field(default_factory=dict)
    fixed_extent: Optional[Extent] = None

    def get(self, coord: Coord) -> Optional[T]:
        """
        Get the tile at a coordinate.

        Args:
            coord: Coordinate to look up

        Returns:
            Tile, or None if the coordinate is empty
        """
        return self.data.get(coord)

    def set(self, coord: Coord, tile: T) -> None:
        """
        Set the tile at a coordinate, overwriting any existing tile.

        Raises:
            ValueError: If coord does not match the map's arity
        """
        if not self.space.is_valid(coord):
            raise ValueError(
                f"Expected a {self.space.arity}-tuple coordinate, got {coord!r}"
            )
        self.data[coord] = tile

    def remove(self, coord: Coord) -> None:
        """Clear a coordinate. Clearing an empty coordinate does nothing."""
        self.data.pop(coord, None)

    def get_extent(self) -> Extent:
        """
        Get the inclusive bounding box of all defined tiles.

        Returns:
            (min, max) coordinates; fixed_extent if one is set
        """
        if self.fixed_extent is not None:
            return self.fixed_extent
        return self.space.get_extent(self.data.keys())

    def get_size(self) -> Coord:
        """
        Get the dense width of the map, assuming zero-based indexing.

        Returns:
            Per-axis max + 1 (all zeros for an empty map)
        """
        if self.fixed_extent is not None:
            return size_of(self.fixed_extent[1])
        return self.space.get_size(self.data.keys())

    def find_all_where(self, predicate: Predicate) -> List[Coord]:
        """
        Find all coordinates whose tile matches a predicate.

        Args:
            predicate: Called as predicate(coord, tile)

        Returns:
            Matching coordinates in scan order
        """
        return [coord for coord, tile in self.data.items() if predicate(coord, tile)]

    def find_one_where(self, predicate: Predicate) -> Optional[Coord]:
        """
        Find a coordinate whose tile matches a predicate.

        Scan order is the map's iteration order; when several tiles match,
        which one is returned is not part of the contract.

        Args:
            predicate: Called as predicate(coord, tile)

        Returns:
            First matching coordinate found, or None
        """
        for coord, tile in self.data.items():
            if predicate(coord, tile):
                return coord
        return None

    def find_all(self, pattern: T) -> List[Coord]:
        """Find all coordinates holding a tile equal to pattern."""
        return self.find_all_where(lambda _, t: t == pattern)

    def find_one(self, pattern: T) -> Optional[Coord]:
        """Find one coordinate holding a tile equal to pattern."""
        return self.find_one_where(lambda _, t: t == pattern)

    def count_where(self, predicate: Predicate) -> int:
        """Count tiles matching a predicate."""
        return sum(1 for coord, tile in self.data.items() if predicate(coord, tile))

    def count(self, pattern: T) -> int:
        """Count tiles equal to pattern."""
        return self.count_where(lambda _, t: t == pattern)

    def to_dense_grid(self) -> list:
        """
        Materialize the map over its bounding box as nested lists.

        One level of nesting per axis; absent cells are None. An empty map
        without a fixed extent gives an empty list.

        Returns:
            Nested lists indexed relative to the extent minimum
        """
        if not self.data and self.fixed_extent is None:
            return []

        lo, hi = self.get_extent()

        def build(prefix: Tuple[int, ...]) -> list:
            axis = len(prefix)
            if axis == self.space.arity - 1:
                return [self.data.get(prefix + (i,)) for i in range(lo[axis], hi[axis] + 1)]
            return [build(prefix + (i,)) for i in range(lo[axis], hi[axis] + 1)]

        return build(())

    def to_array(self) -> np.ndarray:
        """
        Materialize the map over its bounding box as a numpy object array.

        Returns:
            Array of tiles (None for absent cells) with one dimension per axis
        """
        if not self.data and self.fixed_extent is None:
            return np.empty((0,) * self.space.arity, dtype=object)

        lo, hi = self.get_extent()
        shape = tuple(h - low + 1 for low, h in zip(lo, hi))
        array = np.full(shape, None, dtype=object)
        for coord, tile in self.data.items():
            index = tuple(c - low for c, low in zip(coord, lo))
            if all(0 <= i < n for i, n in zip(index, shape)):
                array[index] = tile
        return array

    def copy(self) -> "SparseMap[T]":
        """
        Create an independent copy of this map.

        Tiles are shared, so they must be immutable.
        """
        return SparseMap(
            space=self.space,
            data=dict(self.data),
            fixed_extent=self.fixed_extent,
        )

    def items(self) -> Iterator[Tuple[Coord, T]]:
        """Iterate over (coord, tile) pairs."""
        return iter(self.data.items())

    def __contains__(self, coord: Coord) -> bool:
        return coord in self.data

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        from .text import render_map
        return render_map(self)
