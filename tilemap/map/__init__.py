"""
Map Package - Sparse coordinate maps for puzzle grids.

Maps are parsed from character text through a Tile type, queried and
mutated by coordinate or predicate, and rendered back to text.

Public API:
    - CoordinateSpace: Arity plus extent computation (LINE, PLANE, VOLUME)
    - Tile: Abstract base for tile types, CharTile as a ready-made one
    - SparseMap: The coordinate -> tile container
    - parse_map(), read_map(), load_map(): Build maps from text
    - render_map(): Render maps to text
    - split_lines(): Split map text into rows
    - MapError, MapReadError: Read failures

Usage:
    from tilemap.map import CharTile, parse_map

    grid = parse_map("ab \\nd e", CharTile)
    grid.get((1, 2))          # CharTile('e')
    grid.get_extent()         # ((0, 0), (1, 2))
    print(grid)               # "ab \\nd e\\n"
"""

# Coordinates
from .coords import (
    Coord,
    Extent,
    CoordinateSpace,
    LINE,
    PLANE,
    VOLUME,
)

# Tiles and container
from .tile import Tile, CharTile
from .sparse_map import SparseMap

# Text protocol
from .text import parse_map, read_map, load_map, render_map, split_lines

# Errors
from .errors import MapError, MapReadError

__all__ = [
    # Coordinates
    "Coord",
    "Extent",
    "CoordinateSpace",
    "LINE",
    "PLANE",
    "VOLUME",
    # Tiles and container
    "Tile",
    "CharTile",
    "SparseMap",
    # Text protocol
    "parse_map",
    "read_map",
    "load_map",
    "render_map",
    "split_lines",
    # Errors
    "MapError",
    "MapReadError",
]
