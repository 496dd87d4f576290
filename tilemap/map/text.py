"""
Map Text Module - Reading maps from character grids and rendering them back.

Layout by arity:
    1-D: the whole text is one strip, character index is the coordinate
    2-D: line index is axis 0, character index within the line is axis 1
    3-D+: blocks of arity - 1 separated by arity - 2 blank lines, block
          index is axis 0
"""

import logging
from pathlib import Path
from typing import Dict, IO, List, Type, Union

from .coords import PLANE, Coord, CoordinateSpace
from .errors import MapReadError
from .sparse_map import SparseMap
from .tile import Tile

logger = logging.getLogger(__name__)

EMPTY_CHAR = " "


def split_lines(text: str) -> List[str]:
    """
    Split map text into rows the way parse_map does.

    Only LF and CRLF end a row. The terminator of the final row is dropped.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _block_separator(arity: int) -> str:
    return "\n" * (arity - 1)


def _decode(text: str, tile_type: Type[Tile], arity: int) -> Dict[Coord, Tile]:
    """Decode text into tiles keyed by coordinates of the given arity."""
    data: Dict[Coord, Tile] = {}

    if arity == 1:
        for i, c in enumerate(text):
            tile = tile_type.from_char(c)
            if tile is not None:
                data[(i,)] = tile
    elif arity == 2:
        for i, line in enumerate(split_lines(text)):
            for j, c in enumerate(line):
                tile = tile_type.from_char(c)
                if tile is not None:
                    data[(i, j)] = tile
    else:
        for k, block in enumerate(text.split(_block_separator(arity))):
            for coord, tile in _decode(block, tile_type, arity - 1).items():
                data[(k,) + coord] = tile

    return data


def parse_map(
    text: str,
    tile_type: Type[Tile],
    space: CoordinateSpace = PLANE,
) -> SparseMap:
    """
    Build a map from text.

    Characters the tile type does not recognise are skipped, so blank
    regions of the input stay empty in the map.

    Args:
        text: Map text
        tile_type: Tile class used to decode each character
        space: Coordinate space of the resulting map

    Returns:
        New SparseMap
    """
    text = text.replace("\r\n", "\n")
    data = _decode(text, tile_type, space.arity)
    logger.debug(f"Parsed {space.arity}-D map: {len(data)} tiles")
    return SparseMap(space=space, data=data)


def read_map(
    stream: IO,
    tile_type: Type[Tile],
    space: CoordinateSpace = PLANE,
) -> SparseMap:
    """
    Build a map from a readable stream.

    The whole stream is consumed before the map is built. Binary streams
    are decoded as UTF-8.

    Args:
        stream: Text or binary stream
        tile_type: Tile class used to decode each character
        space: Coordinate space of the resulting map

    Returns:
        New SparseMap

    Raises:
        MapReadError: If the stream cannot be read or decoded
    """
    try:
        content = stream.read()
        if isinstance(content, bytes):
            content = content.decode("utf-8")
    except (OSError, ValueError) as e:
        raise MapReadError(e) from e

    return parse_map(content, tile_type, space)


def load_map(
    path: Union[str, Path],
    tile_type: Type[Tile],
    space: CoordinateSpace = PLANE,
) -> SparseMap:
    """
    Build a map from a file.

    Args:
        path: File to read
        tile_type: Tile class used to decode each character
        space: Coordinate space of the resulting map

    Returns:
        New SparseMap

    Raises:
        MapReadError: If the file cannot be opened, read or decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, ValueError) as e:
        raise MapReadError(e, path) from e

    logger.debug(f"Loaded map file {path} ({len(content)} chars)")
    return parse_map(content, tile_type, space)


def _encode(tile_map: SparseMap, prefix: Coord, lo: Coord, hi: Coord) -> str:
    axis = len(prefix)
    arity = tile_map.space.arity
    span = range(lo[axis], hi[axis] + 1)

    if axis == arity - 1:
        chars = []
        for i in span:
            tile = tile_map.get(prefix + (i,))
            chars.append(EMPTY_CHAR if tile is None else str(tile))
        return "".join(chars)

    if axis == arity - 2:
        return "".join(_encode(tile_map, prefix + (i,), lo, hi) + "\n" for i in span)

    # Blocks already end in a newline, so one fewer separator newline is needed
    separator = "\n" * (arity - axis - 2)
    return separator.join(_encode(tile_map, prefix + (i,), lo, hi) for i in span)


def render_map(tile_map: SparseMap) -> str:
    """
    Render a map as text over its bounding box.

    Absent cells render as a space. 2-D maps end every row, including the
    last, with a newline; 1-D maps render as a single unterminated strip.
    An empty map renders as an empty string.

    Args:
        tile_map: Map to render

    Returns:
        Rendered text
    """
    if not tile_map.data:
        return ""

    lo, hi = tile_map.get_extent()
    return _encode(tile_map, (), lo, hi)
