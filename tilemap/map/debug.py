"""
Map Debug Utilities

Functions for saving 2-D maps as images for visual inspection.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from PIL import Image, ImageDraw

from .sparse_map import SparseMap

logger = logging.getLogger(__name__)

# Rendering settings
BACKGROUND_COLOR = "#202020"
DEFAULT_TILE_COLOR = "#9e9e9e"
GRID_COLOR = "#303030"
DEFAULT_CELL_SIZE = 12


def render_map_image(
    tile_map: SparseMap,
    cell_size: int = DEFAULT_CELL_SIZE,
    palette: Optional[Dict[str, str]] = None,
) -> Image.Image:
    """
    Draw a 2-D map as an image, one square per cell of its bounding box.

    Args:
        tile_map: Map to draw
        cell_size: Side of each cell in pixels
        palette: Mapping from tile display character to fill color

    Returns:
        RGB PIL Image

    Raises:
        ValueError: If the map is not two-dimensional
    """
    if tile_map.space.arity != 2:
        raise ValueError(f"Can only draw 2-D maps, got arity {tile_map.space.arity}")

    palette = palette or {}
    grid = tile_map.to_dense_grid()
    rows = len(grid)
    cols = len(grid[0]) if rows > 0 else 0

    image = Image.new("RGB", (max(cols, 1) * cell_size, max(rows, 1) * cell_size), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    for r, row in enumerate(grid):
        for c, tile in enumerate(row):
            x, y = c * cell_size, r * cell_size
            box = [x, y, x + cell_size - 1, y + cell_size - 1]
            if tile is None:
                draw.rectangle(box, outline=GRID_COLOR)
                continue
            color = palette.get(str(tile), DEFAULT_TILE_COLOR)
            draw.rectangle(box, fill=color, outline=GRID_COLOR)

    return image


def save_map_image(
    tile_map: SparseMap,
    path: Union[str, Path],
    cell_size: int = DEFAULT_CELL_SIZE,
    palette: Optional[Dict[str, str]] = None,
) -> Image.Image:
    """
    Draw a 2-D map and save it as PNG.

    Args:
        tile_map: Map to draw
        path: Output file path (parent directories are created)
        cell_size: Side of each cell in pixels
        palette: Mapping from tile display character to fill color

    Returns:
        The saved image
    """
    image = render_map_image(tile_map, cell_size=cell_size, palette=palette)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, "PNG")
    logger.debug(f"Map image saved: {path} ({image.width}x{image.height})")

    return image
