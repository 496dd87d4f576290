"""
Toboggan Solver - Count trees hit on straight slopes through a wrapping map.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ...map import PLANE, SparseMap, Tile, parse_map, split_lines
from ..answer import Answer
from ..base import PuzzleSolver
from ..context import PuzzleContext
from ..factory import register_puzzle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlopeTile(Tile):
    """Tile on the slope map: a tree, or a trace left by the toboggan."""
    char: str

    @classmethod
    def from_char(cls, c: str) -> Optional["SlopeTile"]:
        if c == TREE.char:
            return TREE
        return None

    def to_char(self) -> str:
        return self.char


TREE = SlopeTile("#")
PATH_EMPTY = SlopeTile("O")
PATH_TREE = SlopeTile("X")

# (down, right) steps per recipe
DEFAULT_RECIPES: Tuple[Tuple[int, int], ...] = ((1, 1), (1, 3), (1, 5), (1, 7), (2, 1))


def count_trees(tile_map: SparseMap, down: int, right: int) -> int:
    """
    Ride a slope from the top-left corner to the bottom of the map.

    Columns wrap around the map's dense width. Every visited cell is marked
    with PATH_EMPTY or PATH_TREE, so pass a copy to keep the original.

    Args:
        tile_map: Slope map, mutated in place
        down: Rows to move per step
        right: Columns to move per step

    Returns:
        Number of trees hit

    Raises:
        ValueError: If down is not positive
    """
    if down <= 0:
        raise ValueError(f"down must be positive, got {down}")

    rows, cols = tile_map.get_size()
    if rows == 0 or cols == 0:
        return 0

    i, j = 0, 0
    hit_trees = 0
    while i < rows:
        if tile_map.get((i, j)) == TREE:
            hit_trees += 1
            tile_map.set((i, j), PATH_TREE)
        else:
            tile_map.set((i, j), PATH_EMPTY)
        i += down
        j = (j + right) % cols

    return hit_trees


def parse_slope(text: str) -> SparseMap:
    """
    Parse a slope map, fixing its extent to the full input rectangle.

    Trailing open columns hold no trees, so the width has to come from the
    text rather than from the stored tiles.
    """
    tile_map = parse_map(text, SlopeTile, PLANE)
    lines = split_lines(text)
    while lines and not lines[-1].strip():
        lines.pop()
    if lines:
        width = max(len(line) for line in lines)
        tile_map.fixed_extent = ((0, 0), (len(lines) - 1, width - 1))
    return tile_map


@register_puzzle
class TobogganSolver(PuzzleSolver):
    """
    Multiplies the trees hit across several slope recipes.

    Each recipe runs on its own copy of the initial map.
    """
    name = "toboggan"
    description = "Toboggan trajectory - product of trees hit per slope"

    def __init__(self, recipes: Optional[List[Tuple[int, int]]] = None):
        self.recipes = list(recipes) if recipes else list(DEFAULT_RECIPES)
        for down, right in self.recipes:
            if down <= 0:
                raise ValueError(f"Recipe right {right}, down {down}: down must be positive")

    def solve(self, context: PuzzleContext) -> Answer:
        start_time = time.perf_counter()
        tile_map = parse_slope(context.text)
        rows, cols = tile_map.get_size()
        logger.debug(f"Slope map {rows}x{cols}, {tile_map.count(TREE)} trees")

        answer = Answer(value=1)
        for index, (down, right) in enumerate(self.recipes):
            instance = tile_map.copy()
            hit_trees = count_trees(instance, down, right)
            logger.info(f"Recipe {right} right, {down} down: hit {hit_trees} trees")

            answer.parts[f"right {right}, down {down}"] = hit_trees
            answer.renderings.append(str(instance))
            answer.value *= hit_trees
            context.report_progress((index + 1) / len(self.recipes), f"{index + 1} recipes done")

        answer.metrics = self._metrics(start_time, rows * len(self.recipes))
        return answer
