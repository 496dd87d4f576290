"""
Expense Report Solver - Find entries that sum to a target and multiply them.
"""

import logging
import time
from itertools import combinations
from typing import List

from ..answer import Answer
from ..base import PuzzleInputError, PuzzleSolver
from ..context import PuzzleContext
from ..factory import register_puzzle

logger = logging.getLogger(__name__)

TARGET_SUM = 2020


@register_puzzle
class ExpenseReportSolver(PuzzleSolver):
    """
    Multiplies the pair, then the triple, of entries summing to the target.

    Input is one integer per line. Each entry is used at most once per group.
    """
    name = "expense_report"
    description = "Expense report - product of entries summing to 2020"

    def __init__(self, target: int = TARGET_SUM):
        self.target = target

    def solve(self, context: PuzzleContext) -> Answer:
        start_time = time.perf_counter()
        numbers = self._parse_numbers(context.lines)

        answer = Answer()
        explored = 0
        for size, label in ((2, "pair"), (3, "triple")):
            product, tried = self._find_product(numbers, size)
            explored += tried
            if product is None:
                logger.warning(f"No {label} of entries sums to {self.target}")
            else:
                answer.parts[label] = product
                answer.value = product
            context.report_progress(size / 3, f"{label} searched")

        answer.metrics = self._metrics(start_time, explored)
        return answer

    def _parse_numbers(self, lines: List[str]) -> List[int]:
        numbers = []
        for lineno, line in enumerate(lines, start=1):
            try:
                numbers.append(int(line))
            except ValueError as e:
                raise PuzzleInputError(f"Line {lineno}: not an integer: {line!r}") from e
        return numbers

    def _find_product(self, numbers: List[int], size: int):
        """Return (product or None, combinations tried)."""
        tried = 0
        for group in combinations(numbers, size):
            tried += 1
            if sum(group) == self.target:
                product = 1
                for n in group:
                    product *= n
                logger.info(f"{' + '.join(map(str, group))} = {self.target}, product {product}")
                return product, tried
        return None, tried
