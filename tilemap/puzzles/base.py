"""
Base Solver Module - Abstract base class for puzzle solvers.
"""

import time
from abc import ABC, abstractmethod

from .answer import Answer, AnswerMetrics
from .context import PuzzleContext


class PuzzleInputError(ValueError):
    """Puzzle input is present but malformed."""


class PuzzleSolver(ABC):
    """
    Abstract base class for all puzzle solvers.

    Subclasses must implement solve() and define name and description
    class attributes.

    Attributes:
        name: Short identifier for the puzzle
        description: Human-readable description for listings
    """
    name: str = "base"
    description: str = "Base puzzle"

    @abstractmethod
    def solve(self, context: PuzzleContext) -> Answer:
        """
        Compute the answer for the given input.

        Args:
            context: Puzzle context with input text and progress reporting

        Returns:
            Answer with value, parts and metrics

        Raises:
            PuzzleInputError: If the input is malformed
        """
        pass

    def _metrics(self, start_time: float, states_explored: int) -> AnswerMetrics:
        """Build metrics for a run started at start_time (perf_counter)."""
        return AnswerMetrics(
            computation_time_ms=(time.perf_counter() - start_time) * 1000,
            states_explored=states_explored,
            puzzle_name=self.name,
        )
