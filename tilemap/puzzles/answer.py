"""
Answer Module - Result of a puzzle computation.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class AnswerMetrics:
    """
    Performance metrics for an answer computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of candidates or cells visited
        puzzle_name: Name of the solver that computed this answer
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    puzzle_name: str = ""


@dataclass
class Answer:
    """
    Result of a puzzle computation.

    Attributes:
        value: Final numeric answer
        parts: Labelled intermediate results, in computation order
        renderings: Map renderings produced along the way, for display
        metrics: Performance statistics
    """
    value: int = 0
    parts: Dict[str, int] = field(default_factory=dict)
    renderings: List[str] = field(default_factory=list)
    metrics: AnswerMetrics = field(default_factory=AnswerMetrics)

    def get_part(self, label: str) -> int:
        """
        Get a labelled part.

        Raises:
            KeyError: If no part has that label
        """
        return self.parts[label]
