"""
Puzzles Package - Pluggable solver framework for text-input puzzles.

Public API:
    - PuzzleSolver: Abstract base for solvers
    - PuzzleContext: Input text and progress reporting
    - Answer / AnswerMetrics: Result of a run
    - PuzzleInputError: Malformed puzzle input
    - create_puzzle(): Factory function
    - get_puzzle_info(): Get puzzle metadata
    - get_default_puzzle_name(): Puzzle run when none is named

Usage:
    from tilemap.puzzles import create_puzzle, PuzzleContext

    context = PuzzleContext.from_file("data/toboggan/input")
    answer = create_puzzle("toboggan").solve(context)
    print(answer.value)
"""

# Core data structures
from .answer import Answer, AnswerMetrics
from .context import PuzzleContext

# Solver framework
from .base import PuzzleSolver, PuzzleInputError
from .factory import (
    create_puzzle,
    get_puzzle_info,
    get_default_puzzle_name,
    register_puzzle,
)

# Import solvers to register them
from . import solvers

__all__ = [
    # Data structures
    "Answer",
    "AnswerMetrics",
    "PuzzleContext",
    # Solver framework
    "PuzzleSolver",
    "PuzzleInputError",
    "create_puzzle",
    "get_puzzle_info",
    "get_default_puzzle_name",
    "register_puzzle",
]
