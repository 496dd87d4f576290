"""
Puzzle Factory Module - Name lookup for registered solvers.

Solvers register themselves at import time with @register_puzzle; the
command line then resolves a puzzle name to a solver instance.
"""

from typing import Dict, List, Type

from .base import PuzzleSolver


# Puzzle run when neither the command line nor the settings name one
DEFAULT_PUZZLE = "toboggan"

_PUZZLES: Dict[str, Type[PuzzleSolver]] = {}


def register_puzzle(cls: Type[PuzzleSolver]) -> Type[PuzzleSolver]:
    """
    Class decorator adding a solver to the registry under its name.

    Raises:
        TypeError: If cls is not a PuzzleSolver subclass
        ValueError: If another class already holds the name
    """
    if not (isinstance(cls, type) and issubclass(cls, PuzzleSolver)):
        raise TypeError(f"{cls} must be a subclass of PuzzleSolver")
    existing = _PUZZLES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Puzzle name {cls.name!r} already taken by {existing.__name__}")
    _PUZZLES[cls.name] = cls
    return cls


def create_puzzle(name: str) -> PuzzleSolver:
    """
    Instantiate the solver registered as name.

    Raises:
        ValueError: If no solver has that name
    """
    cls = _PUZZLES.get(name)
    if cls is None:
        available = ", ".join(sorted(_PUZZLES))
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return cls()


def get_puzzle_info() -> List[Dict[str, str]]:
    """Name and description of every registered solver, sorted by name."""
    return [
        {"name": name, "description": _PUZZLES[name].description}
        for name in sorted(_PUZZLES)
    ]


def get_default_puzzle_name() -> str:
    """DEFAULT_PUZZLE when registered, else the first name alphabetically."""
    if DEFAULT_PUZZLE in _PUZZLES:
        return DEFAULT_PUZZLE
    return min(_PUZZLES, default="")
