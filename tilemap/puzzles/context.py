"""
Puzzle Context Module - Input and progress reporting for a puzzle run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..map.errors import MapReadError


@dataclass
class PuzzleContext:
    """
    Context passed to solvers containing the puzzle input.

    Attributes:
        text: Raw puzzle input
        source: File the input was read from, if any
        progress_callback: Optional callback for progress updates
    """
    text: str
    source: Optional[Path] = None
    progress_callback: Optional[Callable[[float, str], None]] = None

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "PuzzleContext":
        """
        Create a context from an input file.

        Args:
            path: Puzzle input file
            **kwargs: Extra fields passed to the constructor

        Returns:
            PuzzleContext holding the file contents

        Raises:
            MapReadError: If the file cannot be read
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, ValueError) as e:
            raise MapReadError(e, path) from e
        return cls(text=text, source=path, **kwargs)

    @property
    def lines(self) -> List[str]:
        """Non-blank input lines with surrounding whitespace stripped."""
        return [line.strip() for line in self.text.splitlines() if line.strip()]

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)
