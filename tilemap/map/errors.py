"""
Map Errors - Exceptions raised while building maps from text.
"""

from pathlib import Path
from typing import Optional


class MapError(Exception):
    """Base class for map errors."""


class MapReadError(MapError):
    """
    Reading the source stream failed.

    Attributes:
        source: Underlying I/O or decoding error
        path: File being read, if known
    """

    def __init__(self, source: Exception, path: Optional[Path] = None):
        self.source = source
        self.path = path
        if path is not None:
            message = f"I/O error on '{path}': {source}"
        else:
            message = f"I/O error: {source}"
        super().__init__(message)
