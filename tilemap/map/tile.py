"""
Tile Module - Contract for values occupying a map coordinate.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class Tile(ABC):
    """
    Abstract base class for map tiles.

    A tile type decides which input characters are content. Characters it
    does not recognise decode to None, which is how sparse maps arise from
    dense text. Subclasses should be immutable and hashable.
    """

    @classmethod
    @abstractmethod
    def from_char(cls, c: str) -> Optional["Tile"]:
        """
        Decode a single input character.

        Args:
            c: One character from the input text

        Returns:
            Tile instance, or None if the character is not content
        """
        pass

    @abstractmethod
    def to_char(self) -> str:
        """
        Encode this tile as a single display character.

        Returns:
            One-character string
        """
        pass

    def __str__(self) -> str:
        return self.to_char()


@dataclass(frozen=True)
class CharTile(Tile):
    """Tile that accepts any non-space character as itself."""
    char: str

    @classmethod
    def from_char(cls, c: str) -> Optional["CharTile"]:
        if c == " ":
            return None
        return cls(c)

    def to_char(self) -> str:
        return self.char
