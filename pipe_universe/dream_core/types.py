"""
Core type definitions for the pipe dream engine.

Tiles are the two cell states of a pipe dream. Everything else here is a
type alias so that every module imports the exact same names.
"""

from enum import Enum
from typing import List, NewType, Tuple


class Tile(Enum):
    """A tile in a pipe dream."""
    ELBOW = "."
    CROSS = "+"

    @property
    def glyph(self) -> str:
        """Single-character rendering: '.' for elbow, '+' for cross."""
        return self.value


# Cell coordinates (row, col)
Cell = Tuple[int, int]

# Reduced word: sequence of adjacent-transposition indices s_i
Word = List[int]

# Lehmer code: entry i counts j > i with p[j] < p[i]
LehmerCode = List[int]

# (row, exponent) pair of a monomial, meaning x_row^exponent
Power = Tuple[int, int]

# Hash type (64-bit from SHA-256)
Hash64 = NewType("Hash64", int)


__all__ = [
    "Tile",
    "Cell",
    "Word",
    "LehmerCode",
    "Power",
    "Hash64",
]
