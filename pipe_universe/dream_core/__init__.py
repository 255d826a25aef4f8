"""
dream_core: Core primitives for the pipe dream engine.

Provides:
- types: Tile, Cell, Word and other fundamental types
- sqmat: Immutable square matrix container
- perm: Validated permutations, Lehmer codes, parsing
- dream: Pipe dreams, start/mitosis operators, seed dream
- words: Lex-first reduced words
- generate: Reduced pipe dream generation by repeated mitosis
- order_hash: Deterministic hashing (SHA-256) of dreams and dream sets
"""

from .dream import Dream
from .generate import ReducedDreams, reduced_dreams
from .perm import InvalidPermutationError, Perm, PermParseError, parse_perm
from .sqmat import SqMat
from .types import Tile

__all__ = [
    "Dream",
    "ReducedDreams",
    "reduced_dreams",
    "InvalidPermutationError",
    "Perm",
    "PermParseError",
    "parse_perm",
    "SqMat",
    "Tile",
]
