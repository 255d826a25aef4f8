"""
Ordinary pipe dreams and the mitosis operator.

Provides:
- Dream: immutable n×n grid of tiles
- Dream.start(i): first elbow column of row i
- Dream.mitosis(i): child dreams produced by the i-th mitosis operator
- Dream.long(n): the fully crossed seed dream of the longest permutation

Mitosis (Knutson-Miller) never mutates its parent: every child is built from
a snapshot of the parent's cells in its own working buffer and frozen into a
new Dream.
"""

from typing import Iterable, Iterator, List

import numpy as np

from .sqmat import SqMat
from .types import Cell, Tile


class Dream:
    """An ordinary pipe dream: an n×n grid of ELBOW/CROSS tiles."""

    __slots__ = ("_tiles",)

    def __init__(self, tiles: SqMat[Tile]):
        self._tiles = tiles

    @classmethod
    def from_flat(cls, dim: int, tiles: Iterable[Tile]) -> "Dream":
        return cls(SqMat.from_flat(dim, tiles))

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "Dream":
        """Build a dream from rows of '.'/'+' characters, e.g. ``["++.", "+..", "..."]``."""
        return cls(SqMat.from_rows([Tile(ch) for ch in row] for row in rows))

    @classmethod
    def long(cls, n: int) -> "Dream":
        """
        Seed dream of size ``n``: CROSS at every ``(i, j)`` with ``i + j < n - 1``.

        This is the unique reduced pipe dream of the longest permutation.
        """
        return cls(SqMat.from_flat(n, (
            Tile.CROSS if i + j < n - 1 else Tile.ELBOW
            for i in range(n)
            for j in range(n)
        )))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._tiles.dim

    def tiles(self) -> SqMat[Tile]:
        return self._tiles

    def __getitem__(self, index: Cell) -> Tile:
        return self._tiles[index]

    def crosses(self) -> Iterator[Cell]:
        """Cells holding a CROSS, in row-major order."""
        return (cell for cell, tile in self._tiles.cells() if tile is Tile.CROSS)

    def cross_mask(self) -> np.ndarray:
        """Boolean dim×dim array, True where the tile is a CROSS."""
        return self._tiles.map(lambda tile: tile is Tile.CROSS).to_array(dtype=bool)

    def num_crosses(self) -> int:
        return int(np.count_nonzero(self.cross_mask()))

    # -------------------------------------------------------------------------
    # Mitosis
    # -------------------------------------------------------------------------

    def start(self, i: int) -> int:
        """Minimum column of an elbow in row ``i``; ``dim`` if the row is all crosses."""
        for j, tile in enumerate(self._tiles.row(i)):
            if tile is Tile.ELBOW:
                return j
        return self.dim

    def mitosis(self, i: int) -> List["Dream"]:
        """
        Compute the ``i``-th mitosis operator.

        For every column ``p < start(i)`` whose tile ``(i+1, p)`` is not a
        cross, one child is produced: ``(i, p)`` becomes an elbow, then for
        ``j = 0..p-1`` (left to right, on the child's own cells) every cross
        at ``(i, j)`` sitting above an elbow at ``(i+1, j)`` drops to row
        ``i+1``.

        Args:
            i: Row index with ``0 <= i < dim - 1``

        Returns:
            Children in increasing ``p``; empty if no column qualifies

        Raises:
            ValueError: If row ``i + 1`` does not exist
        """
        n = self.dim
        if not 0 <= i < n - 1:
            raise ValueError(f"mitosis({i}) requires 0 <= i < {n - 1} for a {n}×{n} dream")

        offspring: List[Dream] = []
        start = self.start(i)
        snapshot = list(self._tiles)

        for p in range(start):
            if self._tiles[(i + 1, p)] is Tile.CROSS:
                continue

            cells = list(snapshot)
            upper, lower = i * n, (i + 1) * n
            cells[upper + p] = Tile.ELBOW
            for j in range(p):
                if cells[upper + j] is Tile.CROSS and cells[lower + j] is Tile.ELBOW:
                    cells[upper + j] = Tile.ELBOW
                    cells[lower + j] = Tile.CROSS

            offspring.append(Dream(SqMat.from_flat(n, cells)))

        return offspring

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dream):
            return NotImplemented
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __repr__(self) -> str:
        return f"Dream({self.to_strings()!r})"

    def to_strings(self) -> List[str]:
        """Rows as '.'/'+' strings."""
        return ["".join(tile.glyph for tile in row) for row in self._tiles.rows()]

    def display(self) -> SqMat[str]:
        """Character grid ('.' elbow, '+' cross) for printing."""
        return self._tiles.map(lambda tile: tile.glyph)


__all__ = ["Dream"]
