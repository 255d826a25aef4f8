"""
Square matrix with a flat, immutable, row-major representation.

Provides:
- SqMat: n×n grid addressed by (row, col)
- Row/column views, iteration over cells, elementwise map
- numpy array view for reductions (row sums, counts)

A SqMat never changes after construction. "Mutating" helpers (replace,
fill_with) return new matrices, so two matrices never share storage that
either can write to.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, Mapping, Tuple, TypeVar

import numpy as np

from .types import Cell

T = TypeVar("T")
S = TypeVar("S")


class SqMat(Generic[T]):
    """
    Square matrix of dimension ``dim`` stored as a flat tuple.

    Equality and hashing are by value (dimension + cells), so matrices can be
    used as dict keys and compared directly in tests.
    """

    __slots__ = ("_dim", "_cells")

    def __init__(self, dim: int, cells: Tuple[T, ...]):
        # Private constructor: callers go through new() / from_flat()
        self._dim = dim
        self._cells = cells

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, dim: int, default: T) -> "SqMat[T]":
        """Create a ``dim``×``dim`` matrix filled with ``default``."""
        if dim < 0:
            raise ValueError(f"Matrix dimension must be non-negative, got {dim}")
        return cls(dim, (default,) * (dim * dim))

    @classmethod
    def from_flat(cls, dim: int, values: Iterable[T]) -> "SqMat[T]":
        """
        Create a matrix from a flat row-major sequence.

        Raises:
            AssertionError: If ``len(values) != dim * dim``. A mismatch can
                only come from a defective call site.
        """
        cells = tuple(values)
        assert len(cells) == dim * dim, \
            f"Expected {dim * dim} values for a {dim}×{dim} matrix, got {len(cells)}"
        return cls(dim, cells)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> "SqMat[T]":
        """Create a matrix from nested rows (must be square)."""
        rows_list = [tuple(row) for row in rows]
        dim = len(rows_list)
        assert all(len(row) == dim for row in rows_list), \
            f"Rows do not form a {dim}×{dim} matrix"
        return cls(dim, tuple(cell for row in rows_list for cell in row))

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._dim

    def __getitem__(self, index):
        """``m[(r, c)]`` returns a cell, ``m[r]`` returns row ``r`` as a tuple."""
        if isinstance(index, tuple):
            r, c = index
            self._check(r, c)
            return self._cells[c + r * self._dim]
        if not 0 <= index < self._dim:
            raise IndexError(f"Row {index} out of range for dimension {self._dim}")
        start = index * self._dim
        return self._cells[start:start + self._dim]

    def _check(self, r: int, c: int) -> None:
        if not (0 <= r < self._dim and 0 <= c < self._dim):
            raise IndexError(f"Cell ({r}, {c}) out of range for dimension {self._dim}")

    def __iter__(self) -> Iterator[T]:
        """Iterate over all cells in row-major order."""
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def row(self, r: int) -> Tuple[T, ...]:
        return self[r]

    def col(self, c: int) -> Tuple[T, ...]:
        if not 0 <= c < self._dim:
            raise IndexError(f"Column {c} out of range for dimension {self._dim}")
        return tuple(self._cells[c + r * self._dim] for r in range(self._dim))

    def rows(self) -> Iterator[Tuple[T, ...]]:
        for r in range(self._dim):
            yield self[r]

    def cells(self) -> Iterator[Tuple[Cell, T]]:
        """Iterate over ``((row, col), value)`` in row-major order."""
        for k, value in enumerate(self._cells):
            yield divmod(k, self._dim), value

    def to_list(self) -> list:
        return [list(row) for row in self.rows()]

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Return a fresh ``dim``×``dim`` numpy array of the cells."""
        return np.array(self._cells, dtype=dtype).reshape(self._dim, self._dim)

    # -------------------------------------------------------------------------
    # Derivation (always returns a new matrix)
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[T], S]) -> "SqMat[S]":
        """Convert to a matrix of another cell type by applying ``f`` to every cell."""
        return SqMat(self._dim, tuple(f(cell) for cell in self._cells))

    def replace(self, updates: Mapping[Cell, T]) -> "SqMat[T]":
        """Return a copy with the cells in ``updates`` overwritten."""
        cells = list(self._cells)
        for (r, c), value in updates.items():
            self._check(r, c)
            cells[c + r * self._dim] = value
        return SqMat(self._dim, tuple(cells))

    def fill_with(self, f: Callable[[], T]) -> "SqMat[T]":
        """Return a matrix of the same dimension with every cell produced by ``f()``."""
        return SqMat(self._dim, tuple(f() for _ in self._cells))

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SqMat):
            return NotImplemented
        return self._dim == other._dim and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self._dim, self._cells))

    def __repr__(self) -> str:
        return f"SqMat(dim={self._dim}, rows={self.to_list()!r})"

    def __str__(self) -> str:
        # Each cell followed by a space, one row per line
        return "".join(
            "".join(f"{cell} " for cell in row) + "\n"
            for row in self.rows()
        )


__all__ = ["SqMat"]
