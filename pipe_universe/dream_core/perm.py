"""
Zero-indexed permutations on {0, ..., n-1}.

Provides:
- Perm: immutable validated bijection (composition, Lehmer code, long permutation)
- parse_perm: parse delimiter-separated text into a Perm
- InvalidPermutationError / PermParseError: typed failures at the boundary

Invariant: sorting the values of any Perm yields exactly 0, 1, ..., n-1.
It is checked once on every public construction path. Composition and the
long permutation build their values from existing bijections and go through
the trusted constructor without re-checking.
"""

import operator
from typing import Iterable, Iterator, Tuple

import numpy as np

from .sqmat import SqMat
from .types import LehmerCode


class InvalidPermutationError(ValueError):
    """Input values are not a bijection onto 0..n-1."""

    def __init__(self, values: Tuple[int, ...]):
        self.values = values
        super().__init__(f"Not a permutation of 0..{len(values) - 1}: {list(values)}")


class PermParseError(ValueError):
    """
    Text could not be parsed into a permutation.

    ``reason`` is ``"token"`` when a token is not a non-negative integer and
    ``"bijection"`` when the tokens parse but do not form a permutation.
    """

    def __init__(self, text: str, reason: str, detail: str = ""):
        self.text = text
        self.reason = reason
        message = f"Cannot parse permutation from {text!r} ({reason})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


def _as_index(v) -> int:
    # Plain and numpy integers are accepted, bools and floats are not
    if isinstance(v, (bool, np.bool_)):
        raise TypeError(f"bool is not a permutation entry: {v!r}")
    return operator.index(v)


def _is_bijection(values: Tuple[int, ...]) -> bool:
    return sorted(values) == list(range(len(values)))


class Perm:
    """A zero-indexed permutation, stored as the tuple of images ``p[0..n-1]``."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[int]):
        """
        Create a permutation from its images.

        Raises:
            InvalidPermutationError: If ``values`` is not a bijection onto 0..n-1.
        """
        raw = tuple(values)
        try:
            vals = tuple(_as_index(v) for v in raw)
        except TypeError:
            raise InvalidPermutationError(raw) from None
        if not _is_bijection(vals):
            raise InvalidPermutationError(vals)
        self._values = vals

    @classmethod
    def _trusted(cls, values: Tuple[int, ...]) -> "Perm":
        # Caller guarantees values is a bijection
        perm = cls.__new__(cls)
        perm._values = values
        return perm

    @classmethod
    def identity(cls, n: int) -> "Perm":
        return cls._trusted(tuple(range(n)))

    @classmethod
    def long(cls, n: int) -> "Perm":
        """The longest permutation of length ``n``: ``n-1, n-2, ..., 0``."""
        return cls._trusted(tuple(range(n - 1, -1, -1)))

    @classmethod
    def parse(cls, text: str, delim: str = ",") -> "Perm":
        return parse_perm(text, delim)

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, i: int) -> int:
        return self._values[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def to_list(self) -> list:
        return list(self._values)

    # -------------------------------------------------------------------------
    # Group structure
    # -------------------------------------------------------------------------

    def compose_with(self, other: "Perm") -> "Perm":
        """
        Compose with another permutation: ``(self * other)(i) = self(other(i))``.

        Raises:
            ValueError: If the lengths differ.
        """
        if len(self) != len(other):
            raise ValueError(
                f"Cannot compose permutations of lengths {len(self)} and {len(other)}"
            )
        # A bijection applied to a bijection's outputs is again a bijection
        return Perm._trusted(tuple(self._values[j] for j in other._values))

    def __mul__(self, other: "Perm") -> "Perm":
        if not isinstance(other, Perm):
            return NotImplemented
        return self.compose_with(other)

    def inverse(self) -> "Perm":
        inv = [0] * len(self)
        for i, v in enumerate(self._values):
            inv[v] = i
        return Perm._trusted(tuple(inv))

    def lehmer(self) -> LehmerCode:
        """
        Lehmer code: entry ``i`` counts the indices ``j > i`` with ``p[j] < p[i]``.

        See https://en.wikipedia.org/wiki/Lehmer_code.
        """
        vals = self._values
        return [
            sum(1 for j in range(i + 1, len(vals)) if vals[j] < vals[i])
            for i in range(len(vals))
        ]

    def length(self) -> int:
        """Coxeter length (number of inversions)."""
        return sum(self.lehmer())

    def is_identity(self) -> bool:
        return all(v == i for i, v in enumerate(self._values))

    # -------------------------------------------------------------------------
    # Matrices
    # -------------------------------------------------------------------------

    def matrix(self) -> SqMat[int]:
        """Permutation matrix with a 1 at ``(i, p[i])``."""
        n = len(self)
        return SqMat.new(n, 0).replace({(i, v): 1 for i, v in enumerate(self._values)})

    def rothe(self) -> SqMat[int]:
        """
        Rothe diagram: a 1 at ``(i, p[j])`` for every inversion ``i < j``, ``p[i] > p[j]``.

        The number of marked cells equals the Coxeter length.
        """
        n = len(self)
        vals = self._values
        marks = {
            (i, vals[j]): 1
            for i in range(n)
            for j in range(i + 1, n)
            if vals[i] > vals[j]
        }
        return SqMat.new(n, 0).replace(marks)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Perm):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Perm({list(self._values)!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self._values) + "]"


def parse_perm(text: str, delim: str = ",") -> Perm:
    """
    Parse a zero-indexed permutation from ``delim``-separated integers.

    Tokens may carry surrounding whitespace: ``" 0, 3, 2, 1 "`` parses to
    ``[0, 3, 2, 1]``.

    Raises:
        PermParseError: If a token is not a non-negative integer
            (``reason="token"``) or the values are not a permutation
            (``reason="bijection"``).
    """
    if not delim:
        raise PermParseError(text, "token", "empty delimiter")

    values = []
    for token in text.strip().split(delim):
        token = token.strip()
        if not token.isdigit() or not token.isascii():
            raise PermParseError(text, "token", f"invalid token {token!r}")
        values.append(int(token))

    try:
        return Perm(values)
    except InvalidPermutationError as e:
        raise PermParseError(text, "bijection", str(e)) from e


__all__ = [
    "Perm",
    "parse_perm",
    "InvalidPermutationError",
    "PermParseError",
]
