"""
Monomials read off pipe dreams.

A dream contributes the monomial ∏_i x_i^(number of crosses in row i).
Monomials carry no coefficient; equal monomials from different dreams are
kept apart by the Schubert assembly.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from dream_core.dream import Dream
from dream_core.types import Power


def _factor(i: int, p: int) -> str:
    if p == 0:
        return "1"
    if p == 1:
        return f"x_{i}"
    return f"x_{i}^{p}"


@dataclass(frozen=True)
class Monomial:
    """
    Monomial in the row variables x_0, x_1, ...

    ``powers`` holds ``(i, p)`` pairs meaning x_i^p, ascending by ``i`` with
    ``p > 0``. An empty tuple is the constant monomial 1.
    """
    powers: Tuple[Power, ...] = ()

    @classmethod
    def from_dream(cls, dream: Dream) -> "Monomial":
        """Count crosses per row; rows without crosses are omitted."""
        row_counts = dream.cross_mask().sum(axis=1)
        return cls(tuple(
            (int(i), int(row_counts[i])) for i in np.flatnonzero(row_counts)
        ))

    def degree(self) -> int:
        return sum(p for _, p in self.powers)

    def is_constant(self) -> bool:
        return not self.powers

    def exponent(self, i: int) -> int:
        """Exponent of x_i (0 if absent)."""
        for j, p in self.powers:
            if j == i:
                return p
        return 0

    def __str__(self) -> str:
        if not self.powers:
            return "1"
        return "*".join(_factor(i, p) for i, p in self.powers)


__all__ = ["Monomial"]
