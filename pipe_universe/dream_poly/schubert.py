"""
Schubert polynomials assembled from reduced pipe dreams.

S_p = Σ_{D reduced pipe dream of p} ∏_i x_i^(crosses of D in row i)

The default representation is the uncombined term list: one monomial per
dream with at least one cross, in generation order, duplicates kept.
collected() gives the combined form (monomial → coefficient) for callers
that want it.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from dream_core.dream import Dream
from dream_core.generate import ReducedDreams
from dream_core.perm import Perm

from .monomial import Monomial


@dataclass(frozen=True)
class Schubert:
    """A permutation with the ordered monomials of its reduced pipe dreams."""
    perm: Perm
    parts: Tuple[Monomial, ...] = ()

    @classmethod
    def from_dreams(cls, dreams: ReducedDreams) -> "Schubert":
        return cls.from_dream_list(dreams.perm, dreams)

    @classmethod
    def from_dream_list(cls, perm: Perm, dreams: Iterable[Dream]) -> "Schubert":
        """Keep the non-constant monomial of every dream, in order, without merging."""
        parts = []
        for dream in dreams:
            mono = Monomial.from_dream(dream)
            if not mono.is_constant():
                parts.append(mono)
        return cls(perm=perm, parts=tuple(parts))

    @classmethod
    def for_perm(cls, perm: Perm) -> "Schubert":
        return cls.from_dreams(ReducedDreams.for_perm(perm))

    def collected(self) -> Dict[Monomial, int]:
        """Monomial → coefficient, in order of first appearance."""
        coeffs: Dict[Monomial, int] = {}
        for mono in self.parts:
            coeffs[mono] = coeffs.get(mono, 0) + 1
        return coeffs

    def render(self, collect: bool = False) -> str:
        """
        Render as ``S_[...] = m1 + m2 + ...``; ``S_[...] = 1`` when there are no terms.

        With ``collect=True`` equal monomials are merged and written with
        their coefficient, e.g. ``2*x_0*x_1``.
        """
        if not self.parts:
            body = "1"
        elif collect:
            body = " + ".join(
                str(mono) if c == 1 else f"{c}*{mono}"
                for mono, c in self.collected().items()
            )
        else:
            body = " + ".join(str(mono) for mono in self.parts)
        return f"S_{self.perm} = {body}"

    def __str__(self) -> str:
        return self.render()


__all__ = ["Schubert"]
