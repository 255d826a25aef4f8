"""
Mathematical validation tests for reduced pipe dream generation.

Philosophy: prove correctness through properties that must hold for every
permutation, checked exhaustively for small n:
- Crossing count equals Coxeter length
- Dimension preserved, no duplicate dreams
- Dominant permutations have exactly one dream (their code diagram)
- Mitosis lowers the cross count by exactly one per step
"""

from itertools import permutations
from typing import List

import pytest

from dream_core.dream import Dream
from dream_core.generate import expand_steps, reduced_dreams
from dream_core.perm import Perm
from dream_core.types import Tile


# =============================================================================
# Helpers
# =============================================================================

def all_perms(n: int) -> List[Perm]:
    return [Perm(values) for values in permutations(range(n))]


def non_longest_perms(n: int) -> List[Perm]:
    """Every permutation except w0, whose dream list is empty by construction."""
    w0 = Perm.long(n)
    return [p for p in all_perms(n) if p != w0]


def is_dominant(p: Perm) -> bool:
    """Dominant (132-avoiding) iff the Lehmer code is weakly decreasing."""
    code = p.lehmer()
    return all(code[i] >= code[i + 1] for i in range(len(code) - 1))


def code_diagram(p: Perm) -> Dream:
    """Dream with crosses at (i, j) for j < code[i]."""
    n = len(p)
    code = p.lehmer()
    return Dream.from_flat(n, (
        Tile.CROSS if j < code[i] else Tile.ELBOW
        for i in range(n)
        for j in range(n)
    ))


# =============================================================================
# Invariants over all permutations
# =============================================================================

class TestInvariants:

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_crossing_count_is_length(self, n):
        for p in all_perms(n):
            for d in reduced_dreams(p):
                assert d.num_crosses() == p.length(), \
                    f"Dream of {p} has {d.num_crosses()} crosses, expected {p.length()}"

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_dimension_preserved(self, n):
        for p in all_perms(n):
            assert all(d.dim == n for d in reduced_dreams(p))

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_every_non_longest_perm_has_dreams(self, n):
        for p in non_longest_perms(n):
            assert len(reduced_dreams(p)) >= 1, f"No dreams for {p}"

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_no_duplicate_dreams(self, n):
        """Mitosis splits a dream set into disjoint pieces."""
        for p in non_longest_perms(n):
            dreams = reduced_dreams(p)
            assert len(set(dreams)) == len(dreams), f"Duplicate dreams for {p}"

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_no_crosses_on_or_below_antidiagonal(self, n):
        """Crosses only occupy cells with i + j < n - 1 (inside the seed)."""
        for p in non_longest_perms(n):
            for d in reduced_dreams(p):
                assert all(i + j < n - 1 for i, j in d.crosses())

    @pytest.mark.parametrize("n", [3, 4])
    def test_step_cross_counts(self, n):
        seed = Dream.long(n).num_crosses()
        for p in non_longest_perms(n):
            for k, (_, dreams) in enumerate(expand_steps(p)):
                assert all(d.num_crosses() == seed - k - 1 for d in dreams)


# =============================================================================
# Known families
# =============================================================================

class TestKnownFamilies:

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_dominant_single_dream(self, n):
        for p in non_longest_perms(n):
            if not is_dominant(p):
                continue
            dreams = reduced_dreams(p)
            assert dreams == [code_diagram(p)], f"Dominant {p} should have one dream"

    def test_identity_every_n(self):
        for n in range(2, 7):
            dreams = reduced_dreams(Perm.identity(n))
            assert len(dreams) == 1
            assert dreams[0].num_crosses() == 0

    def test_counts_n3(self):
        counts = {str(p): len(reduced_dreams(p)) for p in all_perms(3)}
        assert counts == {
            "[0, 1, 2]": 1,
            "[0, 2, 1]": 2,
            "[1, 0, 2]": 1,
            "[1, 2, 0]": 1,
            "[2, 0, 1]": 1,
            "[2, 1, 0]": 0,
        }

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_inverse_has_same_dream_count(self, n):
        """Transposing reduced pipe dreams of p gives those of p^-1."""
        for p in non_longest_perms(n):
            assert len(reduced_dreams(p)) == len(reduced_dreams(p.inverse()))

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_transpose_gives_inverse_dreams(self, n):
        for p in non_longest_perms(n):
            transposed = {
                Dream.from_flat(n, (d[(j, i)] for i in range(n) for j in range(n)))
                for d in reduced_dreams(p)
            }
            assert transposed == set(reduced_dreams(p.inverse()))
