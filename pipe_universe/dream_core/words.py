"""
Reduced words from Lehmer codes.

A reduced word of p is a shortest sequence of adjacent transpositions s_i
whose product is p. Its length is the Coxeter length (sum of the Lehmer code).
"""

from .perm import Perm
from .types import Word


def lex_first_reduced_word(perm: Perm) -> Word:
    """
    Lexicographically first reduced word of ``perm``.

    The Lehmer code is read from the last position backwards. At reversed
    position ``i`` with code value ``ci`` the descending run
    ``i-1, i-2, ..., i-ci`` is appended.

    Args:
        perm: Any permutation

    Returns:
        Word of length ``perm.length()``; empty for the identity

    Examples:
        >>> lex_first_reduced_word(Perm([1, 2, 3, 0]))
        [0, 1, 2]
        >>> lex_first_reduced_word(Perm([2, 1, 0]))
        [0, 1, 0]
    """
    word: Word = []
    for i, ci in enumerate(reversed(perm.lehmer())):
        word.extend(range(i - 1, i - ci - 1, -1))
    return word


def apply_word(word: Word, n: int) -> Perm:
    """
    Multiply out ``word`` as a product of adjacent transpositions on ``n`` points.

    Generators are numbered from the right end of the one-line notation:
    letter ``s`` swaps positions ``n-2-s`` and ``n-1-s``. With that
    convention ``apply_word(lex_first_reduced_word(p), len(p)) == p``.

    Examples:
        >>> apply_word([0, 1], 3)
        Perm([1, 2, 0])
    """
    values = list(range(n))
    for s in reversed(word):
        a, b = n - 2 - s, n - 1 - s
        values[a], values[b] = values[b], values[a]
    return Perm(values)


__all__ = ["lex_first_reduced_word", "apply_word"]
