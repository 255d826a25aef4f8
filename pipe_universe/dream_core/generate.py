"""
Reduced pipe dream generation by repeated mitosis.

Goal: all reduced pipe dreams of a permutation p.

Algorithm:
1. q = p ∘ w0 (w0 = longest permutation of the same length)
2. word = lex-first reduced word of q; empty word → no dreams
3. Reverse the word
4. Seed: Dream.long(n).mitosis(word[0])
5. For every remaining letter l: working set ← concatenation of d.mitosis(l)
6. The final working set is the answer

Every generated dream has exactly p.length() crosses.

Boundary behavior: for p = w0 the composed permutation is the identity, the
word is empty and the result is the empty list, even though w0 has exactly
one reduced pipe dream (Dream.long(n)). This is kept as is; callers that want
the seed dream for w0 must special-case it themselves.

Resource hazard: the working set is not deduplicated or bounded and its size
grows super-exponentially with n. Each step recomputes from the previous
working set; nothing is cached between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from .dream import Dream
from .perm import Perm
from .words import lex_first_reduced_word

logger = logging.getLogger(__name__)


def mitosis_all(dreams: Sequence[Dream], i: int) -> List[Dream]:
    """Concatenate ``d.mitosis(i)`` over ``dreams``, keeping parent order. No deduplication."""
    res: List[Dream] = []
    for dream in dreams:
        res.extend(dream.mitosis(i))
    return res


def mitosis_word(perm: Perm) -> List[int]:
    """Letters fed to mitosis for ``perm``: the reversed lex-first word of ``perm ∘ w0``."""
    q = perm * Perm.long(len(perm))
    word = lex_first_reduced_word(q)
    word.reverse()
    return word


def expand_steps(perm: Perm) -> Iterator[Tuple[int, Tuple[Dream, ...]]]:
    """
    Yield ``(letter, working_set)`` after every mitosis step.

    The last yielded working set equals ``reduced_dreams(perm)``. Nothing is
    yielded when the mitosis word is empty.
    """
    word = mitosis_word(perm)
    if not word:
        return

    dreams: Tuple[Dream, ...] = tuple(Dream.long(len(perm)).mitosis(word[0]))
    yield word[0], dreams
    for letter in word[1:]:
        dreams = tuple(mitosis_all(dreams, letter))
        yield letter, dreams


def reduced_dreams(perm: Perm) -> List[Dream]:
    """
    All reduced pipe dreams of ``perm`` in generation order.

    Args:
        perm: Validated permutation

    Returns:
        List of dreams, each with ``perm.length()`` crosses; empty when
        ``perm`` is the longest permutation (see module docstring)
    """
    logger.debug("Generating reduced dreams for %s (word %s)", perm, mitosis_word(perm))

    dreams: Tuple[Dream, ...] = ()
    for step, (letter, dreams) in enumerate(expand_steps(perm)):
        logger.debug("Step %d: mitosis(%d) -> %d dreams", step, letter, len(dreams))

    return list(dreams)


@dataclass(frozen=True)
class ReducedDreams:
    """The set of reduced pipe dreams on a permutation."""
    perm: Perm
    dreams: Tuple[Dream, ...] = field(default=())

    @classmethod
    def for_perm(cls, perm: Perm) -> "ReducedDreams":
        return cls(perm=perm, dreams=tuple(reduced_dreams(perm)))

    def __iter__(self) -> Iterator[Dream]:
        return iter(self.dreams)

    def __len__(self) -> int:
        return len(self.dreams)


__all__ = [
    "mitosis_all",
    "mitosis_word",
    "expand_steps",
    "reduced_dreams",
    "ReducedDreams",
]
