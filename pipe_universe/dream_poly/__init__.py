"""
dream_poly: Polynomials read off reduced pipe dreams.

Modules:
- monomial.py: Per-row crossing counts of a dream as a monomial
- schubert.py: Schubert polynomial as the ordered sum of dream monomials
"""

from .monomial import Monomial
from .schubert import Schubert

__all__ = ["Monomial", "Schubert"]
