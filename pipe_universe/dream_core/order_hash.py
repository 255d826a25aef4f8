"""
Deterministic hashing of dreams and dream sets.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- dream_key: canonical string of a dream ('.'/'+' cells, rows joined by '/')
- dream_set_hash: order-sensitive hash of a generated dream list

All functions are deterministic and stable across runs.
No use of Python's built-in hash() (salted per process for str).
"""

import hashlib
import json
from typing import Any, Iterable

from .dream import Dream
from .types import Hash64


def hash64(obj: Any) -> Hash64:
    """
    Fingerprint a JSON value as a 64-bit integer.

    Receipts store this for the dream list of a run, so two runs on the same
    permutation can be compared without keeping every grid. The value is
    serialized with sorted keys and compact separators, hashed with SHA-256,
    and the first 8 bytes are read big-endian.

    Examples:
        >>> hash64([".+", ".."]) == hash64([".+", ".."])
        True
        >>> hash64([".+", ".."]) == hash64(["..", ".+"])
        False
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    sha = hashlib.sha256(canonical_json.encode("utf-8"))
    return Hash64(int.from_bytes(sha.digest()[:8], byteorder="big", signed=False))


def dream_key(dream: Dream) -> str:
    """
    Canonical text of a dream.

    Examples:
        >>> dream_key(Dream.long(3))
        '++./+../...'
    """
    return "/".join(dream.to_strings())


def dream_set_hash(dreams: Iterable[Dream]) -> Hash64:
    """Hash of the dream list in generation order (order and multiplicity matter)."""
    return hash64([dream_key(d) for d in dreams])


__all__ = ["hash64", "dream_key", "dream_set_hash"]
