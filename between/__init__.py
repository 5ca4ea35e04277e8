"""Fractional sort keys drawn from a restricted, ordered alphabet."""

from .alphabet import DEFAULT_CHARS, Alphabet, AlphabetError, init
from .lexorank import key_after, key_before, key_between, midpoint

__all__ = [
    "DEFAULT_CHARS",
    "Alphabet",
    "AlphabetError",
    "init",
    "key_after",
    "key_before",
    "key_between",
    "midpoint",
]
