from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple

from .lexorank import key_after, key_before, key_between

DEFAULT_CHARS = "!0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz~"


class AlphabetError(ValueError):
    """Raised when an alphabet cannot be built from the given characters."""


class Alphabet:
    """Ordered set of characters that sort keys are drawn from.

    Characters are deduplicated and sorted by code point on construction.
    ``low`` is the smallest symbol and ``high`` the largest; both are used as
    implicit padding when comparing keys position by position.

    >>> a = Alphabet("cbac")
    >>> a.symbols
    ('a', 'b', 'c')
    >>> a.between("a", "c")
    'b'
    """

    __slots__ = ("_symbols", "_members", "_ranks")

    def __init__(self, chars: Iterable[str]) -> None:
        chars = list(chars)
        for ch in chars:
            if not isinstance(ch, str) or len(ch) != 1:
                raise AlphabetError(f"Alphabet symbols must be single characters, got {ch!r}")
        symbols = tuple(sorted(set(chars)))
        if len(symbols) < 2:
            raise AlphabetError("Expect chars to have at least two distinct characters.")
        object.__setattr__(self, "_symbols", symbols)
        object.__setattr__(self, "_members", frozenset(symbols))
        object.__setattr__(self, "_ranks", {ch: i for i, ch in enumerate(symbols)})

    @classmethod
    def default(cls) -> "Alphabet":
        return cls(DEFAULT_CHARS)

    def __setattr__(self, name, value):
        raise AttributeError("Alphabet is immutable")

    def __reduce__(self):
        return (Alphabet, ("".join(self._symbols),))

    def __repr__(self) -> str:
        return "Alphabet(%r)" % "".join(self._symbols)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, ch) -> bool:
        return ch in self._members

    # === Accessors ===

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def members(self) -> FrozenSet[str]:
        return self._members

    @property
    def ranks(self) -> Dict[str, int]:
        return dict(self._ranks)

    @property
    def low(self) -> str:
        return self._symbols[0]

    @property
    def high(self) -> str:
        return self._symbols[-1]

    def rank(self, ch: str) -> int:
        """Zero-based position of ``ch``; raises ``KeyError`` for foreign characters."""
        return self._ranks[ch]

    def symbol(self, rank: int) -> str:
        return self._symbols[rank]

    def valid(self, string: str) -> bool:
        """True when ``string`` is non-empty and uses only this alphabet's symbols."""
        if not string:
            return False
        members = self._members
        return all(ch in members for ch in string)

    # === Key generation ===

    def between(self, this: str, that: str) -> Optional[str]:
        return key_between(self, this, that)

    def after(self, key: str) -> Optional[str]:
        return key_after(self, key)

    def before(self, key: str) -> Optional[str]:
        return key_before(self, key)


_default: Optional[Alphabet] = None


def init() -> Alphabet:
    """Return the shared alphabet over ``DEFAULT_CHARS``."""
    global _default
    if _default is None:
        _default = Alphabet.default()
    return _default
