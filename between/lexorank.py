from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .alphabet import Alphabet

logger = logging.getLogger(__name__)


def _round_half_up(a: int, b: int) -> int:
    return (a + b + 1) // 2


def key_between(alphabet: Alphabet, this: str, that: str) -> Optional[str]:
    """Return the shortest key found strictly between ``this`` and ``that``.

    Trailing ``low`` symbols are insignificant and are stripped from both
    bounds first. An empty ``this`` means "no lower bound"; ``that`` must be a
    valid non-empty key. Returns ``None`` when the bounds are out of order,
    contain foreign characters, or the guarded search finds nothing.
    """
    low = alphabet.low
    L = this.rstrip(low)
    R = that.rstrip(low)
    if L >= R or (L and not alphabet.valid(L)) or not alphabet.valid(R):
        logger.debug("no key between %r and %r", this, that)
        return None

    # invariant: L < R
    guard = len(L) + len(R)
    longest = max(len(L), len(R))
    top = len(alphabet) - 1
    out: list[str] = []
    for i in range(guard + 1):
        l = alphabet.rank(L[i]) if i < len(L) else 0
        r = alphabet.rank(R[i]) if i < len(R) else top
        if l + 1 < r or i >= longest:
            ch = alphabet.symbol(_round_half_up(l, r))
        else:
            ch = alphabet.symbol(l)
        out.append(ch)
        candidate = "".join(out)
        if L < candidate < R and ch != low:
            return candidate

    logger.debug("search exhausted between %r and %r", this, that)
    return None


def key_after(alphabet: Alphabet, key: str) -> Optional[str]:
    return key_between(alphabet, key, alphabet.high)


def key_before(alphabet: Alphabet, key: str) -> Optional[str]:
    return key_between(alphabet, alphabet.low, key)


def midpoint(alphabet: Alphabet, left: Optional[str], right: Optional[str]) -> Optional[str]:
    """Return a sort key strictly between two neighbours.

    ``left`` or ``right`` may be ``None`` to indicate unbounded on that side.
    """
    if right is None:
        return key_after(alphabet, left or "")
    if left is None:
        return key_before(alphabet, right)
    return key_between(alphabet, left, right)
