"""Unjittered key primitives the jitter engines narrow with."""

from __future__ import annotations

from typing import Optional, Protocol

import fractional_indexing

from . import lexorank


class KeyPrimitive(Protocol):
    def key_between(self, low: Optional[str], high: Optional[str], digits: Optional[str] = None) -> str:
        ...

    def n_keys_between(
        self, low: Optional[str], high: Optional[str], n: int, digits: Optional[str] = None
    ) -> list[str]:
        ...


class FractionalIndexing:
    """Base-62 keys from the ``fractional-indexing`` package.

    ``FIError`` raised by the package (inverted bounds, malformed keys) is
    left to propagate.
    """

    def key_between(self, low: Optional[str], high: Optional[str], digits: Optional[str] = None) -> str:
        if digits is None:
            return fractional_indexing.generate_key_between(low, high)
        return fractional_indexing.generate_key_between(low, high, digits)

    def n_keys_between(
        self, low: Optional[str], high: Optional[str], n: int, digits: Optional[str] = None
    ) -> list[str]:
        if digits is None:
            return fractional_indexing.generate_n_keys_between(low, high, n)
        return fractional_indexing.generate_n_keys_between(low, high, n, digits)


class LexoRank:
    """Base-36 LexoRank keys (``0-9a-z`` unless another alphabet is given)."""

    def key_between(self, low: Optional[str], high: Optional[str], digits: Optional[str] = None) -> str:
        return lexorank.midpoint(low, high, lexorank.BASE_36_DIGITS if digits is None else digits)

    def n_keys_between(
        self, low: Optional[str], high: Optional[str], n: int, digits: Optional[str] = None
    ) -> list[str]:
        return lexorank.n_midpoints(low, high, n, lexorank.BASE_36_DIGITS if digits is None else digits)


FRACTIONAL_INDEXING = FractionalIndexing()
LEXORANK = LexoRank()
