from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .primitives import FRACTIONAL_INDEXING, KeyPrimitive
from .utils import assert_non_negative_integer, default_random_bit

DEFAULT_JITTER_BITS = 30


# === Per-call configuration ===


@dataclass(frozen=True)
class JitterOptions:
    digits: Optional[str] = None
    jitter_bits: Optional[int] = None
    get_random_bit: Optional[Callable[[], bool]] = None
    primitive: Optional[KeyPrimitive] = None

    @property
    def bits(self) -> int:
        """Validated bit count, falling back to ``DEFAULT_JITTER_BITS``."""
        if self.jitter_bits is None:
            return DEFAULT_JITTER_BITS
        return assert_non_negative_integer("jitter_bits", self.jitter_bits)

    @property
    def random_bit(self) -> Callable[[], bool]:
        return self.get_random_bit or default_random_bit

    @property
    def key_primitive(self) -> KeyPrimitive:
        return self.primitive or FRACTIONAL_INDEXING
