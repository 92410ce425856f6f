from __future__ import annotations

import math
import random
import secrets
from numbers import Integral, Real
from typing import Any


class InvalidArgument(ValueError):
    """Raised when a count or bit-width argument is not a non-negative integer."""


def assert_non_negative_integer(name: str, value: Any) -> int:
    """Return ``value`` as an ``int`` or raise :class:`InvalidArgument`.

    ``bool`` is rejected even though it subclasses ``int``. Integral floats
    such as ``3.0`` are accepted.
    """
    if isinstance(value, bool):
        raise InvalidArgument(f'"{name}" must be an integer, got \'{value}\'')
    if isinstance(value, Integral):
        number = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        number = int(value)
    else:
        raise InvalidArgument(f'"{name}" must be an integer, got \'{value}\'')
    if number < 0:
        raise InvalidArgument(
            f'"{name}" must be greater than or equal to 0, got \'{value}\''
        )
    return number


# === Random bit sources ===


def default_random_bit() -> bool:
    return random.random() < 0.5


def secure_random_bit() -> bool:
    """Unbiased bit from the OS CSPRNG."""
    return secrets.randbits(1) == 1


# === Collision estimate ===


def collision_probability(keys: int, jitter_bits: int) -> float:
    """Birthday bound for ``keys`` jittered keys sharing the same bounds.

    Returns ``1 - (2^b)! / ((2^b - k)! * (2^b)^k)``. The product is summed in
    log space so large bit widths do not underflow.
    """
    keys = assert_non_negative_integer("keys", keys)
    jitter_bits = assert_non_negative_integer("jitter_bits", jitter_bits)
    if keys <= 1:
        return 0.0
    positions = 2 ** jitter_bits
    if keys > positions:
        return 1.0
    log_unique = 0.0
    for i in range(1, keys):
        log_unique += math.log1p(-i / positions)
    return -math.expm1(log_unique)
