from __future__ import annotations

import logging
from typing import Callable, Optional

from .models import JitterOptions
from .primitives import KeyPrimitive
from .utils import assert_non_negative_integer

logger = logging.getLogger(__name__)


def _jittered_key(low: Optional[str], high: Optional[str], options: JitterOptions) -> str:
    bits = options.bits
    primitive = options.key_primitive
    random_bit = options.random_bit

    midpoint = primitive.key_between(low, high, options.digits)
    for _ in range(bits):
        if random_bit():
            low = midpoint
        else:
            high = midpoint
        midpoint = primitive.key_between(low, high, options.digits)
    return midpoint


def generate_key_between(
    low: Optional[str],
    high: Optional[str],
    *,
    digits: Optional[str] = None,
    jitter_bits: Optional[int] = None,
    get_random_bit: Optional[Callable[[], bool]] = None,
    primitive: Optional[KeyPrimitive] = None,
) -> str:
    """Return a key strictly between ``low`` and ``high`` with jitter.

    Starting from the unjittered midpoint of ``(low, high)``, each of the
    ``jitter_bits`` rounds draws one bit: ``True`` keeps the upper half
    (``low`` becomes the midpoint), ``False`` keeps the lower half. The key
    is the midpoint after the last round, one of ~``2**jitter_bits``
    equally likely positions in the original gap. The primitive is called
    ``jitter_bits + 1`` times.

    With ``k`` keys generated independently for the same bounds, the chance
    that any two collide is ``1 - (2^b)!/((2^b - k)!(2^b)^k)``; see
    :func:`collision_probability`. For ``b = 30`` and ``k = 10_000`` that is
    about 4.5%.

    ``jitter_bits`` defaults to 30; ``0`` returns the unjittered midpoint.
    ``get_random_bit`` must return an unbiased bool; pass
    :func:`secure_random_bit` for unpredictable keys. ``digits`` is handed to
    ``primitive`` untouched.
    """
    options = JitterOptions(
        digits=digits,
        jitter_bits=jitter_bits,
        get_random_bit=get_random_bit,
        primitive=primitive,
    )
    bits = options.bits
    logger.debug("key between %r and %r, jitter_bits=%d", low, high, bits)
    return _jittered_key(low, high, options)


def generate_n_keys_between(
    low: Optional[str],
    high: Optional[str],
    n: int,
    *,
    digits: Optional[str] = None,
    jitter_bits: Optional[int] = None,
    get_random_bit: Optional[Callable[[], bool]] = None,
    primitive: Optional[KeyPrimitive] = None,
) -> list[str]:
    """Return ``n`` increasing jittered keys between ``low`` and ``high``.

    ``n + 1`` unjittered keys split the range into ``n`` gaps and one
    jittered key is drawn inside each, so jitter never reorders the batch.
    An explicit ``jitter_bits=0`` returns the primitive's own ``n`` keys.
    """
    n = assert_non_negative_integer("n", n)
    options = JitterOptions(
        digits=digits,
        jitter_bits=jitter_bits,
        get_random_bit=get_random_bit,
        primitive=primitive,
    )
    bits = options.bits
    if n == 0:
        return []

    key_primitive = options.key_primitive
    if jitter_bits is not None and bits == 0:
        return key_primitive.n_keys_between(low, high, n, digits)

    logger.debug("%d keys between %r and %r, jitter_bits=%d", n, low, high, bits)
    boundaries = key_primitive.n_keys_between(low, high, n + 1, digits)
    return [_jittered_key(start, end, options) for start, end in zip(boundaries, boundaries[1:])]
