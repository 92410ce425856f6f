from __future__ import annotations

from .utils import InvalidArgument

BASE_36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def validate_digits(digits: str) -> None:
    if len(digits) < 3:
        raise InvalidArgument(f"alphabet needs at least 3 digits, got {digits!r}")
    if len(set(digits)) != len(digits) or list(digits) != sorted(digits):
        raise InvalidArgument(f"alphabet must be unique and ascending, got {digits!r}")


def validate_key(key: str, digits: str = BASE_36_DIGITS) -> None:
    """Reject keys that cannot take part in midpoint ordering.

    A key ending in the smallest digit has no room below it at its own
    length, so ``midpoint`` could not produce anything smaller.
    """
    if not key:
        raise InvalidArgument("key must not be empty")
    invalid = set(key) - set(digits)
    if invalid:
        raise InvalidArgument(f"key {key!r} has digits outside the alphabet: {sorted(invalid)}")
    if key[-1] == digits[0]:
        raise InvalidArgument(f"key {key!r} must not end with {digits[0]!r}")


def midpoint(left: str | None, right: str | None, digits: str = BASE_36_DIGITS) -> str:
    """Return a LexoRank key strictly between ``left`` and ``right``.

    ``left`` or ``right`` may be ``None`` to indicate unbounded on that side.
    """
    validate_digits(digits)
    for key in (left, right):
        if key is not None:
            validate_key(key, digits)
    if left is not None and right is not None and left >= right:
        raise InvalidArgument(f"{left!r} >= {right!r}")

    a2i = {ch: i for i, ch in enumerate(digits)}
    top = len(digits) - 1
    L = left or ""
    R = right or ""
    i = 0
    out: list[str] = []
    while True:
        l = a2i[L[i]] if i < len(L) else 0
        r = a2i[R[i]] if i < len(R) else top
        if l + 1 < r:
            out.append(digits[(l + r) // 2])
            return "".join(out)
        out.append(digits[l])
        i += 1


def n_midpoints(left: str | None, right: str | None, n: int, digits: str = BASE_36_DIGITS) -> list[str]:
    """Return ``n`` increasing LexoRank keys between ``left`` and ``right``."""
    if n == 0:
        return []
    if n == 1:
        return [midpoint(left, right, digits)]
    if right is None:
        keys = []
        key = left
        for _ in range(n):
            key = midpoint(key, None, digits)
            keys.append(key)
        return keys
    if left is None:
        keys = []
        key = right
        for _ in range(n):
            key = midpoint(None, key, digits)
            keys.append(key)
        keys.reverse()
        return keys
    half = n // 2
    key = midpoint(left, right, digits)
    return [
        *n_midpoints(left, key, half, digits),
        key,
        *n_midpoints(key, right, n - half - 1, digits),
    ]
