"""
Secure random primitives.

All randomness in the package goes through `secure_random_int` and
`secure_shuffle`, both backed by the operating system's CSPRNG.
"""

from __future__ import annotations

import os
from typing import MutableSequence, TypeVar

T = TypeVar("T")

UINT32_RANGE = 1 << 32


def _draw_uint32() -> int:
    """One unsigned 32-bit value from the OS entropy source."""
    return int.from_bytes(os.urandom(4), "big")


def secure_random_int(max_exclusive: int) -> int:
    """
    Uniform integer in [0, max_exclusive).

    Draws 32-bit values and rejects those at or above the largest multiple
    of `max_exclusive` that fits in 2**32, so the final modulo is unbiased.
    Returns 0 when `max_exclusive <= 0`.
    """
    if max_exclusive <= 0:
        return 0

    limit = (UINT32_RANGE // max_exclusive) * max_exclusive
    while True:
        value = _draw_uint32()
        if value < limit:
            return value % max_exclusive


def secure_shuffle(items: MutableSequence[T]) -> MutableSequence[T]:
    """
    Fisher-Yates shuffle in place, from the last index down to 1.
    Returns the same sequence for convenience.
    """
    for i in range(len(items) - 1, 0, -1):
        j = secure_random_int(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def secure_choice(chars: str) -> str:
    """Uniform character from a non-empty string."""
    return chars[secure_random_int(len(chars))]

