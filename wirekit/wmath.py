"""Pseudo-random numbers, range mapping and word helpers."""

from __future__ import annotations

import random as _stdlib_random
from typing import Optional

RAND_MAX = 0x7FFFFFFF
_ULONG_MASK = 0xFFFFFFFF
_WORD_MASK = 0xFFFF
_BYTE_MASK = 0xFF

_generator = _stdlib_random.Random()


def random_seed(seed: int) -> None:
    """Reseed the generator; a seed of zero leaves it untouched."""
    seed &= _ULONG_MASK
    if seed != 0:
        _generator.seed(seed)


def _rand() -> int:
    return _generator.randint(0, RAND_MAX)


def random(a: int, b: Optional[int] = None) -> int:
    """Return a pseudo-random number.

    With one argument the result lies in ``[0, a)`` (``0`` when ``a`` is
    zero). With two it lies in ``[a, b)``; when ``a >= b`` the result is ``a``.
    """
    if b is None:
        if a == 0:
            return 0
        return _rand() % abs(a)
    if a >= b:
        return a
    return random(b - a) + a


def map_value(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-scale ``x`` from one range to another, truncating toward zero.

    The scaled distance from ``in_min`` is divided by the input span plus
    ``out_min``, and ``out_min`` is not added to the result.
    """
    divisor = float((in_max - in_min) + out_min)
    return int(float(x - in_min) * float(out_max - out_min) / divisor)


def make_word(high: int, low: Optional[int] = None) -> int:
    """Build a 16-bit word from a high and a low byte, or truncate one value to 16 bits."""
    if low is None:
        return high & _WORD_MASK
    return (((high & _BYTE_MASK) << 8) | (low & _BYTE_MASK)) & _WORD_MASK