"""Small integer helpers used by the game logic."""

from __future__ import annotations

import math
import random
from typing import Protocol


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _trunc_div(value: int, step: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(value) // abs(step)
    return quotient if (value >= 0) == (step > 0) else -quotient


def _trunc_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend."""
    return value - _trunc_div(value, modulus) * modulus


def rand_below(limit: int, rng: _RandomSource | None = None) -> int:
    """Return a random integer in ``[0, abs(limit))``, or 0 when ``limit`` is 0."""
    limit = abs(int(limit))
    if limit == 0:
        return 0
    source = rng if rng is not None else random
    return source.randrange(limit)


def two_digits(value: int, step: int) -> int:
    """Return the two decimal digits of ``value`` starting at unit ``step``.

    Division truncates toward zero and the result keeps the sign of
    ``value``. A ``step`` of zero raises ZeroDivisionError.
    """
    if step == 0:
        raise ZeroDivisionError("step must not be zero")
    return _trunc_mod(_trunc_div(int(value), int(step)), 100)


def distance(a: int, b: int) -> int:
    """Return the length of the vector ``(a, b)``, truncated to an integer."""
    return math.isqrt(a * a + b * b)