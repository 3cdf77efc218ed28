"""Fixed-width integer helpers.

Numbers are Python ints kept inside the signed 32-bit range. Booleans are
a separate variant even though Python's bool subclasses int.
"""

from __future__ import annotations

from fractions import Fraction

from mal.errors import MalArithmeticError

INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def is_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def in_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def wrap(n: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit two's-complement range."""
    return (n - INT_MIN) % (1 << INT_BITS) + INT_MIN


def divide(a: int, b: int) -> int:
    """Exact quotient rounded half-to-even, then wrapped."""
    if b == 0:
        raise MalArithmeticError("Division by zero")
    return wrap(round(Fraction(a, b)))
