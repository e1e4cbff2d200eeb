"""
Algorithms.

Indexing is 0-based: F(0) = 0, F(1) = 1, F(n) = F(n-1) + F(n-2).
"""

from __future__ import annotations

import logging
from functools import cache

from .errors import FibonacciOverflowError
from .types import IntType

logger = logging.getLogger(__name__)


def check_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must be non-negative")


def fib_pair(n: int) -> tuple[int, int]:
    """Return (F(n), F(n+1)) by fast doubling in O(log n) steps.

    >>> fib_pair(9)
    (34, 55)
    """
    a, b = 0, 1
    for bit in bin(n)[2:]:
        # F(2k) = F(k) * (2F(k+1) - F(k)),  F(2k+1) = F(k)^2 + F(k+1)^2
        c = a * (2 * b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a, b


@cache
def _limit(int_type: IntType) -> tuple[int, int]:
    ceiling = int_type.max_value
    if ceiling is None:
        raise ValueError(f"{int_type.value} has no maximum index")
    n, a, b = 0, 0, 1
    while b <= ceiling:
        n, a, b = n + 1, b, a + b
    logger.debug("max index for %s is %d (F=%d)", int_type.value, n, a)
    return n, a


def max_index(int_type: IntType | str = IntType.U64) -> tuple[int, int]:
    """Return (max_n, F(max_n)) for the largest index that fits `int_type`.

    >>> max_index(IntType.U8)
    (13, 233)
    >>> max_index("i64")
    (92, 7540113804746346429)
    """
    return _limit(IntType(int_type))


def fib(n: int, int_type: IntType | str = IntType.U64) -> int:
    """Return the n-th Fibonacci number (0-indexed) using fast doubling.

    Raises FibonacciOverflowError when F(n) does not fit `int_type`. The
    check compares `n` against the width's max index, so no out-of-range
    value is ever computed.

    >>> fib(0)
    0
    >>> fib(1)
    1
    >>> fib(10)
    55
    >>> try:
    ...     fib(9000, IntType.U8)
    ... except FibonacciOverflowError as err:
    ...     err.max_value
    233
    """
    check_index(n)
    int_type = IntType(int_type)

    if int_type.bounded:
        max_n, max_value = _limit(int_type)
        if n > max_n:
            logger.debug("F(%d) rejected for %s", n, int_type.value)
            raise FibonacciOverflowError(int_type, n, max_n, max_value)

    return fib_pair(n)[0]


__all__ = ["fib", "fib_pair", "max_index", "check_index"]
