"""Fibonacci numbers: a function for F(n) and a lazy sequence, both overflow-checked."""

from .algos import fib, max_index
from .errors import FibonacciOverflowError
from .sequence import Fibonacci
from .types import IntType, SequenceConfig

__all__ = [
    "Fibonacci",
    "FibonacciOverflowError",
    "IntType",
    "SequenceConfig",
    "fib",
    "max_index",
]
