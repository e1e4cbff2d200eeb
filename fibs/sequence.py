from __future__ import annotations

import copy
import logging

from .algos import fib, fib_pair, max_index
from .types import IntType, SequenceConfig

logger = logging.getLogger(__name__)


class Fibonacci:
    """
    Lazy Fibonacci sequence over a fixed integer width.

    Yields F(start_index), F(start_index + 1), ... and stops once the next
    value would not fit `int_type`. Exhaustion is final: every later pull
    raises StopIteration again. There is no reset; build a new instance.

    >>> from itertools import islice
    >>> list(islice(Fibonacci(), 5))
    [0, 1, 1, 2, 3]
    >>> list(islice(Fibonacci(start_index=3), 5))
    [2, 3, 5, 8, 13]
    >>> list(Fibonacci(int_type=IntType.U8))
    [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233]
    """

    f = staticmethod(fib)

    def __init__(self, start_index: int = 0, *, int_type: IntType | str = IntType.U64):
        self.config = SequenceConfig(start_index=start_index, int_type=int_type)
        self._index = self.config.start_index
        self._ceiling = self.config.int_type.max_value
        self._current: int | None = None
        self._following: int | None = None
        self._seed()

    @classmethod
    def from_config(cls, config: SequenceConfig) -> Fibonacci:
        return cls(config.start_index, int_type=config.int_type)

    # ── state ─────────────────────────────────────────────────────────────────────
    def _seed(self) -> None:
        int_type = self.config.int_type
        if int_type.bounded and self._index > max_index(int_type)[0]:
            logger.debug("start index %d is past the %s range", self._index, int_type.value)
            return
        current, following = fib_pair(self._index)
        self._current = current
        self._following = following if self._fits(following) else None

    def _fits(self, value: int) -> bool:
        return self._ceiling is None or value <= self._ceiling

    @property
    def int_type(self) -> IntType:
        return self.config.int_type

    @property
    def index(self) -> int:
        """Index of the value the next pull would produce."""
        return self._index

    @property
    def exhausted(self) -> bool:
        return self._current is None

    # ── iterator protocol ─────────────────────────────────────────────────────────
    def __iter__(self) -> Fibonacci:
        return self

    def __next__(self) -> int:
        value = self._current
        if value is None:
            raise StopIteration

        self._index += 1
        if self._following is None:
            self._current = None
            logger.debug("sequence exhausted at index %d for %s", self._index, self.int_type.value)
        else:
            nxt = value + self._following
            self._current = self._following
            self._following = nxt if self._fits(nxt) else None
        return value

    def copy(self) -> Fibonacci:
        """Independent sequence at the same position."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Fibonacci(int_type={self.int_type.value!r}, index={self._index}, "
            f"current={self._current}, following={self._following})"
        )


__all__ = ["Fibonacci"]
