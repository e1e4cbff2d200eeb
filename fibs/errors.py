from __future__ import annotations

from .types import IntType


class FibonacciOverflowError(OverflowError):
    """F(n) does not fit the requested integer width.

    Carries the largest index that does fit (`max_n`) and its value
    (`max_value`), so callers can clamp instead of failing.
    """

    def __init__(self, int_type: IntType, n: int, max_n: int, max_value: int):
        self.int_type = int_type
        self.n = n
        self.max_n = max_n
        self.max_value = max_value
        super().__init__(
            f"F({n}) overflows {int_type.value}; largest representable is F({max_n}) = {max_value}"
        )

    def __reduce__(self):
        return (type(self), (self.int_type, self.n, self.max_n, self.max_value))
