from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IntType(str, Enum):
    """Integer width the Fibonacci values must fit in.

    >>> IntType.U8.max_value
    255
    >>> IntType.I8.max_value
    127
    >>> IntType.UNBOUNDED.max_value is None
    True
    """

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    UNBOUNDED = "unbounded"

    @property
    def bits(self) -> int | None:
        if self is IntType.UNBOUNDED:
            return None
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bounded(self) -> bool:
        return self.bits is not None

    @property
    def max_value(self) -> int | None:
        bits = self.bits
        if bits is None:
            return None
        # two's complement: the sign bit costs one bit of magnitude
        return (1 << (bits - 1)) - 1 if self.signed else (1 << bits) - 1


class SequenceConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_index: int = Field(default=0, ge=0, strict=True)
    int_type: IntType = IntType.U64
