"""Integer casts that check the value fits the destination type."""

from __future__ import annotations

from enum import Enum


class IntType(Enum):
    """Fixed-width integer types, described by bit width and signedness."""

    INT8 = (8, True)
    UINT8 = (8, False)
    INT16 = (16, True)
    UINT16 = (16, False)
    INT32 = (32, True)
    UINT32 = (32, False)
    INT64 = (64, True)
    UINT64 = (64, False)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    def min_value(self) -> int:
        """Smallest value the type can hold."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    def max_value(self) -> int:
        """Largest value the type can hold."""
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def always_fits(self, source: IntType) -> bool:
        """Return True when every value of ``source`` fits in this type."""
        if self.signed == source.signed:
            return self.bits >= source.bits
        if self.signed and not source.signed:
            return self.bits > source.bits
        return False

    def contains(self, value: int) -> bool:
        return self.min_value() <= value <= self.max_value()


def range_checked_cast(value: int, dest: IntType) -> int:
    """Return ``value`` unchanged if it fits ``dest``; raise OverflowError if not."""
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, not {type(value).__name__}")
    if not dest.contains(value):
        raise OverflowError(
            f"{value} is out of range for {dest.name} "
            f"({dest.min_value()}..{dest.max_value()})"
        )
    return int(value)