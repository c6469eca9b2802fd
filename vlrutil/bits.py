"""Small predicates and arithmetic helpers for integers and strings."""

from __future__ import annotations

_DWORD_MAX = 0xFFFFFFFF
_INT64_MIN = -(1 << 63)
_UINT64_MASK = (1 << 64) - 1


def is_bit_set(value: int, bit_value: int) -> bool:
    """Return True when every bit of ``bit_value`` is set in ``value``."""
    return (value & bit_value) == bit_value


def is_single_bit_value(value: int) -> bool:
    """Return True when ``value`` has exactly one bit set (a power of two)."""
    return value > 0 and (value & (value - 1)) == 0


def is_non_zero(value: object) -> bool:
    """Return True when ``value`` is neither None nor equal to zero."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return value != 0


def is_not_blank(value: str | bytes | bytearray | memoryview | None) -> bool:
    """Return True when the string (text or bytes) has at least one character.

    ``None`` is treated as an empty string.
    """
    if value is None:
        return False
    if not isinstance(value, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"expected a string, not {type(value).__name__}")
    return len(value) > 0


def to_longlong(low: int, high: int) -> int:
    """Combine two 32-bit unsigned halves into a signed 64-bit value.

    The result wraps around as a two's complement 64-bit integer.
    """
    for name, part in (("low", low), ("high", high)):
        if not 0 <= part <= _DWORD_MAX:
            raise ValueError(f"{name} must be within 0..{_DWORD_MAX:#x}, got {part}")
    combined = (low + high * (_DWORD_MAX + 1)) & _UINT64_MASK
    if combined >= 1 << 63:
        combined -= 1 << 64
    return combined