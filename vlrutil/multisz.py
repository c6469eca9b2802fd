"""Conversion between string lists and double-null-terminated string blocks."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_ENCODING = "utf-16-le"


def multi_sz_to_list(
    data: bytes | bytearray | memoryview, encoding: str = DEFAULT_ENCODING
) -> list[str]:
    """Split a block of null-terminated strings, ending at an empty string.

    Anything after the terminating empty string is ignored. Raises
    ValueError if the block ends before that terminator.
    """
    text = bytes(data).decode(encoding)
    *terminated, _ = text.split("\0")
    values: list[str] = []
    for part in terminated:
        if not part:
            return values
        values.append(part)
    raise ValueError("string block is not terminated by an empty string")


def list_to_multi_sz(values: Iterable[str], encoding: str = DEFAULT_ENCODING) -> bytes:
    """Join strings into a block, each null-terminated, plus a final null."""
    text = "".join(f"{value}\0" for value in values) + "\0"
    return text.encode(encoding)