"""CRC-32 (IEEE 802.3) checksums of byte and text strings."""

from __future__ import annotations

import zlib


def crc32(data: str | bytes | bytearray | memoryview) -> int:
    """Return the CRC-32 of ``data`` as an unsigned 32-bit integer.

    Bytes are checksummed as they are. For text, each UTF-16 code unit
    contributes only its low byte to the checksum.
    """
    if isinstance(data, str):
        units = data.encode("utf-16-le", "surrogatepass")[::2]
        return zlib.crc32(units) & 0xFFFFFFFF
    if isinstance(data, (bytes, bytearray, memoryview)):
        return zlib.crc32(data) & 0xFFFFFFFF
    raise TypeError(f"expected str or bytes-like data, not {type(data).__name__}")