"""Conversion of string values to narrow (bytes) or wide (text) strings.

Narrow strings are ``bytes`` in a multi-byte code page and wide strings are
``str``. A value already of the requested width passes through unchanged and
the conversion options are ignored. Otherwise it goes through
:mod:`vlrutil.string_conversion`, which applies the options.
"""

from __future__ import annotations

from typing import Optional, Union

from .string_conversion import (
    StringConversionOptions,
    multibyte_to_utf16,
    utf16_to_multibyte,
)

_BytesLike = (bytes, bytearray, memoryview)

StringValue = Union[str, bytes, bytearray, memoryview]


def _unhandled(value: object) -> TypeError:
    return TypeError(f"unhandled conversion type: {type(value).__name__}")


def to_std_string_a(
    value: object, options: Optional[StringConversionOptions] = None
) -> bytes:
    """Return ``value`` as a narrow string.

    Bytes-like values and objects defining ``__bytes__`` are returned as
    bytes unchanged; text is encoded with ``options``.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return utf16_to_multibyte(value, options)
    if hasattr(type(value), "__bytes__"):
        return bytes(value)
    raise _unhandled(value)


def to_std_string_w(
    value: object, options: Optional[StringConversionOptions] = None
) -> str:
    """Return ``value`` as a wide string.

    Text is returned unchanged; bytes-like values are decoded with
    ``options``.
    """
    if isinstance(value, str):
        return str(value)
    if isinstance(value, _BytesLike):
        return multibyte_to_utf16(value, options)
    raise _unhandled(value)


def to_std_string(
    value: object, options: Optional[StringConversionOptions] = None
) -> str:
    """Return ``value`` as a string of the default character width (text)."""
    return to_std_string_w(value, options)


def to_std_string_w_from_system_default_ascii(value: object) -> str:
    """Return ``value`` as text, decoding bytes in the system ANSI code page.

    Text passes through unchanged.
    """
    return to_std_string_w(value, StringConversionOptions.for_system_default_ascii_ingress())


def to_fmt_arg_string_a(
    value: object, options: Optional[StringConversionOptions] = None
) -> bytes:
    """Return ``value`` as narrow data suitable as a formatting argument.

    ``bytes`` is handed back as the very same object; anything else is
    converted as by :func:`to_std_string_a`.
    """
    if isinstance(value, bytes):
        return value
    return to_std_string_a(value, options)


def to_fmt_arg_string_w(
    value: object, options: Optional[StringConversionOptions] = None
) -> str:
    """Return ``value`` as text suitable as a formatting argument.

    ``str`` is handed back as the very same object; anything else is
    converted as by :func:`to_std_string_w`.
    """
    if isinstance(value, str) and type(value) is str:
        return value
    return to_std_string_w(value, options)