"""Conversion between multi-byte encoded bytes and Unicode text.

Conversions honour a code page chosen in :class:`StringConversionOptions`.
A process-wide :class:`ExternalImpl` may supply custom conversion functions,
which are preferred over the built-in codecs when set.
"""

from __future__ import annotations

import codecs
import locale
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import ClassVar, Optional

# Flag values understood by the built-in conversions.
MB_ERR_INVALID_CHARS = 0x00000008
WC_ERR_INVALID_CHARS = 0x00000080


class StringConversionError(ValueError):
    """Raised when a string cannot be converted."""


class CodePage(IntEnum):
    """Well-known code page identifiers."""

    ANSI = 0
    OEM = 1
    MAC = 2
    ANSI_CURRENT_THREAD = 3
    SYMBOL = 42
    UTF7 = 65000
    UTF8 = 65001


@dataclass(frozen=True)
class StringConversionOptions:
    """Settings for a conversion; the ``with_*`` methods return a changed copy.

    ``generate_result_not_null_terminated`` is carried for callers that pass
    options through; the functions here always return unterminated results.
    """

    input_string_is_null_terminated: bool = False
    generate_result_not_null_terminated: bool = False
    code_page: int = CodePage.UTF8
    flags_multibyte_to_wide_char: int = 0
    flags_wide_char_to_multibyte: int = 0

    def with_null_terminated_string(self, value: bool = True) -> StringConversionOptions:
        return replace(self, input_string_is_null_terminated=value)

    def with_generate_result_not_null_terminated(
        self, value: bool = True
    ) -> StringConversionOptions:
        return replace(self, generate_result_not_null_terminated=value)

    def with_code_page(self, code_page: int) -> StringConversionOptions:
        return replace(self, code_page=code_page)

    def with_code_page_system_default_ascii(self) -> StringConversionOptions:
        """Use the system's default ANSI code page, which varies between systems."""
        return replace(self, code_page=CodePage.ANSI)

    def with_code_page_utf8(self) -> StringConversionOptions:
        return replace(self, code_page=CodePage.UTF8)

    def with_flags_multibyte_to_wide_char(self, flags: int) -> StringConversionOptions:
        return replace(self, flags_multibyte_to_wide_char=flags)

    def with_flags_wide_char_to_multibyte(self, flags: int) -> StringConversionOptions:
        return replace(self, flags_wide_char_to_multibyte=flags)

    @staticmethod
    def for_system_default_ascii_ingress() -> StringConversionOptions:
        """Options for reading text in the system's default ANSI code page."""
        return StringConversionOptions(code_page=CodePage.ANSI)


MultiByteToUtf16 = Callable[[bytes, StringConversionOptions], str]
Utf16ToMultiByte = Callable[[str, StringConversionOptions], bytes]


class ExternalImpl:
    """Holds optional custom conversion functions, guarded by a lock."""

    _shared: ClassVar[Optional[ExternalImpl]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._multibyte_to_utf16: Optional[MultiByteToUtf16] = None
        self._utf16_to_multibyte: Optional[Utf16ToMultiByte] = None

    @classmethod
    def shared_instance(cls) -> ExternalImpl:
        """Return the process-wide instance, creating it on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    def call_multibyte_to_utf16(
        self, data: bytes, options: StringConversionOptions
    ) -> Optional[str]:
        """Run the custom decoder; return None if none is set."""
        with self._lock:
            func = self._multibyte_to_utf16
            if func is None:
                return None
            return func(data, options)

    def call_utf16_to_multibyte(
        self, text: str, options: StringConversionOptions
    ) -> Optional[bytes]:
        """Run the custom encoder; return None if none is set."""
        with self._lock:
            func = self._utf16_to_multibyte
            if func is None:
                return None
            return func(text, options)

    def set_multibyte_to_utf16(self, func: Optional[MultiByteToUtf16]) -> None:
        """Install (or, with None, remove) the custom decoder."""
        with self._lock:
            self._multibyte_to_utf16 = func

    def set_utf16_to_multibyte(self, func: Optional[Utf16ToMultiByte]) -> None:
        """Install (or, with None, remove) the custom encoder."""
        with self._lock:
            self._utf16_to_multibyte = func


def _codec_for(code_page: int) -> str:
    if code_page in (CodePage.ANSI, CodePage.ANSI_CURRENT_THREAD):
        name = locale.getpreferredencoding(False)
    elif code_page == CodePage.OEM:
        name = "oem"
    elif code_page == CodePage.MAC:
        name = "mac-roman"
    elif code_page == CodePage.UTF7:
        name = "utf-7"
    elif code_page == CodePage.UTF8:
        name = "utf-8"
    elif code_page == CodePage.SYMBOL:
        raise StringConversionError("the SYMBOL code page has no text codec")
    else:
        name = f"cp{int(code_page)}"
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise StringConversionError(f"unsupported code page {code_page}") from exc


def multibyte_to_utf16(
    data: bytes | bytearray | memoryview,
    options: Optional[StringConversionOptions] = None,
) -> str:
    """Decode ``data`` from the options' code page into text.

    Invalid sequences are replaced with U+FFFD unless the
    ``MB_ERR_INVALID_CHARS`` flag is set, in which case they raise
    :class:`StringConversionError`.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like data, not {type(data).__name__}")
    options = options or StringConversionOptions()
    raw = bytes(data)
    if options.input_string_is_null_terminated:
        raw = raw.split(b"\0", 1)[0]
    if not raw:
        return ""

    external = ExternalImpl.shared_instance().call_multibyte_to_utf16(raw, options)
    if external is not None:
        return external

    codec = _codec_for(options.code_page)
    strict = bool(options.flags_multibyte_to_wide_char & MB_ERR_INVALID_CHARS)
    try:
        return raw.decode(codec, "strict" if strict else "replace")
    except UnicodeDecodeError as exc:
        raise StringConversionError(f"invalid {codec} input: {exc.reason}") from exc


def utf16_to_multibyte(
    text: str, options: Optional[StringConversionOptions] = None
) -> bytes:
    """Encode ``text`` into the options' code page.

    Unencodable characters are replaced unless the ``WC_ERR_INVALID_CHARS``
    flag is set, in which case they raise :class:`StringConversionError`.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected text, not {type(text).__name__}")
    options = options or StringConversionOptions()
    if options.input_string_is_null_terminated:
        text = text.split("\0", 1)[0]
    if not text:
        return b""

    external = ExternalImpl.shared_instance().call_utf16_to_multibyte(text, options)
    if external is not None:
        return external

    codec = _codec_for(options.code_page)
    strict = bool(options.flags_wide_char_to_multibyte & WC_ERR_INVALID_CHARS)
    try:
        return text.encode(codec, "strict" if strict else "replace")
    except UnicodeEncodeError as exc:
        raise StringConversionError(f"cannot encode as {codec}: {exc.reason}") from exc