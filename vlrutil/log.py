"""Message logging through replaceable, process-wide callbacks."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar, Optional

from .convert import to_std_string
from .result import SResult

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_LOGGER = logging.getLogger("vlrutil")

_PATH_SEPARATORS = "/\\"


class LogicalLevel(IntEnum):
    """Severity of a log message, independent of any logging backend."""

    UNKNOWN = 0
    DEBUG = 1
    TRACE = 2
    VERBOSE = 3
    INFO = 4
    WARNING = 5
    ERROR = 6
    CRITICAL = 7


@dataclass(frozen=True)
class CodeContext:
    """Where in the code a message comes from."""

    file: str = ""
    line_number: int = 0
    function: str = ""

    def file_name_only(self) -> str:
        """Return the file name with any directory part removed."""
        index = max(self.file.rfind(sep) for sep in _PATH_SEPARATORS)
        if index < 0:
            return self.file
        return self.file[index + 1 :]

    def code_position_indicator(self) -> str:
        """Return ``name:line``, or ``[unknown]`` when no file is known."""
        if not self.file:
            return "[unknown]"
        return f"{self.file_name_only()}:{self.line_number}"


@dataclass(frozen=True)
class MessageContext:
    """The code context and logical level of a message."""

    code_context: CodeContext = field(default_factory=CodeContext)
    logical_level: LogicalLevel = LogicalLevel.UNKNOWN


CheckCouldMessageBeLogged = Callable[[MessageContext], Any]
LogMessage = Callable[[MessageContext, str], Any]


@dataclass
class Callbacks:
    """The functions used to filter and emit log messages."""

    check_could_message_be_logged: Optional[CheckCouldMessageBeLogged] = None
    log_message: Optional[LogMessage] = None

    _shared: ClassVar[Optional[Callbacks]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def shared_instance(cls) -> Callbacks:
        """Return the process-wide callbacks, creating them on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared


_LEVEL_MAP = {
    LogicalLevel.DEBUG: logging.DEBUG,
    LogicalLevel.TRACE: TRACE_LEVEL,
    LogicalLevel.VERBOSE: TRACE_LEVEL,
    LogicalLevel.INFO: logging.INFO,
    LogicalLevel.WARNING: logging.WARNING,
    LogicalLevel.ERROR: logging.ERROR,
    LogicalLevel.CRITICAL: logging.CRITICAL,
}


def backend_level(context: MessageContext) -> int:
    """Map the context's logical level to a standard logging level."""
    return _LEVEL_MAP.get(context.logical_level, logging.INFO)


def default_check_could_message_be_logged(context: MessageContext) -> SResult:
    """Allow every message."""
    return SResult.for_general_success()


def default_log_message(context: MessageContext, message: str) -> SResult:
    """Emit ``message`` on the ``vlrutil`` logger at the mapped level."""
    _LOGGER.log(backend_level(context), "%s", message)
    return SResult.for_general_success()


_bootstrap_lock = threading.Lock()
_bootstrapped = False


def bootstrap_callbacks_once() -> None:
    """Install the default callbacks the first time this is called."""
    global _bootstrapped
    with _bootstrap_lock:
        if _bootstrapped:
            return
        _bootstrapped = True
    callbacks = Callbacks.shared_instance()
    callbacks.check_could_message_be_logged = default_check_could_message_be_logged
    callbacks.log_message = default_log_message


def _emit(context: MessageContext, build_message: Callable[[], object]) -> Optional[str]:
    try:
        bootstrap_callbacks_once()
        callbacks = Callbacks.shared_instance()
        if callbacks.check_could_message_be_logged(context) != SResult.SUCCESS:
            return None
        message = to_std_string(build_message())
        callbacks.log_message(context, message)
        return message
    except Exception:
        # Logging never raises into the caller.
        return None


def log_message(context: MessageContext, message: object) -> Optional[str]:
    """Log ``message``; return the text logged, or None if it was filtered out."""
    return _emit(context, lambda: message)


def log_message_pf(context: MessageContext, format_string: str, *args: Any) -> Optional[str]:
    """Log a printf-style formatted message; formatting happens only if allowed."""
    return _emit(context, lambda: format_string % args)


def log_message_fmt(
    context: MessageContext, format_string: str, *args: Any, **kwargs: Any
) -> Optional[str]:
    """Log a ``str.format``-style message; formatting happens only if allowed."""
    return _emit(context, lambda: format_string.format(*args, **kwargs))