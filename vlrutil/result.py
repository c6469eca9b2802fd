"""HRESULT-style result codes and the SResult wrapper."""

from __future__ import annotations

from .bits import is_bit_set
from .range_cast import IntType, range_checked_cast

SEVERITY_SUCCESS = 0
SEVERITY_FAILURE = 1

FACILITY_RPC = 1
FACILITY_CALL_SPECIFIC = 4
FACILITY_WIN32 = 7

_FAILURE_BIT = 0x80000000
_FACILITY_MASK = 0x07FF0000


def _to_hresult(value: int) -> int:
    """Reinterpret the low 32 bits of ``value`` as a signed HRESULT."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & _FAILURE_BIT else value


S_OK = 0
S_FALSE = 1
E_FAIL = _to_hresult(0x80004005)


def make_result_code(severity: int, facility: int, code: int) -> int:
    """Build a result code from severity, facility and code parts."""
    severity = range_checked_cast(severity, IntType.UINT8)
    facility = range_checked_cast(facility, IntType.UINT16)
    code = range_checked_cast(code, IntType.UINT16)
    return _to_hresult((severity << 31) | (facility << 16) | code)


def make_result_code_success(facility: int, code: int) -> int:
    return make_result_code(SEVERITY_SUCCESS, facility, code)


def make_result_code_failure(facility: int, code: int) -> int:
    return make_result_code(SEVERITY_FAILURE, facility, code)


def make_result_code_failure_call_specific(code: int) -> int:
    return make_result_code(SEVERITY_FAILURE, FACILITY_CALL_SPECIFIC, code)


def make_result_code_failure_win32(code: int) -> int:
    return make_result_code(SEVERITY_FAILURE, FACILITY_WIN32, code)


class SResult:
    """A 32-bit result code with success/failure and facility accessors."""

    UNINITIALIZED = 0x0000FFFF
    SUCCESS = S_OK
    SUCCESS_WITH_NUANCE = S_FALSE
    SUCCESS_NO_WORK_DONE = S_FALSE
    FAILURE = E_FAIL

    __slots__ = ("_code",)

    def __init__(self, hr: int = UNINITIALIZED) -> None:
        self._code = self._normalize(hr)

    @staticmethod
    def _normalize(hr: int) -> int:
        if isinstance(hr, bool) or not isinstance(hr, int):
            raise TypeError(f"result code must be an integer, not {type(hr).__name__}")
        if not -(1 << 31) <= hr <= 0xFFFFFFFF:
            raise ValueError(f"result code {hr} does not fit in 32 bits")
        return _to_hresult(hr)

    @classmethod
    def for_general_success(cls) -> SResult:
        return cls(S_OK)

    @classmethod
    def for_success_with_nuance(cls) -> SResult:
        return cls(S_FALSE)

    @classmethod
    def for_general_failure(cls) -> SResult:
        return cls(E_FAIL)

    @classmethod
    def for_hresult(cls, hr: int) -> SResult:
        return cls(hr)

    @classmethod
    def for_call_specific_result(cls, code: int) -> SResult:
        """Wrap a call-specific failure code; it must fit in 16 bits."""
        return cls(make_result_code_failure_call_specific(code))

    @classmethod
    def for_win32_error_code(cls, code: int) -> SResult:
        """Wrap a Win32 error code as a failure; even 0 is treated as an error.

        Codes wider than 16 bits keep their facility and code, with the
        failure bit set.
        """
        if not 0 <= code <= 0xFFFFFFFF:
            raise ValueError(f"error code {code} is not a 32-bit unsigned value")
        if code <= 0xFFFF:
            return cls(make_result_code_failure_win32(code))
        nominal = cls(code)
        return cls(
            make_result_code(
                SEVERITY_FAILURE,
                nominal.facility_code(),
                nominal.unqualified_result_code(),
            )
        )

    def with_hresult(self, hr: int) -> SResult:
        self._code = self._normalize(hr)
        return self

    def as_hresult(self) -> int:
        return self._code

    def as_win32_code(self) -> int:
        return self._code & 0xFFFF

    def is_success(self) -> bool:
        return not is_bit_set(self._code, _FAILURE_BIT)

    def is_failure(self) -> bool:
        return is_bit_set(self._code, _FAILURE_BIT)

    def is_set(self) -> bool:
        return self._code != self.UNINITIALIZED

    def facility_code(self) -> int:
        return (self._code & _FACILITY_MASK) >> 16

    def unqualified_result_code(self) -> int:
        return self._code & 0xFFFF

    def to_string(self) -> str:
        return f"0x{self._code & 0xFFFFFFFF:08X}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"SResult({self.to_string()})"

    def __int__(self) -> int:
        return self._code

    def __index__(self) -> int:
        return self._code

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SResult):
            return self._code == other._code
        if isinstance(other, int) and not isinstance(other, bool):
            if -(1 << 31) <= other <= 0xFFFFFFFF:
                return self._code == _to_hresult(other)
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._code)