import pytest

from vlrutil import result
from vlrutil.result import (
    FACILITY_CALL_SPECIFIC,
    FACILITY_WIN32,
    SResult,
    make_result_code,
    make_result_code_failure,
    make_result_code_failure_call_specific,
    make_result_code_failure_win32,
    make_result_code_success,
)


def test_default_is_uninitialized():
    sr = SResult()
    assert sr.is_set() is False
    assert sr == SResult.UNINITIALIZED
    assert sr.to_string() == "0x0000FFFF"


def test_general_failure_string():
    assert SResult.for_general_failure().to_string() == "0x80004005"


def test_success_constants():
    assert SResult.for_general_success() == SResult.SUCCESS
    assert SResult.for_success_with_nuance() == SResult.SUCCESS_WITH_NUANCE
    assert SResult.SUCCESS_WITH_NUANCE == SResult.SUCCESS_NO_WORK_DONE
    assert SResult.for_general_success().is_success() is True
    assert SResult.for_success_with_nuance().is_success() is True
    assert SResult.for_general_failure().is_failure() is True


@pytest.mark.parametrize("facility, code", [(0, 0), (FACILITY_WIN32, 5), (0x7FF, 0xFFFF)])
def test_make_result_code_parts_round_trip(facility, code):
    failure = SResult(make_result_code_failure(facility, code))
    success = SResult(make_result_code_success(facility, code))
    for sr in (failure, success):
        assert sr.facility_code() == facility
        assert sr.unqualified_result_code() == code
    assert failure.is_failure() is True
    assert success.is_success() is True


def test_make_result_code_severity_bit():
    failure = make_result_code(result.SEVERITY_FAILURE, 0, 0)
    success = make_result_code(result.SEVERITY_SUCCESS, 0, 0)
    assert SResult(failure).is_failure() is True
    assert SResult(success) == SResult.SUCCESS


def test_make_result_code_win32_and_call_specific():
    win32 = SResult(make_result_code_failure_win32(5))
    assert win32.facility_code() == FACILITY_WIN32
    assert win32.as_win32_code() == 5
    call = SResult(make_result_code_failure_call_specific(9))
    assert call.facility_code() == FACILITY_CALL_SPECIFIC
    assert call.unqualified_result_code() == 9


@pytest.mark.parametrize("code", [-1, 0x10000])
def test_make_result_code_rejects_out_of_range(code):
    with pytest.raises(OverflowError):
        make_result_code_failure_win32(code)
    with pytest.raises(OverflowError):
        SResult.for_call_specific_result(code)


def test_for_call_specific_result():
    sr = SResult.for_call_specific_result(42)
    assert sr.is_failure() is True
    assert sr.facility_code() == FACILITY_CALL_SPECIFIC
    assert sr.unqualified_result_code() == 42


def test_for_win32_error_code_small():
    sr = SResult.for_win32_error_code(5)
    assert sr == make_result_code_failure_win32(5)


def test_for_win32_error_code_zero_is_failure():
    sr = SResult.for_win32_error_code(0)
    assert sr.is_failure() is True
    assert sr.facility_code() == FACILITY_WIN32
    assert sr.unqualified_result_code() == 0


def test_for_win32_error_code_wide_passes_through():
    already_hresult = SResult.for_win32_error_code(0x80070005)
    assert already_hresult == make_result_code_failure_win32(5)
    no_failure_bit = SResult.for_win32_error_code(0x00070005)
    assert no_failure_bit == already_hresult


def test_for_win32_error_code_rejects_negative():
    with pytest.raises(ValueError):
        SResult.for_win32_error_code(-1)


def test_signed_and_unsigned_forms_are_equal():
    assert SResult(0x80004005) == SResult.FAILURE
    assert SResult(SResult.FAILURE) == 0x80004005
    assert SResult(0x80004005).as_hresult() == SResult.FAILURE


def test_with_hresult_mutates_and_returns_self():
    sr = SResult()
    returned = sr.with_hresult(SResult.FAILURE)
    assert returned is sr
    assert sr.is_set() is True
    assert sr.as_hresult() == SResult.FAILURE


def test_as_win32_code_masks_low_word():
    sr = SResult.for_hresult(0x80004005)
    assert sr.as_win32_code() == 0x4005
    assert sr.as_win32_code() == sr.unqualified_result_code()


def test_bool_is_rejected():
    with pytest.raises(TypeError):
        SResult(True)


def test_out_of_32_bit_range_rejected():
    with pytest.raises(ValueError):
        SResult(1 << 32)


def test_hash_consistent_with_equality():
    assert hash(SResult(0x80004005)) == hash(SResult.for_general_failure())
    assert len({SResult(0), SResult.for_general_success()}) == 1