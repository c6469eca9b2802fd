import pytest

from vlrutil.range_cast import IntType, range_checked_cast


def test_pinned_limits():
    assert IntType.UINT16.max_value() == 0xFFFF
    assert IntType.INT16.max_value() == 32767
    assert IntType.UINT32.max_value() == 0xFFFFFFFF


@pytest.mark.parametrize("name", [int_type.name for int_type in IntType])
def test_limits_are_consistent(name):
    int_type = IntType[name]
    low = range_checked_cast(int_type.min_value(), int_type)
    high = range_checked_cast(int_type.max_value(), int_type)
    assert high - low + 1 == 1 << int_type.bits
    if int_type.signed:
        assert low == -(high + 1)
    else:
        assert low == 0


@pytest.mark.parametrize("int_type", list(IntType))
def test_boundaries_cast_unchanged(int_type):
    assert range_checked_cast(int_type.max_value(), int_type) == int_type.max_value()
    assert range_checked_cast(int_type.min_value(), int_type) == int_type.min_value()


@pytest.mark.parametrize("int_type", list(IntType))
def test_values_past_boundaries_raise(int_type):
    with pytest.raises(OverflowError):
        range_checked_cast(int_type.max_value() + 1, int_type)
    with pytest.raises(OverflowError):
        range_checked_cast(int_type.min_value() - 1, int_type)


def test_negative_into_unsigned_raises():
    with pytest.raises(OverflowError):
        range_checked_cast(-1, IntType.UINT64)


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        range_checked_cast(1.5, IntType.INT32)


@pytest.mark.parametrize(
    "dest, source, expected",
    [
        (IntType.UINT16, IntType.UINT8, True),
        (IntType.UINT8, IntType.UINT16, False),
        (IntType.UINT32, IntType.UINT32, True),
        (IntType.INT64, IntType.INT32, True),
        (IntType.INT32, IntType.INT64, False),
        (IntType.INT32, IntType.UINT16, True),
        (IntType.INT32, IntType.UINT32, False),
        (IntType.UINT64, IntType.INT8, False),
    ],
)
def test_always_fits(dest, source, expected):
    assert dest.always_fits(source) is expected


@pytest.mark.parametrize("dest", list(IntType))
@pytest.mark.parametrize("source", list(IntType))
def test_always_fits_means_source_limits_cast(dest, source):
    if dest.always_fits(source):
        assert range_checked_cast(source.max_value(), dest) == source.max_value()
        assert range_checked_cast(source.min_value(), dest) == source.min_value()
    else:
        with pytest.raises(OverflowError):
            range_checked_cast(source.max_value(), dest)
            range_checked_cast(source.min_value(), dest)