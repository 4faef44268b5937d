import pytest

from startkit.errors import ErrorCode, StartError


@pytest.mark.parametrize(
    "code, value",
    [
        (ErrorCode.SUCCESS, 0),
        (ErrorCode.NULL_POINTER, -1),
        (ErrorCode.LIBCONFIG, -2),
        (ErrorCode.UNKNOWN_TYPE, -3),
        (ErrorCode.ITEM_NOT_FOUND, -4),
        (ErrorCode.INVALID_RANGE, -5),
        (ErrorCode.SYSTEM, -6),
        (ErrorCode.SDL, -7),
        (ErrorCode.NOT_IMPLEMENTED, -8),
        (ErrorCode.DIVIDE_ZERO, -9),
    ],
)
def test_codes_match_documented_values(code, value):
    assert int(code) == value
    assert ErrorCode(value) is code


def test_error_keeps_code_and_message():
    err = StartError(ErrorCode.SDL, "renderer lost")
    assert err.code is ErrorCode.SDL
    assert err.message == "renderer lost"
    assert str(err) == "renderer lost"


def test_error_default_message_is_description():
    err = StartError(ErrorCode.ITEM_NOT_FOUND)
    assert err.message == ErrorCode.ITEM_NOT_FOUND.description
    assert str(err) == err.message


def test_error_accepts_plain_integer_code():
    err = StartError(-5)
    assert err.code is ErrorCode.INVALID_RANGE


def test_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        StartError(42)


def test_error_can_be_raised_and_caught():
    err = StartError(ErrorCode.SYSTEM, "disk")
    assert err.code is ErrorCode.SYSTEM
    with pytest.raises(StartError) as info:
        raise err
    assert info.value is err
    assert info.value.message == "disk"