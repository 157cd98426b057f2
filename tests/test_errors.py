import pytest

from luxorswap.errors import ErrorCode, LuxorSwapError


def test_message_matches_source_text():
    assert ErrorCode.NOT_APPROVED.message() == "Not approved"
    assert ErrorCode.EMPTY_SUPPLY.message() == "Input token account is empty"


def test_numbers_start_at_first_custom_code():
    error = LuxorSwapError(ErrorCode.NOT_APPROVED)
    assert error.code.number == 6000


def test_numbers_are_consecutive():
    numbers = [LuxorSwapError(code).code.number for code in ErrorCode]
    assert numbers == list(range(numbers[0], numbers[0] + len(numbers)))


def test_error_carries_code_and_message():
    error = LuxorSwapError(ErrorCode.MATH_OVERFLOW)
    assert error.code is ErrorCode.MATH_OVERFLOW
    assert str(error) == "Math operation overflowed or underflowed"


def test_error_can_be_raised_and_caught():
    error = LuxorSwapError(ErrorCode.PURCHASE_DISABLED)
    assert str(error) == "Purchase functionality is currently disabled"
    with pytest.raises(LuxorSwapError) as info:
        raise error
    assert info.value is error
    assert info.value.code is ErrorCode.PURCHASE_DISABLED


def test_messages_are_unique():
    messages = [str(LuxorSwapError(code)) for code in ErrorCode]
    assert len(set(messages)) == len(messages)