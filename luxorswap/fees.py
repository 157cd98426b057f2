"""Fee calculations on token amounts."""

from .errors import ErrorCode, LuxorSwapError

FEE_RATE_DENOMINATOR_VALUE = 1_000_000
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


def _u128(value):
    if not 0 <= value <= U128_MAX:
        raise LuxorSwapError(ErrorCode.MATH_OVERFLOW)
    return value


def _u64(value):
    if not 0 <= value <= U64_MAX:
        raise LuxorSwapError(ErrorCode.MATH_OVERFLOW)
    return value


def ceil_div(token_amount, fee_numerator, fee_denominator):
    """Return token_amount * fee_numerator / fee_denominator, rounded up."""
    product = _u128(token_amount * fee_numerator)
    return _u128(_u128(product + fee_denominator) - 1) // fee_denominator


def floor_div(token_amount, fee_numerator, fee_denominator):
    """Return token_amount * fee_numerator / fee_denominator, rounded down."""
    return _u128(token_amount * fee_numerator) // fee_denominator


def trading_fee(amount, trade_fee_rate):
    """Trading fee on an amount, rounded up."""
    return ceil_div(amount, trade_fee_rate, FEE_RATE_DENOMINATOR_VALUE)


def protocol_fee(amount, protocol_fee_rate):
    """Protocol share of a fee, rounded down."""
    return floor_div(amount, protocol_fee_rate, FEE_RATE_DENOMINATOR_VALUE)


def fund_fee(amount, fund_fee_rate):
    """Fund share of a fee, rounded down."""
    return floor_div(amount, fund_fee_rate, FEE_RATE_DENOMINATOR_VALUE)


def creator_fee(amount, creator_fee_rate):
    """Creator fee on an amount, rounded up."""
    return ceil_div(amount, creator_fee_rate, FEE_RATE_DENOMINATOR_VALUE)


def split_creator_fee(total_fee, trade_fee_rate, creator_fee_rate):
    """Creator's part of a combined trade-and-creator fee, rounded down."""
    combined_rate = _u64(trade_fee_rate + creator_fee_rate)
    return floor_div(total_fee, creator_fee_rate, combined_rate)


def calculate_pre_fee_amount(post_fee_amount, trade_fee_rate):
    """Smallest amount that, once the fee is taken, leaves post_fee_amount."""
    if trade_fee_rate == 0:
        return post_fee_amount
    numerator = _u128(post_fee_amount * FEE_RATE_DENOMINATOR_VALUE)
    denominator = _u128(FEE_RATE_DENOMINATOR_VALUE - trade_fee_rate)
    return _u128(_u128(numerator + denominator) - 1) // denominator