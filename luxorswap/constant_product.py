"""Constant product (x * y = k) curve."""

from .curve_types import RoundDirection, TradingTokenResult
from .errors import ErrorCode, LuxorSwapError
from .fees import U128_MAX


def _u128(value):
    if not 0 <= value <= U128_MAX:
        raise LuxorSwapError(ErrorCode.MATH_OVERFLOW)
    return value


def _ceil_div(numerator, denominator):
    quotient, remainder = divmod(numerator, denominator)
    return quotient + 1 if remainder > 0 else quotient


def swap_base_input_without_fees(input_amount, input_vault_amount, output_vault_amount):
    """Output received for a given input, keeping x * y constant."""
    numerator = _u128(input_amount * output_vault_amount)
    denominator = _u128(input_vault_amount + input_amount)
    return numerator // denominator


def swap_base_output_without_fees(output_amount, input_vault_amount, output_vault_amount):
    """Input needed for a given output, rounded up, keeping x * y constant."""
    numerator = _u128(input_vault_amount * output_amount)
    denominator = _u128(output_vault_amount - output_amount)
    return _ceil_div(numerator, denominator)


def lp_tokens_to_trading_tokens(
    lp_token_amount,
    lp_token_supply,
    token_0_vault_amount,
    token_1_vault_amount,
    round_direction,
):
    """Trading tokens that a number of pool tokens stand for."""
    share_0 = _u128(lp_token_amount * token_0_vault_amount)
    share_1 = _u128(lp_token_amount * token_1_vault_amount)
    token_0_amount, remainder_0 = divmod(share_0, lp_token_supply)
    token_1_amount, remainder_1 = divmod(share_1, lp_token_supply)
    if round_direction is RoundDirection.CEILING:
        # Tiny amounts stay at zero rather than being rounded up to one token.
        if remainder_0 > 0 and token_0_amount > 0:
            token_0_amount += 1
        if remainder_1 > 0 and token_1_amount > 0:
            token_1_amount += 1
    return TradingTokenResult(token_0_amount=token_0_amount, token_1_amount=token_1_amount)