"""Swap calculations including fees."""

from . import constant_product, fees
from .curve_types import SwapResult
from .errors import ErrorCode, LuxorSwapError


def _u128(value):
    if not 0 <= value <= fees.U128_MAX:
        raise LuxorSwapError(ErrorCode.MATH_OVERFLOW)
    return value


def validate_supply(token_0_amount, token_1_amount):
    """Raise if either vault is empty."""
    if token_0_amount == 0 or token_1_amount == 0:
        raise LuxorSwapError(ErrorCode.EMPTY_SUPPLY)


def swap_base_input(
    input_amount,
    input_vault_amount,
    output_vault_amount,
    trade_fee_rate,
    creator_fee_rate,
    protocol_fee_rate,
    fund_fee_rate,
    is_creator_fee_on_input,
):
    """Take fees from an exact input and work out the output."""
    trade_fee = fees.trading_fee(input_amount, trade_fee_rate)
    if is_creator_fee_on_input:
        creator_fee = fees.creator_fee(input_amount, creator_fee_rate)
        input_less_fees = _u128(_u128(input_amount - trade_fee) - creator_fee)
    else:
        creator_fee = 0
        input_less_fees = _u128(input_amount - trade_fee)
    protocol_fee = fees.protocol_fee(trade_fee, protocol_fee_rate)
    fund_fee = fees.fund_fee(trade_fee, fund_fee_rate)

    output_swapped = constant_product.swap_base_input_without_fees(
        input_less_fees, input_vault_amount, output_vault_amount
    )

    if is_creator_fee_on_input:
        output_amount = output_swapped
    else:
        creator_fee = fees.creator_fee(output_swapped, creator_fee_rate)
        output_amount = _u128(output_swapped - creator_fee)

    return SwapResult(
        new_input_vault_amount=_u128(input_vault_amount + input_less_fees),
        new_output_vault_amount=_u128(output_vault_amount - output_swapped),
        input_amount=input_amount,
        output_amount=output_amount,
        trade_fee=trade_fee,
        protocol_fee=protocol_fee,
        fund_fee=fund_fee,
        creator_fee=creator_fee,
    )


def swap_base_output(
    output_amount,
    input_vault_amount,
    output_vault_amount,
    trade_fee_rate,
    creator_fee_rate,
    protocol_fee_rate,
    fund_fee_rate,
    is_creator_fee_on_input,
):
    """Work out the input, fees included, needed for an exact output."""
    if is_creator_fee_on_input:
        creator_fee = 0
        actual_output_amount = output_amount
    else:
        actual_output_amount = fees.calculate_pre_fee_amount(output_amount, creator_fee_rate)
        creator_fee = actual_output_amount - output_amount

    input_swapped = constant_product.swap_base_output_without_fees(
        actual_output_amount, input_vault_amount, output_vault_amount
    )

    if is_creator_fee_on_input:
        combined_rate = fees._u64(trade_fee_rate + creator_fee_rate)
        input_amount = fees.calculate_pre_fee_amount(input_swapped, combined_rate)
        total_fee = input_amount - input_swapped
        creator_fee = fees.split_creator_fee(total_fee, trade_fee_rate, creator_fee_rate)
        trade_fee = total_fee - creator_fee
    else:
        input_amount = fees.calculate_pre_fee_amount(input_swapped, trade_fee_rate)
        trade_fee = input_amount - input_swapped

    protocol_fee = fees.protocol_fee(trade_fee, protocol_fee_rate)
    fund_fee = fees.fund_fee(trade_fee, fund_fee_rate)
    return SwapResult(
        new_input_vault_amount=_u128(input_vault_amount + input_swapped),
        new_output_vault_amount=_u128(output_vault_amount - actual_output_amount),
        input_amount=input_amount,
        output_amount=output_amount,
        trade_fee=trade_fee,
        protocol_fee=protocol_fee,
        fund_fee=fund_fee,
        creator_fee=creator_fee,
    )


def lp_tokens_to_trading_tokens(
    lp_token_amount,
    lp_token_supply,
    token_0_vault_amount,
    token_1_vault_amount,
    round_direction,
):
    """Trading tokens that a number of pool tokens stand for."""
    return constant_product.lp_tokens_to_trading_tokens(
        lp_token_amount,
        lp_token_supply,
        token_0_vault_amount,
        token_1_vault_amount,
        round_direction,
    )