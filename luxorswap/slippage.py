"""Slippage allowances on token amounts."""

import math

from .fees import U64_MAX


def _saturating_u64(value):
    """Clamp a float to the u64 range; NaN becomes zero."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U64_MAX:
        return U64_MAX
    return int(value)


def amount_with_slippage(amount, slippage, round_up):
    """Widen an amount by a slippage fraction.

    With ``round_up`` the amount grows by the fraction and is rounded up,
    otherwise it shrinks by the fraction and is rounded down. The result is
    clamped to the range of an unsigned 64-bit integer.
    """
    if round_up:
        return _saturating_u64(math.ceil(float(amount) * (1.0 + slippage)))
    return _saturating_u64(math.floor(float(amount) * (1.0 - slippage)))