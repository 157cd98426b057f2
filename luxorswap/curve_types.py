"""Value types shared by the curve calculations."""

from dataclasses import dataclass
from enum import Enum


def map_zero_to_none(x):
    """Return None for zero, the value itself otherwise."""
    return None if x == 0 else x


class TradeDirection(Enum):
    """Which token goes in and which comes out of a trade."""

    ZERO_FOR_ONE = "zero_for_one"
    ONE_FOR_ZERO = "one_for_zero"

    def opposite(self):
        """The reverse direction of this trade."""
        if self is TradeDirection.ZERO_FOR_ONE:
            return TradeDirection.ONE_FOR_ZERO
        return TradeDirection.ZERO_FOR_ONE


class RoundDirection(Enum):
    """How to round pool-token to trading-token conversions."""

    FLOOR = "floor"
    CEILING = "ceiling"


@dataclass(frozen=True)
class TradingTokenResult:
    """Amounts of both trading tokens."""

    token_0_amount: int
    token_1_amount: int


@dataclass(frozen=True)
class SwapResult:
    """Everything that results from swapping one token for the other."""

    new_input_vault_amount: int
    new_output_vault_amount: int
    input_amount: int
    output_amount: int
    trade_fee: int
    protocol_fee: int
    fund_fee: int
    creator_fee: int