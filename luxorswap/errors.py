"""Error codes raised by the swap program's calculations."""

from enum import Enum

_FIRST_ERROR_NUMBER = 6000


class ErrorCode(Enum):
    """Every failure the swap program can report, each with its message."""

    NOT_APPROVED = "Not approved"
    INVALID_OWNER = "Input account owner is not the program address"
    EMPTY_SUPPLY = "Input token account is empty"
    INVALID_INPUT = "Invalid input token for swap"
    INCORRECT_LP_MINT = "Address of the provided LP token mint is incorrect"
    EXCEEDED_SLIPPAGE = "Exceeds desired slippage limit"
    ZERO_TRADING_TOKENS = "Given pool token amount results in zero trading tokens"
    NOT_SUPPORT_MINT = "Token-2022 mint extension is not supported"
    INVALID_VAULT = "Invalid vault account"
    INIT_LP_AMOUNT_TOO_LESS = (
        "Initial LP amount is too small (minimum 100 LP tokens required)"
    )
    INVALID_TIMESTAMP = "Invalid timestamp conversion"
    CLOCK_UNAVAILABLE = "Clock sysvar is unavailable"
    OVERFLOW = "Arithmetic overflow occurred"
    LOCK_IS_PERMANENT = "This LP is locked permanently and cannot be unlocked"
    LOCK_ALREADY_UNLOCKED = "This LP lock has already been unlocked"
    UNLOCK_TIME_NOT_REACHED = "Unlock time has not yet been reached"
    ZERO_LP_TOKENS_TO_BURN = "Calculated LP tokens to burn is zero"
    LOCK_DURATION_TOO_LONG = (
        "The provided lock duration exceeds the maximum allowed limit"
    )
    UNDERFLOW_ERROR = "Underflow occurred"
    ZERO_LIQUIDITY = "Zero liquidity in the pool"
    INVALID_LUXOR_MINT = "Invalid Luxor mint account"
    INVALID_STAKE_PROGRAM = "Invalid Stake program account"
    INVALID_STAKE_PDA_OWNER = "Stake PDA account already exists"
    INSUFFICIENT_RENT = "Stake PDA account has insufficient rent"
    MATH_OVERFLOW = "Math operation overflowed or underflowed"
    INSUFFICIENT_VAULT = "Insufficient vault balance for the operation"
    INVALID_FEE_MODEL = "Invalid fee model specified"
    NO_REWARDS_TO_CLAIM = "No rewards available to claim"
    MISSING_REMAINING_ACCOUNT = "Missing remaining account"
    INVALID_PARAM = "Invalid parameter provided"
    PURCHASE_DISABLED = "Purchase functionality is currently disabled"
    BUYBACK_ALREADY_REQUESTED = "Buyback has already been requested"
    NO_BUYBACK_REQUESTED = "No buyback has been requested"
    INVALID_STAKE_ACCOUNT_DATA = "Invalid stake account data"

    def message(self):
        """Human-readable description of the error."""
        return self.value

    @property
    def number(self):
        """Numeric error code, counted from the first custom code."""
        return _FIRST_ERROR_NUMBER + list(type(self)).index(self)


class LuxorSwapError(Exception):
    """Raised when an operation fails with one of the program's error codes."""

    def __init__(self, code):
        super().__init__(code.message())
        self.code = code