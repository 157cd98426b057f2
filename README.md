# luxorswap

Pure-Python arithmetic for the Luxor swap program: the constant-product
curve, the fee schedule, and helpers for reading a client's configuration
and key files.

All amounts are plain Python integers held to the unsigned 128-bit range the
program works in. When an intermediate or final value would leave that range
(overflow or a negative result), the function raises `LuxorSwapError` with
`ErrorCode.MATH_OVERFLOW`. Dividing by a zero vault or zero pool-token supply
raises `ZeroDivisionError`.

## Installation

```
pip install luxorswap
```

The package has no runtime dependencies. For the test suite:

```
pip install "luxorswap[test]"
```

## Fees (`luxorswap.fees`)

Rates are expressed in millionths (`FEE_RATE_DENOMINATOR_VALUE = 1_000_000`
is 100%).

```python
from luxorswap.fees import trading_fee, protocol_fee, calculate_pre_fee_amount

fee = trading_fee(1_000_000, 2_500)               # 2500, rounded up
share = protocol_fee(fee, 120_000)                # 300, rounded down
gross = calculate_pre_fee_amount(997_500, 2_500)  # 1_000_000
```

Also available: `fund_fee` and `creator_fee`, `split_creator_fee` (the
creator's part of a combined trade-and-creator fee), and the rounding helpers
`ceil_div` and `floor_div`.

## Swapping (`luxorswap.calculator`)

```python
from luxorswap.calculator import swap_base_input, swap_base_output

result = swap_base_input(
    input_amount=10_000,
    input_vault_amount=1_000_000,
    output_vault_amount=2_000_000,
    trade_fee_rate=2_500,
    creator_fee_rate=0,
    protocol_fee_rate=120_000,
    fund_fee_rate=40_000,
    is_creator_fee_on_input=True,
)
print(result.output_amount, result.trade_fee, result.new_input_vault_amount)
```

Both functions return a frozen `SwapResult` (from `luxorswap.curve_types`)
with the new vault amounts, the input and output amounts, and the trade,
protocol, fund and creator fees. `swap_base_output` solves the same swap for
a desired output amount. With `is_creator_fee_on_input` false, the creator
fee is taken from the output side instead of the input side.

`validate_supply(token_0_amount, token_1_amount)` raises a `LuxorSwapError`
carrying `ErrorCode.EMPTY_SUPPLY` when either vault is empty.

The fee-free curve is in `luxorswap.constant_product`:
`swap_base_input_without_fees`, `swap_base_output_without_fees` (rounded up)
and `lp_tokens_to_trading_tokens`.

## LP tokens

```python
from luxorswap.calculator import lp_tokens_to_trading_tokens
from luxorswap.curve_types import RoundDirection

amounts = lp_tokens_to_trading_tokens(100, 1_000, 5_000, 7_000, RoundDirection.CEILING)
print(amounts.token_0_amount, amounts.token_1_amount)  # 500 700
```

With `RoundDirection.CEILING`, an amount that rounds down to zero stays zero
instead of being rounded up to one token.

## Other types (`luxorswap.curve_types`)

- `TradeDirection.ZERO_FOR_ONE` / `ONE_FOR_ZERO`, with `opposite()`.
- `RoundDirection.FLOOR` / `CEILING`.
- `TradingTokenResult` and `SwapResult`, frozen dataclasses.
- `map_zero_to_none(x)` returns `None` for zero and `x` otherwise.

## Client helpers

- `luxorswap.slippage.amount_with_slippage(amount, slippage, round_up)` grows
  the amount by the slippage fraction and rounds up, or shrinks it and rounds
  down; the result is clamped to the unsigned 64-bit range.
- `luxorswap.config.load_config(path)` reads the `[Global]` section (name
  matched without regard to case) of an INI file into a frozen `ClientConfig`.
  It requires `http_url`, `ws_url`, `payer_path`, `admin_path` and
  `luxor_swap_program`, and raises `ValueError` when the section or a key is
  missing or empty. The program address is stored as its 32 decoded bytes.
- `luxorswap.config.decode_pubkey(text)` decodes a base58 public key into 32
  bytes, raising `ValueError` on bad characters or length.
- `luxorswap.config.read_keypair_file(path)` loads a key file holding a JSON
  array of 64 integers and returns them as bytes; any failure is raised as
  `ValueError("failed to read keypair from <path>")`.

## Errors (`luxorswap.errors`)

Every failure the program can report is an `ErrorCode` member. Each member
has a human-readable `message()` and a `number` counted from 6000 in
declaration order. Errors are raised as `LuxorSwapError`, whose `code`
attribute holds the `ErrorCode`.

## What this package does not do

It only computes. It does not build, sign or send transactions, talk to an
RPC node, derive program addresses or read on-chain account state, and it
has no command-line interface. Configuration and key files are read and
checked, but nothing is done with them beyond returning their contents.