"""Constant-product swap math, fees, slippage and client configuration helpers for the Luxor swap program."""

__version__ = "0.1.0"
__all__ = ["calculator", "config", "constant_product", "curve_types", "errors", "fees", "slippage"]