# src/xquote/shared/validators.py
"""
Input Validation Utilities - Configuration and Data Validation

This module provides validation functions for configuration values such as
currency codes and min/max amount bounds.

Files that USE this module:
- xquote.config.settings (uses validation functions in Settings field validators)
- xquote.application.entry_controller (validate_bound for controller bounds)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from decimal import Decimal
from typing import Optional


def validate_currency_code(code: str) -> bool:
    """
    Validate currency code format.

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False

    # ISO codes (USD) and token tickers (USDC, BTC): upper case, 2-10 chars
    return bool(re.match(r'^[A-Z][A-Z0-9]{1,9}$', code))


def validate_bound(value: Optional[float]) -> bool:
    """
    Validate a min/max amount bound.

    Negative values are allowed: they mean "no bound". Only int, float and
    Decimal are accepted, since those are what bound messages can print.

    Args:
        value: Bound value to validate

    Returns:
        True if valid, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)

