# src/xquote/domain/units.py
"""
Unit Conversion Core - Fixed-Scale Money Arithmetic

This module converts between human-typed decimal strings and integer base
units at a fixed scale, applies exchange rates, and renders amounts for
display. All arithmetic is done on integers and exact rationals; floats are
only accepted at the boundary and are read through their shortest decimal
representation (so 0.91 means exactly 91/100).

Rounding policy: every conversion truncates toward zero at the last digit of
the target scale. Amounts are never negative, so truncation equals floor.

Files that USE this module:
- xquote.domain.models (to_rational for offering rate checks)
- xquote.application.entry_controller (format_units, convert_to_base_units, etc.)
- xquote.adapters.formatting.formatter (from_cents for the fee line)
- tests.test_units (unit tests)

Files that this module USES:
- xquote.domain.errors (MalformedInputError, InvalidAmountError, InvalidRateError)
"""
from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from fractions import Fraction
from typing import Union

from xquote.domain.errors import InvalidAmountError, InvalidRateError, MalformedInputError

logger = logging.getLogger(__name__)

# Number of fractional digits amounts are represented at
UNIT_SCALE = 8

RateValue = Union[int, float, Decimal, Fraction, str]

# digits, digits., .digits or digits.digits (grouping commas removed first)
_AMOUNT_RE = re.compile(r"^(\d*)(?:\.(\d*))?$")

# Longest integer part accepted; longer text is read as malformed
MAX_INTEGER_DIGITS = 64


def _check_scale(scale: int) -> None:
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise ValueError(f"scale must be a non-negative integer, got {scale!r}")


def _grouped(units: int, decimals: int) -> str:
    """Render non-negative base units with ',' thousands grouping."""
    whole, frac = divmod(units, 10 ** decimals)
    if decimals == 0:
        return f"{whole:,}"
    return f"{whole:,}.{frac:0{decimals}d}"


def parse_units(raw: str, scale: int = UNIT_SCALE) -> int:
    """
    Parse a user-typed decimal string into integer base units.

    Surrounding whitespace and ',' grouping separators are ignored. Digits past
    the scale-th fractional digit are dropped (truncated, never rounded up).

    Args:
        raw: Text as typed by the user (may be partial, e.g. "12." or ".5")
        scale: Number of fractional digits of one base unit

    Returns:
        Non-negative integer count of base units

    Raises:
        MalformedInputError: If raw is empty or not a plain decimal number,
            or its integer part is longer than MAX_INTEGER_DIGITS
    """
    _check_scale(scale)
    if raw is None:
        raise MalformedInputError("Amount is empty")

    text = str(raw).strip().replace(",", "")
    match = _AMOUNT_RE.match(text)
    if not match or not (match.group(1) or match.group(2)):
        raise MalformedInputError(f"Not a decimal amount: {raw!r}")

    whole = (match.group(1) or "0").lstrip("0") or "0"
    if len(whole) > MAX_INTEGER_DIGITS:
        raise MalformedInputError(f"Amount has more than {MAX_INTEGER_DIGITS} integer digits")

    frac = (match.group(2) or "")[:scale].ljust(scale, "0")
    try:
        return int(whole) * 10 ** scale + int(frac or "0")
    except ValueError as e:
        raise MalformedInputError(f"Not a decimal amount: {raw!r}") from e


def render_units(units: int, scale: int = UNIT_SCALE) -> str:
    """
    Render integer base units as a canonical decimal string.

    Args:
        units: Non-negative base-unit count
        scale: Number of fractional digits to render

    Returns:
        String with exactly `scale` fractional digits (no separator when scale is 0)

    Raises:
        InvalidAmountError: If units is negative or not an integer
    """
    _check_scale(scale)
    if isinstance(units, bool) or not isinstance(units, int):
        raise InvalidAmountError(f"Base units must be an integer, got {units!r}")
    if units < 0:
        raise InvalidAmountError(f"Base units cannot be negative: {units}")

    if scale == 0:
        return str(units)
    whole, frac = divmod(units, 10 ** scale)
    return f"{whole}.{frac:0{scale}d}"


def format_units(raw: str, scale: int = UNIT_SCALE) -> str:
    """
    Normalize a user-typed amount to its canonical string at `scale`.

    Malformed or empty input is treated as zero; this function never raises
    for bad text.

    Examples:
        >>> format_units("100")
        '100.00000000'
        >>> format_units("1.123456789")
        '1.12345678'
        >>> format_units("abc")
        '0.00000000'
    """
    try:
        units = parse_units(raw, scale)
    except MalformedInputError as e:
        logger.debug("Treating malformed amount as zero: %s", e)
        units = 0
    return render_units(units, scale)


def to_rational(value: RateValue) -> Fraction:
    """
    Convert a rate or bound to an exact rational.

    Floats are read through repr(), i.e. the shortest decimal that round-trips,
    so binary representation error never leaks into the product.

    Raises:
        InvalidRateError: If value is not finite, not numeric, or unparseable
    """
    if isinstance(value, bool):
        raise InvalidRateError(f"Rate must be a number, got {value!r}")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidRateError(f"Rate must be finite, got {value!r}")
        return Fraction(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidRateError(f"Rate must be finite, got {value!r}")
        return Fraction(value)
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except (ValueError, ZeroDivisionError) as e:
            raise InvalidRateError(f"Rate is not a number: {value!r}") from e
    raise InvalidRateError(f"Unsupported rate type: {type(value).__name__}")


def _positive_rate(rate: RateValue) -> Fraction:
    value = to_rational(rate)
    if value <= 0:
        raise InvalidRateError(f"Rate must be positive, got {rate!r}")
    return value


def convert_to_base_units(
    amount: str,
    rate_per_unit: RateValue,
    scale: int = UNIT_SCALE,
    result_scale: int | None = None,
) -> str:
    """
    Apply an exchange rate to an amount.

    The amount's integer base units are multiplied by the exact rational rate
    and the product is floored back to base units of the result scale.

    Args:
        amount: Decimal amount string (malformed or empty counts as zero)
        rate_per_unit: Target units per one source unit (> 0)
        scale: Number of fractional digits the amount is read at
        result_scale: Number of fractional digits of the result (defaults to scale)

    Returns:
        Product as a canonical decimal string at `result_scale`

    Raises:
        InvalidRateError: If the rate is not a positive finite number
    """
    rate = _positive_rate(rate_per_unit)
    if result_scale is None:
        result_scale = scale
    _check_scale(result_scale)
    try:
        units = parse_units(amount, scale)
    except MalformedInputError as e:
        logger.debug("Converting malformed amount as zero: %s", e)
        units = 0
    product = units * rate * Fraction(10 ** result_scale, 10 ** scale)
    return render_units(math.floor(product), result_scale)


def get_exchange_rate(rate: RateValue, from_currency: str, to_currency: str, decimals: int = 4) -> str:
    """
    Format an exchange rate as "1 FROM = X TO".

    Args:
        rate: TO units per one FROM unit (> 0)
        from_currency: Source currency code
        to_currency: Target currency code
        decimals: Fractional digits shown for the rate (truncated)

    Returns:
        Human-readable rate line, e.g. "1 USD = 0.9100 EUR"
    """
    _check_scale(decimals)
    value = _positive_rate(rate)
    units = math.floor(value * 10 ** decimals)
    return f"1 {from_currency} = {_grouped(units, decimals)} {to_currency}"


def from_cents(subunits: int, currency: str = "USD", decimals: int = 2) -> str:
    """
    Format an integer subunit count (e.g. cents) as a currency amount.

    Args:
        subunits: Non-negative subunit count (250 -> 2.50)
        currency: Currency code appended to the figure
        decimals: Subunit digits of the currency (2 for cents)

    Returns:
        Grouped amount with currency code, e.g. "1,234.56 USD"

    Raises:
        InvalidAmountError: If subunits is negative or not an integer
    """
    _check_scale(decimals)
    if isinstance(subunits, bool) or not isinstance(subunits, int):
        raise InvalidAmountError(f"Subunits must be an integer, got {subunits!r}")
    if subunits < 0:
        raise InvalidAmountError(f"Subunits cannot be negative: {subunits}")
    return f"{_grouped(subunits, decimals)} {currency}"
