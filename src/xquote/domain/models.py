# src/xquote/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currencies and the offering that pairs them
- Controller states and bound violations
- Results published after each input event and the rendered view

Files that USE this module:
- xquote.adapters.formatting.formatter (EntryView)
- xquote.application.entry_controller (all models)
- xquote.app (builds an Offering from settings)
- tests.* (tests use domain models for test data)

Files that this module USES:
- xquote.domain.errors (InvalidAmountError, InvalidRateError for offering checks)
- xquote.domain.units (to_rational, UNIT_SCALE)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from enum import Enum  # Enumerations for states and violations
from typing import Optional  # Type hints for optional values

from xquote.domain.errors import InvalidAmountError, InvalidRateError  # Offering checks
from xquote.domain.units import UNIT_SCALE, RateValue, to_rational  # Exact rate parsing


@dataclass(frozen=True)
class Currency:
    """
    A currency as used by this system.

    Attributes:
        currency_code: Currency identifier (e.g., "USD")
        scale: Number of fractional digits amounts in this currency are kept at
    """
    currency_code: str
    scale: int = UNIT_SCALE

    def __str__(self) -> str:
        return self.currency_code


@dataclass(frozen=True)
class Offering:
    """
    Pairing of two currencies plus the rate and fee for one exchange direction.

    Attributes:
        payin_currency: Currency the user sends
        payout_currency: Currency the user receives
        payout_units_per_payin_unit: Payout units obtained per one payin unit (> 0)
        fee_subunits: Flat fee in fee-currency subunits (None means zero)
    """
    payin_currency: Currency
    payout_currency: Currency
    payout_units_per_payin_unit: RateValue
    fee_subunits: Optional[int] = None

    def __post_init__(self) -> None:
        if to_rational(self.payout_units_per_payin_unit) <= 0:
            raise InvalidRateError(f"Rate must be positive, got {self.payout_units_per_payin_unit!r}")
        if self.fee_subunits is not None:
            if isinstance(self.fee_subunits, bool) or not isinstance(self.fee_subunits, int):
                raise InvalidAmountError(f"Fee must be an integer subunit count, got {self.fee_subunits!r}")
            if self.fee_subunits < 0:
                raise InvalidAmountError(f"Fee cannot be negative: {self.fee_subunits}")


class EntryState(str, Enum):
    """Logical controller state within one input event."""
    IDLE = "idle"
    NORMALIZING = "normalizing"
    VALIDATED = "validated"


class BoundViolation(str, Enum):
    """Why an amount is invalid, if it is."""
    NONE = "none"
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class EntryResult:
    """
    Published after each input event.

    Attributes:
        payin_amount: Canonical payin string
        payout_amount: Canonical payout string derived from payin
        is_valid: Whether payin satisfies the min/max bounds
        violation: Which bound failed, if any
        message: Validation message for display (None when valid)
    """
    payin_amount: str
    payout_amount: str
    is_valid: bool
    violation: BoundViolation = BoundViolation.NONE
    message: Optional[str] = None


@dataclass(frozen=True)
class EntryView:
    """Everything the presentation layer renders for the entry form."""
    payin_amount: str
    payout_amount: str
    payin_currency: str
    payout_currency: str
    rate_text: str
    fee_text: str
    error_message: Optional[str]
    send_label: str
    receive_label: str
    rate_label: str
    fee_label: str
