# src/xquote/application/entry_controller.py
"""
Entry Controller - Two-Sided Amount Entry

This module orchestrates one round of user input on the exchange form: the
raw payin text is normalized, the payout amount is derived from the offering
rate, and the payin amount is checked against the min/max bounds. Results are
published as EntryResult and, for rendering, as EntryView.

Every input event runs to completion (normalize -> derive payout -> validate
-> publish) before the call returns, so payin and payout are never observed
out of step. Invalid amounts are still stored; validity only controls whether
the error message is shown.

Files that USE this module:
- xquote.app (drives the controller from stdin lines)
- tests.test_entry_controller (unit tests)

Files that this module USES:
- xquote.domain.units (format_units, convert_to_base_units, get_exchange_rate)
- xquote.domain.models (Offering, EntryResult, EntryView, BoundViolation, EntryState)
- xquote.adapters.formatting.formatter (format_fee, format_bound)
- xquote.shared.language (translate for messages and labels)
- xquote.shared.validators (validate_bound)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Optional, Union

from xquote.adapters.formatting.formatter import format_bound, format_fee
from xquote.domain.errors import MalformedInputError
from xquote.domain.models import BoundViolation, EntryResult, EntryState, EntryView, Offering
from xquote.domain.units import (
    UNIT_SCALE,
    convert_to_base_units,
    format_units,
    get_exchange_rate,
    parse_units,
    to_rational,
)
from xquote.shared.language import translate
from xquote.shared.validators import validate_bound

logger = logging.getLogger(__name__)

Bound = Union[int, float, Decimal]

# Bound value meaning "no limit"
UNBOUNDED = -1


def _amount_value(amount: str, scale: int) -> Fraction:
    try:
        units = parse_units(amount, scale)
    except MalformedInputError:
        units = 0
    return Fraction(units, 10 ** scale)


def validate_amount(
    amount: str,
    min_payin_amount: Bound = UNBOUNDED,
    max_payin_amount: Bound = UNBOUNDED,
    scale: int = UNIT_SCALE,
) -> BoundViolation:
    """
    Check an amount against min/max bounds.

    A negative bound means no bound. The minimum is checked first.

    Args:
        amount: Decimal amount string (malformed counts as zero)
        min_payin_amount: Smallest allowed amount, or negative for none
        max_payin_amount: Largest allowed amount, or negative for none
        scale: Fractional digits the amount is read at

    Returns:
        BoundViolation.NONE when valid, otherwise which bound failed
    """
    value = _amount_value(amount, scale)
    minimum = to_rational(min_payin_amount)
    maximum = to_rational(max_payin_amount)

    if minimum >= 0 and value < minimum:
        return BoundViolation.BELOW_MINIMUM
    if maximum >= 0 and value > maximum:
        return BoundViolation.ABOVE_MAXIMUM
    return BoundViolation.NONE


def validation_message(
    violation: BoundViolation,
    min_payin_amount: Bound,
    max_payin_amount: Bound,
    currency: str,
) -> Optional[str]:
    """
    Build the user-facing message for a bound violation.

    Returns:
        'Minimum order is 1 USD' style text, or None when there is no violation
    """
    if violation is BoundViolation.BELOW_MINIMUM:
        return translate("minimum_order", amount=format_bound(min_payin_amount), currency=currency)
    if violation is BoundViolation.ABOVE_MAXIMUM:
        return translate("maximum_order", amount=format_bound(max_payin_amount), currency=currency)
    return None


@dataclass
class EntrySession:
    """Current state of one entry form (non-frozen, mutated on every event)."""
    payin_amount: str = ""
    payout_amount: str = ""
    is_valid: bool = True
    violation: BoundViolation = BoundViolation.NONE
    state: EntryState = EntryState.IDLE


class EntryController:
    """Owns one EntrySession and updates it on every payin change."""

    def __init__(
        self,
        offering: Offering,
        min_payin_amount: Bound = UNBOUNDED,
        max_payin_amount: Bound = UNBOUNDED,
        rate_decimals: int = 4,
        fee_decimals: int = 2,
    ):
        """
        Initialize the controller for one offering.

        Args:
            offering: Currency pair, rate and fee for this form; each currency's
                scale sets the fractional digits its amount is normalized to
            min_payin_amount: Minimum payin amount (negative = unbounded)
            max_payin_amount: Maximum payin amount (negative = unbounded)
            rate_decimals: Fractional digits shown in the rate line
            fee_decimals: Subunit digits of the fee

        Raises:
            ValueError: If a bound is not a finite int, float or Decimal
        """
        for name, bound in (("min_payin_amount", min_payin_amount), ("max_payin_amount", max_payin_amount)):
            if not validate_bound(bound):
                raise ValueError(f"{name} must be a finite int, float or Decimal, got {bound!r}")

        self.offering = offering
        self.min_payin_amount = min_payin_amount
        self.max_payin_amount = max_payin_amount
        self.scale = offering.payin_currency.scale
        self.payout_scale = offering.payout_currency.scale
        self.rate_decimals = rate_decimals
        self.fee_decimals = fee_decimals
        self._session = EntrySession()

        logger.info(
            "Entry controller ready: %s -> %s at %s (min=%s, max=%s)",
            self.payin_currency,
            self.payout_currency,
            offering.payout_units_per_payin_unit,
            min_payin_amount,
            max_payin_amount,
        )

    @classmethod
    def from_settings(cls, offering: Offering, settings=None) -> EntryController:
        """
        Build a controller with bounds and display precision taken from Settings.

        Args:
            offering: Currency pair, rate and fee for this form
            settings: Settings instance (defaults to the global xquote.config.settings)
        """
        if settings is None:
            from xquote.config import settings
        return cls(
            offering,
            min_payin_amount=settings.min_payin_amount,
            max_payin_amount=settings.max_payin_amount,
            rate_decimals=settings.rate_display_decimals,
            fee_decimals=settings.fee_decimals,
        )

    @property
    def payin_currency(self) -> str:
        return self.offering.payin_currency.currency_code

    @property
    def payout_currency(self) -> str:
        return self.offering.payout_currency.currency_code

    @property
    def session(self) -> EntrySession:
        return self._session

    @property
    def state(self) -> EntryState:
        return self._session.state

    @property
    def payin_amount(self) -> str:
        return self._session.payin_amount

    @property
    def payout_amount(self) -> str:
        return self._session.payout_amount

    @property
    def is_valid(self) -> bool:
        return self._session.is_valid

    @property
    def message(self) -> Optional[str]:
        """Validation message for the current payin amount, or None."""
        return validation_message(
            self._session.violation,
            self.min_payin_amount,
            self.max_payin_amount,
            self.payin_currency,
        )

    def handle_payin_change(self, raw: str) -> EntryResult:
        """
        Process one change of the payin field.

        Args:
            raw: Text as typed by the user (anything; malformed counts as zero)

        Returns:
            EntryResult with canonical payin/payout strings and validity
        """
        session = self._session

        session.state = EntryState.NORMALIZING
        payin = format_units(raw, self.scale)
        session.payin_amount = payin
        session.payout_amount = convert_to_base_units(
            payin, self.offering.payout_units_per_payin_unit, self.scale, self.payout_scale
        )

        violation = validate_amount(payin, self.min_payin_amount, self.max_payin_amount, self.scale)
        session.violation = violation
        session.is_valid = violation is BoundViolation.NONE
        session.state = EntryState.VALIDATED

        logger.debug(
            "Payin %r -> %s %s, payout %s %s, violation=%s",
            raw,
            session.payin_amount,
            self.payin_currency,
            session.payout_amount,
            self.payout_currency,
            violation.value,
        )

        return EntryResult(
            payin_amount=session.payin_amount,
            payout_amount=session.payout_amount,
            is_valid=session.is_valid,
            violation=violation,
            message=self.message,
        )

    def view(self) -> EntryView:
        """
        Build everything the presentation layer renders.

        Before the first input both amounts are empty strings so the form can
        show its placeholders.
        """
        session = self._session
        payout = format_units(session.payout_amount, self.payout_scale) if session.payout_amount else ""

        return EntryView(
            payin_amount=session.payin_amount,
            payout_amount=payout,
            payin_currency=self.payin_currency,
            payout_currency=self.payout_currency,
            rate_text=get_exchange_rate(
                self.offering.payout_units_per_payin_unit,
                self.payin_currency,
                self.payout_currency,
                self.rate_decimals,
            ),
            fee_text=format_fee(self.offering.fee_subunits, self.payin_currency, self.fee_decimals),
            error_message=None if session.is_valid else self.message,
            send_label=translate("send_label"),
            receive_label=translate("receive_label"),
            rate_label=translate("rate_label"),
            fee_label=translate("fee_label"),
        )

    def reset(self) -> None:
        """Discard the current session and start over in IDLE."""
        self._session = EntrySession()
        logger.info("Entry session reset for %s -> %s", self.payin_currency, self.payout_currency)
