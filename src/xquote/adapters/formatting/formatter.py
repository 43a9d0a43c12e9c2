# src/xquote/adapters/formatting/formatter.py
"""
Entry Formatter - Text Formatting and Presentation

This module turns controller output into display text: the service fee line,
min/max bound values inside validation messages, and a plain-text rendering
of the whole entry form for line-based front ends.

Files that USE this module:
- xquote.application.entry_controller (format_fee, format_bound)
- xquote.app (render_view for the demo driver)
- tests.test_formatter (unit tests)

Files that this module USES:
- xquote.domain.units (from_cents for fee amounts)
- xquote.domain.models (EntryView)
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from xquote.domain.models import EntryView
from xquote.domain.units import from_cents


def format_fee(fee_subunits: Optional[int], currency: str, decimals: int = 2) -> str:
    """
    Format the flat service fee of an offering.

    Args:
        fee_subunits: Fee in subunits, or None when the offering has no fee
        currency: Currency code shown next to the fee
        decimals: Subunit digits (2 for cents)

    Returns:
        Fee text like '2.50 USD', or '0.00 USD' when there is no fee
    """
    return from_cents(fee_subunits or 0, currency, decimals)


def format_bound(value: Union[int, float, Decimal]) -> str:
    """
    Format a min/max bound the way a user would write it.

    Integral values lose their fractional part and trailing zeros are dropped:
    1.0 -> '1', 0.50 -> '0.5', 1000 -> '1000'.
    """
    if isinstance(value, float):
        number = Decimal(repr(value))
    else:
        number = Decimal(str(value))
    return format(number.normalize(), "f")


def render_view(view: EntryView) -> str:
    """
    Render the entry form as plain text lines.

    Args:
        view: Current EntryView from the controller

    Returns:
        Multi-line string: payin, optional error, payout, rate and fee
    """
    lines = [f"{view.send_label}: {view.payin_amount or '0.00'} {view.payin_currency}"]

    if view.error_message:
        lines.append(f"  ! {view.error_message}")

    lines.append(f"{view.receive_label}: {view.payout_amount or '0.00'} {view.payout_currency}")
    lines.append(f"{view.rate_label}: {view.rate_text}")
    lines.append(f"{view.fee_label}: {view.fee_text}")

    return "\n".join(lines)
