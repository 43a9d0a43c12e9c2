# src/xquote/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the unit conversion core, domain models and business
rules. No dependencies on infrastructure or external systems.
"""

from xquote.domain.models import (
    BoundViolation,
    Currency,
    EntryResult,
    EntryState,
    EntryView,
    Offering,
)
from xquote.domain.errors import (
    DomainError,
    InvalidAmountError,
    InvalidRateError,
    MalformedInputError,
)
from xquote.domain.units import (
    UNIT_SCALE,
    convert_to_base_units,
    format_units,
    from_cents,
    get_exchange_rate,
    parse_units,
    render_units,
    to_rational,
)

__all__ = [
    "Currency",
    "Offering",
    "EntryState",
    "BoundViolation",
    "EntryResult",
    "EntryView",
    "DomainError",
    "MalformedInputError",
    "InvalidAmountError",
    "InvalidRateError",
    "UNIT_SCALE",
    "format_units",
    "parse_units",
    "render_units",
    "to_rational",
    "convert_to_base_units",
    "get_exchange_rate",
    "from_cents",
]
