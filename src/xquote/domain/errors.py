# src/xquote/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions that represent
business rule violations and domain errors.

Bound violations (below minimum / above maximum) are NOT exceptions: they are
reported through xquote.domain.models.BoundViolation and never stop an entry
session.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class MalformedInputError(DomainError, ValueError):
    """Raised when user-typed text is not a decimal amount (recovered as zero)."""
    pass


class InvalidAmountError(DomainError, ValueError):
    """Raised when an amount or subunit count is negative or not an integer."""
    pass


class InvalidRateError(DomainError, ValueError):
    """Raised when a rate value is invalid (e.g., negative, zero or not finite)."""
    pass
