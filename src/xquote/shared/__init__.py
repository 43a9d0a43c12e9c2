# src/xquote/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Language management (import xquote.shared.language directly; it reads settings)
- Logging configuration
"""

from xquote.shared.validators import (
    validate_bound,
    validate_currency_code,
)
from xquote.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_bound",
    "setup_logging",
]
