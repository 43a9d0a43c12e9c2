# src/xquote/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the entry controller that orchestrates the unit
conversion core for one exchange form. No I/O.
"""

from xquote.application.entry_controller import (
    EntryController,
    EntrySession,
    validate_amount,
    validation_message,
)

__all__ = [
    "EntryController",
    "EntrySession",
    "validate_amount",
    "validation_message",
]
