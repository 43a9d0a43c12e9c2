# src/xquote/adapters/formatting/__init__.py
"""
Formatting Adapters - Display Formatting

This package contains text formatting for the entry form output.
"""

from xquote.adapters.formatting.formatter import (
    format_bound,
    format_fee,
    render_view,
)

__all__ = [
    "format_fee",
    "format_bound",
    "render_view",
]
