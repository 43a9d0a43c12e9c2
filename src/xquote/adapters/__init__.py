# src/xquote/adapters/__init__.py
"""
Adapters Layer - Presentation Adapters

This package contains adapters that turn domain results into output for a
front end (currently plain-text formatting).
"""
