# src/xquote/__init__.py
"""
XQuote - Two-Sided Currency Amount Entry

Numeric core and controller for an exchange form: the user types a payin
amount, and gets back the normalized amount, the payout amount at the
offering rate, the rate and fee lines, and min/max validation.
"""

__version__ = "1.0.0"
