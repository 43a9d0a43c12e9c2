# src/xquote/app.py
"""
Application Entry Point - Controller Wiring and Line-Based Driver

This module serves as the composition root for XQuote. It builds the offering
and entry controller from settings and runs a small line-based front end:
every stdin line is one payin change, and the rendered form is printed back.

Files that USE this module:
- python -m xquote / the `xquote` console script

Files that this module USES:
- xquote.shared.logging_conf (setup_logging for logging configuration)
- xquote.config (settings for configuration management)
- xquote.domain.models (Currency, Offering)
- xquote.application.entry_controller (EntryController)
- xquote.adapters.formatting.formatter (render_view)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for streams and exit codes
from typing import TextIO  # Type hints for streams

from xquote.shared.logging_conf import setup_logging  # Configure logging with file rotation
from xquote.domain.models import Currency, Offering  # Currency pair and rate
from xquote.application.entry_controller import EntryController  # Amount entry orchestration
from xquote.adapters.formatting.formatter import render_view  # Plain-text form rendering

logger = logging.getLogger(__name__)


def build_offering(settings=None) -> Offering:
    """
    Build the offering described by settings.

    Args:
        settings: Settings instance (defaults to the global xquote.config.settings)
    """
    if settings is None:
        from xquote.config import settings
    return Offering(
        payin_currency=Currency(settings.payin_currency, settings.unit_scale),
        payout_currency=Currency(settings.payout_currency, settings.unit_scale),
        payout_units_per_payin_unit=settings.payout_units_per_payin_unit,
        fee_subunits=settings.fee_subunits,
    )


def run(controller: EntryController, stdin: TextIO, stdout: TextIO) -> int:
    """
    Feed stdin lines to the controller and print the form after each one.

    Returns:
        Number of input events processed
    """
    stdout.write(render_view(controller.view()) + "\n")
    count = 0
    for line in stdin:
        controller.handle_payin_change(line.rstrip("\r\n"))
        stdout.write("\n" + render_view(controller.view()) + "\n")
        stdout.flush()
        count += 1
    return count


def main() -> int:
    """
    Set up logging, build the controller and run the line-based driver.

    Returns:
        Process exit code
    """
    from xquote.config import settings

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=False,  # stdout carries the rendered form
    )

    controller = EntryController.from_settings(build_offering(settings), settings)
    count = run(controller, sys.stdin, sys.stdout)
    logger.info("Processed %d input events", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
