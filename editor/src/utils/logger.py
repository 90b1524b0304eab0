"""Global logging and error handling utilities"""
import logging
import sys
import traceback
from typing import Callable, Optional

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('errors')

# Optional user-facing reporter: reporter(title, message)
_error_reporter: Optional[Callable[[str, str], None]] = None


def set_error_reporter(reporter: Optional[Callable[[str, str], None]]):
    """Set the callable used to show errors to the user (e.g. a dialog)"""
    global _error_reporter
    _error_reporter = reporter


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional user report in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to report (optional)
        title: Title for the report

    In DEBUG_MODE:
        - Logs the message and raises the exception (full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Reports the user message (or exception string) through the reporter
        - Then raises the exception
    """
    message = user_message if user_message else str(e)

    if DEBUG_MODE:
        _logger.debug(f"{title}: {message}")
        raise e

    _logger.error(f"{title}: {message}\n{traceback.format_exc()}")
    if _error_reporter:
        _error_reporter(title, message)
    else:
        _logger.error(f"ERROR REPORT (no reporter): {title} - {message}")

    # Re-raise so the caller can handle it appropriately
    raise e
