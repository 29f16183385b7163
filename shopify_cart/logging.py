"""
Centralized logging configuration for shopify_cart.

The package only creates loggers; records propagate to whatever handlers
the host application configures.

Usage:
    from shopify_cart.logging import get_logger
    logger = get_logger(__name__)

    logger.debug("POST /cart/add.js")
"""

import logging
import os
from functools import cache
from typing import Optional

PACKAGE_LOGGER = "shopify_cart"


def _configure_package_logger() -> None:
    """Silence the no-handler warning and apply LOG_LEVEL if it is set."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())

    level_name = os.environ.get("LOG_LEVEL")
    if level_name:
        package_logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))


_configure_package_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape characters that could inject fake log entries (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_string_for_logging(value: Optional[str], max_length: int = 50) -> str:
    """
    Sanitize string for safe logging.

    Storefront responses and routes are remote/user-controlled, so they are
    escaped and truncated before being written to the log.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Sanitized string or "N/A" if None
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "PACKAGE_LOGGER",
    "get_logger",
    "sanitize_string_for_logging",
]
