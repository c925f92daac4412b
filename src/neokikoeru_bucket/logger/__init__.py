"""Logging utilities for neokikoeru-bucket.

This package provides:
- Colored console output on stderr
- Optional file rotation using RotatingFileHandler
- QueueHandler/QueueListener so the event loop never blocks on handlers
- Hierarchical logger naming (e.g., neokikoeru_bucket.github.client)

Architecture:
    Application → QueueHandler → Queue → QueueListener Thread
                                              ↓
                                    Console (+ File) Handlers

Usage:
    >>> from neokikoeru_bucket.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Fetching %s", url)  # Use %-style formatting

Environment Variables:
    LOG_LEVEL: Console log level (default WARNING)
    NEOKIKOERU_LOG_FILE: Optional log file path

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Handlers are ONLY attached to the root 'neokikoeru_bucket' logger
    4. Never use f-strings in log calls
"""

from neokikoeru_bucket.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from neokikoeru_bucket.logger.handlers import ConfigurationError
from neokikoeru_bucket.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
]
