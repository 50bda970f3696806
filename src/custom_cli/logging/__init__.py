"""
custom-cli logging - structured logging with structlog.

Usage:
    from custom_cli.logging import configure_logging, get_logger, log_step

    configure_logging()
    log = get_logger(__name__)

    with log_step("display_file", path="notes.txt"):
        ...
"""

from custom_cli.logging.config import configure_logging
from custom_cli.logging.context import (
    LogContext,
    bind_context,
    clear_context,
    get_context,
    get_logger,
    push_context,
)
from custom_cli.logging.timing import StepTimer, log_step

__all__ = [
    "configure_logging",
    "LogContext",
    "get_logger",
    "bind_context",
    "clear_context",
    "get_context",
    "push_context",
    "StepTimer",
    "log_step",
]
