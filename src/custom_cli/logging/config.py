"""
structlog setup for custom-cli.

Log records go to stderr so stdout carries only command output.  Level
and format default to ``CUSTOM_CLI_LOG_LEVEL`` / ``CUSTOM_CLI_LOG_FORMAT``.

Usage:
    from custom_cli.logging import configure_logging
    configure_logging(level="DEBUG", format="json")
"""

import logging
import sys
from typing import Literal

import structlog
from structlog.types import Processor

from custom_cli.logging.context import add_context_processor

_configured = False


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False, exception_formatter=structlog.dev.plain_traceback)


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
    format: Literal["json", "console"] | None = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root handler.

    Only the first call takes effect unless ``force`` is set; the CLI
    callback forces it so ``--log-level`` always applies.
    """
    global _configured

    if _configured and not force:
        return

    if level is None or format is None:
        from custom_cli.core.settings import get_settings

        settings = get_settings()
        level = level or settings.log_level
        format = format or settings.log_format

    numeric_level = getattr(logging, level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_context_processor,
            structlog.processors.format_exc_info,
            structlog.processors.StackInfoRenderer(),
            _renderer(format.lower()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)
    logging.getLogger("custom_cli").setLevel(numeric_level)

    _configured = True
