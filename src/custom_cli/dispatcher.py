"""
Dispatcher - routes a parsed command to the operation that handles it.
"""

from __future__ import annotations

from typing import TextIO

from custom_cli.core.errors import UsageError
from custom_cli.logging import bind_context, get_logger
from custom_cli.ops.display import display_file
from custom_cli.ops.requests import Command, DisplayCommand, PrintCommand
from custom_cli.ops.result import OperationResult
from custom_cli.ops.text import print_text

log = get_logger(__name__)


def dispatch(command: Command, out: TextIO) -> OperationResult:
    """
    Execute ``command``.

    Both commands write their output straight to ``out``.

    Raises:
        UsageError: if ``command`` is not a known command type.
    """
    match command:
        case PrintCommand():
            bind_context(command="print-text")
            log.debug("dispatch")
            return print_text(command, out)
        case DisplayCommand():
            bind_context(command="display-file", path=command.path or "")
            log.debug("dispatch")
            return display_file(command, out)
        case _:
            raise UsageError(f"Unknown command: {type(command).__name__}")
