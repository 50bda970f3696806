"""
Operations layer.

Every operation takes a typed command and returns an
:class:`~custom_cli.ops.result.OperationResult`.  Terminal concerns
(printing diagnostics, exit codes) live in :mod:`custom_cli.cli`.
"""

from custom_cli.ops.display import DisplaySummary, display_file, format_line
from custom_cli.ops.requests import Command, DisplayCommand, PrintCommand
from custom_cli.ops.result import OperationError, OperationResult
from custom_cli.ops.text import print_text

__all__ = [
    "Command",
    "DisplayCommand",
    "DisplaySummary",
    "OperationError",
    "OperationResult",
    "PrintCommand",
    "display_file",
    "format_line",
    "print_text",
]
