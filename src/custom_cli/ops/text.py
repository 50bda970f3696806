"""
Text printing operation.
"""

from __future__ import annotations

from typing import TextIO

from custom_cli.ops.requests import PrintCommand
from custom_cli.ops.result import OperationResult, start_timer


def print_text(command: PrintCommand, out: TextIO) -> OperationResult[str]:
    """Write the text and a newline to ``out`` byte-for-byte; no text means an empty line."""
    timer = start_timer()
    text = command.text or ""
    out.write(text + "\n")
    return OperationResult.ok(text, elapsed_ms=timer.elapsed_ms)
