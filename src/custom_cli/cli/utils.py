"""
CLI utility helpers: command execution and result rendering.
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from custom_cli.core.errors import CliError
from custom_cli.dispatcher import dispatch
from custom_cli.logging import get_logger
from custom_cli.ops.requests import Command
from custom_cli.ops.result import OperationResult

log = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)


def report_error(code: str, message: str) -> None:
    """Print a one-line diagnostic on stderr."""
    err_console.print(f"[bold red]Error[/bold red] ({code}): {escape(message)}", soft_wrap=True)


def run_command(command: Command) -> OperationResult:
    """Dispatch ``command`` with stdout as the output sink.

    A :class:`CliError` escaping the dispatcher is reported and turned
    into its exit code.
    """
    try:
        return dispatch(command, sys.stdout)
    except CliError as e:
        report_error(e.category.value, e.message)
        raise typer.Exit(code=e.exit_code) from e


def output_result(result: OperationResult, *, report_failure: bool = True) -> None:
    """Turn a failed ``OperationResult`` into a diagnostic and exit code.

    Successful results produce no extra output.  With ``report_failure``
    off, failures are only logged and the command still exits 0.
    """
    if result.success:
        return

    err = result.error
    code = err.code if err else "ERROR"
    msg = err.message if err else "Unknown error"

    if not report_failure:
        log.debug("failure_suppressed", code=code, message=msg)
        return

    report_error(code, msg)
    raise typer.Exit(code=err.exit_code if err else 1)
