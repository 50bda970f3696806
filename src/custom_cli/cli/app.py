"""
Root Typer application for the custom-cli command line.

Commands::

    custom-cli print-text [TEXT]
    custom-cli display-file [PATH] [-n] [-b] [-s] [-T]
    custom-cli config show
"""

from __future__ import annotations

from enum import Enum

import typer
from rich.markup import escape
from typer import Typer

from custom_cli.cli.utils import err_console, output_result, run_command
from custom_cli.core.errors import ConfigError
from custom_cli.core.settings import NumberingStyle, get_settings
from custom_cli.logging import clear_context, configure_logging
from custom_cli.ops.requests import DisplayCommand, PrintCommand

app = Typer(
    name="custom-cli",
    help="Simple command line commands.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        from custom_cli import __version__

        try:
            v = pkg_version("custom-cli")
        except PackageNotFoundError:
            v = __version__
        typer.echo(f"custom-cli {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: LogLevel | None = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level (default: CUSTOM_CLI_LOG_LEVEL or WARNING).",
    ),
) -> None:
    """Simple command line commands: print text and display files."""
    try:
        settings = get_settings()
    except ConfigError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=e.exit_code) from e

    level = log_level.value if log_level else settings.log_level
    configure_logging(level=level, format=settings.log_format, force=True)
    clear_context()


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("print-text")
def print_text(
    text: str | None = typer.Argument(None, help="Text string to display"),
) -> None:
    """Display a line of text passed as an argument."""
    result = run_command(PrintCommand(text=text))
    output_result(result)


@app.command("display-file")
def display_file(
    path: str | None = typer.Argument(None, help="File path ('-' reads standard input)"),
    number_all: bool = typer.Option(False, "--number-all", "--number", "-n", help="Number all output lines"),
    number_nonblank: bool = typer.Option(False, "--number-nonblank", "-b", help="Number non-blank output lines"),
    show_ends: bool = typer.Option(False, "--show-ends", "-s", "-e", help="Display $ at end of each line"),
    show_tabs: bool = typer.Option(False, "--show-tabs", "-T", help="Display TAB characters as ^I"),
    numbering: NumberingStyle | None = typer.Option(
        None,
        "--numbering",
        help="Line number origin (default: CUSTOM_CLI_NUMBERING or one-based).",
    ),
) -> None:
    """Print a file on the standard output, optionally decorated."""
    settings = get_settings()
    command = DisplayCommand(
        path=path,
        number_all=number_all,
        number_nonblank=number_nonblank,
        show_ends=show_ends,
        show_tabs=show_tabs,
        numbering=numbering or settings.numbering,
    )
    result = run_command(command)
    open_failed = not result.success and result.error is not None and result.error.code == "FILE_OPEN_FAILED"
    output_result(result, report_failure=settings.report_open_errors or not open_failed)


# Original command names, kept as hidden aliases
app.command("echo", hidden=True)(print_text)
app.command("cat", hidden=True)(display_file)


# ── Sub-command groups ───────────────────────────────────────────────────

from custom_cli.cli.config import app as config_app  # noqa: E402

app.add_typer(config_app, name="config", help="Configuration inspection.")


def cli_main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    cli_main()
