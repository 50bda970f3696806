"""
CLI layer for custom-cli.

Provides a Typer application whose commands build typed commands and hand
them to :mod:`custom_cli.dispatcher`.  This package handles only terminal
transport: argument parsing, diagnostics and exit codes.

Entry point::

    custom-cli --help
"""

from custom_cli.cli.app import app, cli_main

__all__ = ["app", "cli_main"]
