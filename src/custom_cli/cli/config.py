"""
CLI: ``custom-cli config``: configuration inspection.
"""

from __future__ import annotations

import typer

from custom_cli.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("show")
def show_config(
    format: str = typer.Option("table", "--format", "-f", help="Output format: table, json, env"),
) -> None:
    """Show the effective configuration."""
    from custom_cli.core.settings import get_settings

    settings = get_settings()

    if format == "json":
        console.print_json(settings.model_dump_json())
        return

    values = settings.model_dump(mode="json")

    if format == "env":
        for key, value in sorted(values.items()):
            console.print(f"CUSTOM_CLI_{key.upper()}={value}", markup=False, highlight=False)
        return

    if format != "table":
        raise typer.BadParameter(f"Unknown format: {format}", param_hint="--format")

    from rich.table import Table

    table = Table(title="Settings")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, str(value))
    console.print(table)
