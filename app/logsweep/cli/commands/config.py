"""Configuration commands.

Provides commands to validate and display the configured rules, and
to write a starter configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from logsweep.cli.types import ConfigOption
from logsweep.config.loader import ConfigError, require_rules
from logsweep.config.starter import ConfigFormat, write_starter_config
from logsweep.core.paths import get_config_dir
from logsweep.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and create rule configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(config_path: ConfigOption = None) -> None:
    """Validate the configuration and list its rules."""
    rules = require_rules(config_path)
    if not rules:
        print_info("No rules configured.")
        return

    table = Table(
        title="Retention Rules",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Name")
    table.add_column("Directory", overflow="fold")
    table.add_column("Pattern", style="info")
    table.add_column("Days", justify="right")

    for index, rule in enumerate(rules, start=1):
        table.add_row(
            str(index),
            escape(rule.name or "-"),
            escape(rule.directory),
            escape(rule.pattern),
            str(rule.retention_days),
        )

    console.print(table)


@app.command()
def init(
    path: Annotated[
        Path | None,
        typer.Option(
            "--path",
            "-p",
            help="Where to write the file. Defaults to ~/.config/logsweep/config.<format>.",
        ),
    ] = None,
    fmt: Annotated[
        ConfigFormat,
        typer.Option("--format", "-f", help="File format.", case_sensitive=False),
    ] = ConfigFormat.JSON,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file."),
    ] = False,
) -> None:
    """Write a starter configuration with example rules."""
    target = path or get_config_dir() / f"config.{fmt.value}"
    try:
        written = write_starter_config(target, fmt, force=force)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {escape(str(written))}")
    print_info("Edit the example rules, then run 'logsweep preview'.")
