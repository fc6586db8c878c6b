"""History command for viewing past deletions.

This module provides the `logsweep history` command for viewing the
audit log of confirmed sweeps.
"""

import json
from datetime import datetime
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from logsweep.core.audit import AuditEntry, AuditLog
from logsweep.utils.formatting import console, print_info

app = typer.Typer(
    name="history",
    help="View the log of past deletions.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def history(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of entries to show.",
        ),
    ] = 20,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show past deletions, newest first.

    Examples:
        logsweep history            # Show last 20 entries
        logsweep history -n 50      # Show last 50 entries
        logsweep history --json     # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    entries = AuditLog().read(limit=limit)
    if not entries:
        print_info("No history entries found.")
        return

    if json_output:
        console.print_json(json.dumps([entry.to_dict() for entry in entries]))
    else:
        _print_table(entries)


def _print_table(entries: list[AuditEntry]) -> None:
    """Print history as a Rich table."""
    table = Table(
        title="Deletion History",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("ID", style="dim")
    table.add_column("Timestamp", style="info")
    table.add_column("Directory", overflow="fold")
    table.add_column("Pattern", style="muted")
    table.add_column("Deleted", justify="right", style="deleted")
    table.add_column("Failed", justify="right", style="error")

    for entry in entries:
        table.add_row(
            entry.id[:8],
            _format_timestamp(entry.timestamp),
            escape(entry.directory),
            escape(entry.pattern),
            str(len(entry.deleted)),
            str(len(entry.failed)),
        )

    console.print(table)


def _format_timestamp(iso_timestamp: str) -> str:
    """Format an ISO timestamp as YYYY-MM-DD HH:MM."""
    dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    return dt.strftime("%Y-%m-%d %H:%M")
