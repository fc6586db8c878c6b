"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from logsweep.core.theme import get_theme
from logsweep.utils.timefmt import format_mtime

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import tzinfo

    from logsweep.sweep.models import CandidateFile


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_candidates_table(
    candidates: Sequence[CandidateFile],
    tz: tzinfo,
    title: str = "Files to delete",
) -> Table:
    """Create a table listing candidate files.

    Rows keep the order of the candidate sequence.

    Args:
        candidates: Files selected by a sweep.
        tz: Timezone used to render modification dates.
        title: Table title.

    Returns:
        Rich Table with Path, Modified and Age columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="candidate", overflow="fold")
    table.add_column("Modified", style="muted", no_wrap=True)
    table.add_column("Age (days)", style="info", justify="right")

    for candidate in candidates:
        table.add_row(
            escape(candidate.path),
            format_mtime(candidate.mtime, tz),
            str(candidate.age_days),
        )
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
