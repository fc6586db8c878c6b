"""Shared option types and helpers for CLI commands."""

from datetime import tzinfo
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from logsweep.utils.formatting import print_error
from logsweep.utils.timefmt import resolve_timezone

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Rules file (JSON array or TOML). Defaults to ./config.json, "
        "then ~/.config/logsweep/config.json.",
    ),
]

TimezoneOption = Annotated[
    str | None,
    typer.Option(
        "--timezone",
        "--tz",
        help="Timezone for displayed dates: IANA name, UTC or +HH:MM. Defaults to local time.",
    ),
]


def timezone_or_exit(value: str | None) -> tzinfo:
    """Resolve a --timezone value, exiting with an error if it is unknown.

    Args:
        value: Raw option value.

    Returns:
        Resolved tzinfo.

    Raises:
        typer.Exit: If the timezone is not recognised.
    """
    try:
        return resolve_timezone(value)
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e
