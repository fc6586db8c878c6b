"""Preview command: list what each rule would delete.

This module provides the `logsweep preview` command. It evaluates the
rules exactly like `logsweep run` but never prompts and never deletes.
"""

import json
from datetime import UTC, datetime, tzinfo
from enum import Enum
from typing import Annotated, Any

import typer
from rich.markup import escape

from logsweep.cli.display import print_rule_header
from logsweep.cli.types import ConfigOption, TimezoneOption, timezone_or_exit
from logsweep.config.loader import require_rules
from logsweep.sweep.errors import SweepError
from logsweep.sweep.models import CandidateFile, RetentionRule
from logsweep.sweep.scanner import SweepScanner
from logsweep.utils.formatting import console, create_candidates_table, print_error, print_info
from logsweep.utils.timefmt import format_mtime

app = typer.Typer(
    name="preview",
    help="List files each rule would delete, without deleting.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options for preview."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def preview(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    tz_name: TimezoneOption = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List files each rule would delete, without deleting."""
    if ctx.invoked_subcommand is not None:
        return

    tz = timezone_or_exit(tz_name)
    rules = require_rules(config_path)
    scanner = SweepScanner()
    now = datetime.now(UTC)

    results: list[tuple[RetentionRule, list[CandidateFile] | SweepError]] = []
    for rule in rules:
        try:
            results.append((rule, scanner.evaluate(rule, now)))
        except SweepError as e:
            results.append((rule, e))

    if output_format == OutputFormat.JSON:
        _print_json(results, tz)
    else:
        _print_tables(results, tz)

    if any(isinstance(outcome, SweepError) for _, outcome in results):
        raise typer.Exit(code=1)


def _print_tables(
    results: list[tuple[RetentionRule, list[CandidateFile] | SweepError]],
    tz: tzinfo,
) -> None:
    """Print one candidate table per rule."""
    for rule, outcome in results:
        print_rule_header(rule)
        if isinstance(outcome, SweepError):
            print_error(escape(str(outcome)))
        elif not outcome:
            print_info("No matching files.")
        else:
            console.print(create_candidates_table(outcome, tz, title="Would delete"))


def _print_json(
    results: list[tuple[RetentionRule, list[CandidateFile] | SweepError]],
    tz: tzinfo,
) -> None:
    """Print all rules and candidates as JSON."""
    data: list[dict[str, Any]] = []
    for rule, outcome in results:
        item: dict[str, Any] = {
            "directory": rule.directory,
            "pattern": rule.pattern,
            "retention_days": rule.retention_days,
        }
        if isinstance(outcome, SweepError):
            item["error"] = str(outcome)
            item["candidates"] = []
        else:
            item["error"] = None
            item["candidates"] = [
                {
                    "path": c.path,
                    "modified": format_mtime(c.mtime, tz),
                    "age_days": c.age_days,
                }
                for c in outcome
            ]
        data.append(item)
    console.print_json(json.dumps(data))
