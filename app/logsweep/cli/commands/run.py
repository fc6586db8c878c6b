"""Run command: sweep every rule with interactive confirmation.

This module provides the `logsweep run` command, which evaluates each
configured rule, lists the expired files, and deletes them only when
the operator answers exactly "y".
"""

from datetime import UTC, datetime
from typing import Annotated

import typer

from logsweep.cli.display import print_report, print_rule_header, print_run_summary
from logsweep.cli.types import ConfigOption, TimezoneOption, timezone_or_exit
from logsweep.config.loader import require_rules
from logsweep.core.audit import AuditLog
from logsweep.sweep.confirm import ConfirmationGate
from logsweep.sweep.models import RunStatus
from logsweep.sweep.operator import DeleteOperator
from logsweep.sweep.runner import RuleRunner
from logsweep.utils.formatting import console, print_info

app = typer.Typer(
    name="run",
    help="Sweep expired files for every configured rule.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted without deleting."),
    ] = False,
    tz_name: TimezoneOption = None,
    jobs: Annotated[
        int,
        typer.Option(
            "--jobs",
            "-j",
            min=1,
            help="Scan this many rule directories concurrently before prompting.",
        ),
    ] = 1,
    no_audit: Annotated[
        bool,
        typer.Option("--no-audit", help="Do not record deletions in the history log."),
    ] = False,
) -> None:
    """Sweep expired files for every configured rule.

    Each rule's matching files are listed and deleted only after you
    answer exactly "y". Rules are handled one after another; a rule
    whose directory is missing or whose pattern is invalid is reported
    and skipped.

    Examples:
        logsweep run
        logsweep run --config rules.toml --dry-run
        logsweep run --timezone +08:00
    """
    if ctx.invoked_subcommand is not None:
        return

    tz = timezone_or_exit(tz_name)
    rules = require_rules(config_path)
    if not rules:
        print_info("No rules configured.")
        return

    runner = RuleRunner(
        gate=ConfirmationGate(console=console, tz=tz),
        operator=DeleteOperator(dry_run=dry_run),
        audit_log=None if (dry_run or no_audit) else AuditLog(),
        on_start=print_rule_header,
        on_report=print_report,
    )
    reports = runner.run_all(rules, now=datetime.now(UTC), jobs=jobs)
    print_run_summary(reports)

    if any(r.status == RunStatus.FAILED for r in reports):
        raise typer.Exit(code=1)
