"""Shared Rich display functions for sweep reports.

Provides table builders and summary printers used by the run and
preview commands.
"""

from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from logsweep.sweep.models import DeleteResult, RetentionRule, RuleReport, RunStatus
from logsweep.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def print_rule_header(rule: RetentionRule) -> None:
    """Print the heading shown before a rule is swept."""
    console.rule(f"[rule.title]{escape(rule.label)}[/]")
    console.print(
        f"[muted]directory:[/] {escape(rule.directory)}  "
        f"[muted]pattern:[/] {escape(rule.pattern)}  "
        f"[muted]older than:[/] {rule.retention_days} day(s)",
        highlight=False,
    )


def create_results_table(results: Sequence[DeleteResult]) -> Table:
    """Create a Rich table displaying deletion results.

    Args:
        results: Per-path deletion results.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", overflow="fold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="muted")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would delete"
        elif r.success:
            status = "[deleted]deleted[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(escape(r.path), status, escape(detail))

    return table


def print_report(report: RuleReport) -> None:
    """Print the outcome of one rule.

    Args:
        report: Final report for the rule.
    """
    if report.status == RunStatus.FAILED:
        print_error(f"Rule '{escape(report.rule.label)}' skipped: {escape(report.error or '')}")
        return

    if report.status == RunStatus.NO_MATCHES:
        print_info("No matching files.")
        return

    if report.status == RunStatus.CANCELLED:
        console.print(f"[kept]Cancelled. {len(report.candidates)} file(s) kept.[/]")
        return

    console.print(create_results_table(report.results))

    dry_count = sum(1 for r in report.results if r.dry_run)
    fail_count = report.failed_deletions
    success_count = len(report.results) - fail_count

    if dry_count:
        print_info(f"Dry-run: {dry_count} file(s) would be deleted.")
    elif fail_count:
        print_warning(f"{success_count} deleted, {fail_count} failed")
    else:
        print_success(f"Deleted {success_count} file(s).")


def print_run_summary(reports: Sequence[RuleReport]) -> None:
    """Print a one-line summary across all rules."""
    counts = {status: 0 for status in RunStatus}
    for report in reports:
        counts[report.status] += 1

    console.print(
        f"\n[muted]{len(reports)} rule(s): "
        f"{counts[RunStatus.DELETED]} swept, "
        f"{counts[RunStatus.CANCELLED]} cancelled, "
        f"{counts[RunStatus.NO_MATCHES]} without matches, "
        f"{counts[RunStatus.FAILED]} failed[/]"
    )
