"""Rule runner: sweep, confirm, delete.

Drives each rule through the full pipeline. Rules are independent; a
rule whose directory or pattern is broken is reported as FAILED and
the next rule still runs.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from logsweep.core.audit import AuditLog, create_audit_entry
from logsweep.sweep.confirm import ConfirmationGate
from logsweep.sweep.errors import SweepError
from logsweep.sweep.models import CandidateFile, RetentionRule, RuleReport, RunStatus
from logsweep.sweep.operator import DeleteOperator
from logsweep.sweep.scanner import SweepScanner

logger = logging.getLogger(__name__)


class RuleRunner:
    """Runs retention rules end to end.

    Args:
        gate: Confirmation gate consulted before any deletion.
        operator: Deleter for confirmed paths.
        scanner: Sweep engine; a default SweepScanner if omitted.
        audit_log: Where real deletions are recorded; None disables auditing.
        on_start: Called with each rule before it is swept.
        on_report: Called with each RuleReport as soon as it is final.
    """

    def __init__(
        self,
        gate: ConfirmationGate,
        operator: DeleteOperator,
        scanner: SweepScanner | None = None,
        audit_log: AuditLog | None = None,
        on_start: Callable[[RetentionRule], None] | None = None,
        on_report: Callable[[RuleReport], None] | None = None,
    ) -> None:
        self._gate = gate
        self._operator = operator
        self._scanner = scanner if scanner is not None else SweepScanner()
        self._audit_log = audit_log
        self._on_start = on_start
        self._on_report = on_report

    def run(self, rule: RetentionRule, now: datetime | None = None) -> RuleReport:
        """Sweep one rule, ask for confirmation, and delete on approval.

        Args:
            rule: Rule to run.
            now: Reference time; captured here if omitted.

        Returns:
            RuleReport describing the outcome.
        """
        now = now if now is not None else datetime.now(UTC)
        self._start(rule)
        try:
            candidates = self._scanner.evaluate(rule, now)
        except SweepError as e:
            return self._finish(self._failed(rule, e))
        return self._finish(self._confirm_and_delete(rule, candidates))

    def run_all(
        self,
        rules: Sequence[RetentionRule],
        now: datetime | None = None,
        jobs: int = 1,
    ) -> list[RuleReport]:
        """Run rules one after another against a single reference time.

        With jobs > 1 the directory scans run concurrently first;
        confirmation and deletion remain sequential in rule order.

        Args:
            rules: Rules to run.
            now: Reference time shared by all rules.
            jobs: Number of concurrent scans.

        Returns:
            One RuleReport per rule, in rule order.
        """
        now = now if now is not None else datetime.now(UTC)

        if jobs <= 1:
            return [self.run(rule, now) for rule in rules]

        scanned = self._scanner.evaluate_all(rules, now, max_workers=jobs)
        reports: list[RuleReport] = []
        for rule, outcome in zip(rules, scanned, strict=True):
            self._start(rule)
            if isinstance(outcome, SweepError):
                reports.append(self._finish(self._failed(rule, outcome)))
            else:
                reports.append(self._finish(self._confirm_and_delete(rule, outcome)))
        return reports

    def _confirm_and_delete(
        self,
        rule: RetentionRule,
        candidates: list[CandidateFile],
    ) -> RuleReport:
        if not candidates:
            logger.debug("No candidates for %s", rule.label)
            return RuleReport(rule=rule, status=RunStatus.NO_MATCHES)

        if not self._gate.confirm(candidates):
            return RuleReport(
                rule=rule,
                status=RunStatus.CANCELLED,
                candidates=tuple(candidates),
            )

        results = self._operator.delete_all([c.path for c in candidates])
        report = RuleReport(
            rule=rule,
            status=RunStatus.DELETED,
            candidates=tuple(candidates),
            results=tuple(results),
        )
        self._audit(report)
        return report

    def _audit(self, report: RuleReport) -> None:
        if self._audit_log is None:
            return
        entry = create_audit_entry(report)
        if entry is None:
            return
        try:
            self._audit_log.record(entry)
        except (OSError, RuntimeError) as e:
            logger.warning("Could not record deletions to %s: %s", self._audit_log.path, e)

    @staticmethod
    def _failed(rule: RetentionRule, error: SweepError) -> RuleReport:
        logger.info("Rule %s failed: %s", rule.label, error)
        return RuleReport(rule=rule, status=RunStatus.FAILED, error=str(error))

    def _start(self, rule: RetentionRule) -> None:
        if self._on_start is not None:
            self._on_start(rule)

    def _finish(self, report: RuleReport) -> RuleReport:
        if self._on_report is not None:
            self._on_report(report)
        return report
