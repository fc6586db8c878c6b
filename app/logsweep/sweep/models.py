"""Sweep domain models.

This module defines the data structures flowing through one sweep:
the retention rule being evaluated, the candidate files it selects,
the per-path deletion results, and the report for a whole rule.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

SECONDS_PER_DAY = 86400


@dataclass(frozen=True, slots=True)
class RetentionRule:
    """One configured retention policy.

    Attributes:
        directory: Directory whose immediate entries are swept.
        pattern: Regular expression searched in each file's full path.
        retention_days: Minimum age in whole days for a file to qualify.
            Zero selects every matching file regardless of age.
        name: Optional display label; defaults to the directory.
    """

    directory: str
    pattern: str
    retention_days: int
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate rule data after initialization."""
        if not self.directory:
            msg = "Rule directory cannot be empty"
            raise ValueError(msg)
        if not self.pattern:
            msg = "Rule pattern cannot be empty"
            raise ValueError(msg)
        if self.retention_days < 0:
            msg = f"Retention days must be non-negative, got {self.retention_days}"
            raise ValueError(msg)

    @property
    def label(self) -> str:
        """Human-readable rule label."""
        return self.name or self.directory


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """A file selected by a rule, pending confirmation.

    Attributes:
        path: Full path of the file.
        mtime: Last modification time (timezone-aware, UTC).
        age_days: Whole days elapsed since mtime at sweep time.
    """

    path: str
    mtime: datetime
    age_days: int


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Result of a single file deletion.

    Attributes:
        path: Path that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


class RunStatus(str, Enum):
    """Outcome of running one rule end to end.

    Attributes:
        NO_MATCHES: The sweep found no candidates; nothing was asked.
        CANCELLED: The operator declined; nothing was deleted.
        DELETED: The operator confirmed and deletions were attempted.
        FAILED: The sweep could not run (missing directory, bad pattern).
    """

    NO_MATCHES = "no_matches"
    CANCELLED = "cancelled"
    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RuleReport:
    """What happened to one rule.

    Attributes:
        rule: The rule that was run.
        status: Final outcome.
        candidates: Files selected by the sweep.
        results: Per-path deletion results (empty unless DELETED).
        error: Failure message for FAILED reports.
    """

    rule: RetentionRule
    status: RunStatus
    candidates: tuple[CandidateFile, ...] = ()
    results: tuple[DeleteResult, ...] = ()
    error: str | None = None

    @property
    def deleted_paths(self) -> list[str]:
        """Paths actually removed (dry-run results excluded)."""
        return [r.path for r in self.results if r.success and not r.dry_run]

    @property
    def failed_deletions(self) -> int:
        """Number of paths whose deletion failed."""
        return sum(1 for r in self.results if not r.success)
