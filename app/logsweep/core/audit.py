"""Deletion audit log.

Each confirmed sweep that removed files is appended as one JSON line
to ~/.local/state/logsweep/history.jsonl, giving an audit trail of
what was deleted, by which rule, and what failed.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from logsweep.core.paths import ensure_dir, get_state_dir

if TYPE_CHECKING:
    from logsweep.sweep.models import RuleReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuditEntry:
    """Record of the deletions performed for one rule.

    Attributes:
        id: Unique identifier (12-character hex string from UUID).
        timestamp: When the deletions ran (ISO 8601 with timezone).
        directory: Rule directory.
        pattern: Rule pattern.
        retention_days: Rule threshold.
        deleted: Paths that were removed.
        failed: Mapping of path to error message for failed deletions.
    """

    id: str
    timestamp: str
    directory: str
    pattern: str
    retention_days: int
    deleted: tuple[str, ...] = ()
    failed: dict[str, str] = field(default_factory=lambda: {})

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.id:
            msg = "Audit entry ID cannot be empty"
            raise ValueError(msg)
        if not self.deleted and not self.failed:
            msg = "Audit entry must record at least one path"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "directory": self.directory,
            "pattern": self.pattern,
            "retention_days": self.retention_days,
            "deleted": list(self.deleted),
            "failed": [{"path": p, "error": e} for p, e in self.failed.items()],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuditEntry:
        """Deserialize from dictionary.

        Raises:
            KeyError: If required fields are missing.
            ValueError: If data is invalid.
        """
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            directory=data["directory"],
            pattern=data["pattern"],
            retention_days=int(data["retention_days"]),
            deleted=tuple(data.get("deleted", [])),
            failed={item["path"]: item["error"] for item in data.get("failed", [])},
        )

    def to_json_line(self) -> str:
        """Serialize to a single JSON line (no trailing newline)."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json_line(cls, line: str) -> AuditEntry:
        """Deserialize from a JSON line."""
        return cls.from_dict(json.loads(line.strip()))


def create_audit_entry(report: RuleReport) -> AuditEntry | None:
    """Build an audit entry from a rule report.

    Dry-run results are not audited.

    Args:
        report: Report of a rule whose deletions ran.

    Returns:
        AuditEntry, or None if nothing was deleted or attempted.
    """
    real = [r for r in report.results if not r.dry_run]
    if not real:
        return None

    return AuditEntry(
        id=uuid.uuid4().hex[:12],
        timestamp=datetime.now(UTC).isoformat(),
        directory=report.rule.directory,
        pattern=report.rule.pattern,
        retention_days=report.rule.retention_days,
        deleted=tuple(r.path for r in real if r.success),
        failed={r.path: r.error or "unknown error" for r in real if not r.success},
    )


class AuditLog:
    """Append-only JSONL audit log.

    Args:
        state_dir: Optional override for the state directory.
            Default: ~/.local/state/logsweep
    """

    FILENAME = "history.jsonl"

    def __init__(self, state_dir: Path | None = None) -> None:
        self._state_dir = state_dir if state_dir is not None else get_state_dir()

    @property
    def path(self) -> Path:
        """Path to the history.jsonl file."""
        return self._state_dir / self.FILENAME

    def record(self, entry: AuditEntry) -> None:
        """Append an entry to the log.

        Raises:
            RuntimeError: If the state directory cannot be created.
            OSError: If the file cannot be written.
        """
        ensure_dir(self._state_dir, "state")
        with self.path.open(mode="a", encoding="utf-8") as f:
            f.write(entry.to_json_line() + "\n")
            f.flush()

    def read(self, limit: int | None = None) -> list[AuditEntry]:
        """Read entries, newest first.

        Corrupt lines are skipped with a warning.

        Args:
            limit: Maximum number of entries to return.

        Returns:
            List of AuditEntry, empty if the log does not exist.
        """
        if not self.path.exists():
            return []

        entries: list[AuditEntry] = []
        with self.path.open(encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    entries.append(AuditEntry.from_json_line(line))
                except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                    logger.warning("Skipping corrupt history line %d: %s", line_num, e)

        entries.reverse()
        if limit is not None:
            entries = entries[:limit]
        return entries
