"""Unit tests for the `logsweep history` command."""

import json
from pathlib import Path

from logsweep.cli.main import app
from logsweep.core.audit import AuditEntry, AuditLog
from typer.testing import CliRunner

runner = CliRunner()


def _record(entry_id: str) -> None:
    AuditLog().record(
        AuditEntry(
            id=entry_id,
            timestamp="2024-06-01T08:30:00+00:00",
            directory="/var/log/app",
            pattern=r"\.log$",
            retention_days=30,
            deleted=("/var/log/app/a.log", "/var/log/app/b.log"),
            failed={"/var/log/app/c.log": "Permission denied"},
        )
    )


class TestHistory:
    """Tests for logsweep history."""

    def test_empty(self) -> None:
        """No history prints a friendly message."""
        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "No history entries found" in result.stdout

    def test_table(self, tmp_path: Path) -> None:
        """Entries are listed in a table."""
        _record("abcdef123456")

        result = runner.invoke(app, ["history"])

        assert result.exit_code == 0
        assert "abcdef12" in result.stdout
        assert "2024-06-01 08:30" in result.stdout
        assert "/var/log/app" in result.stdout

    def test_json(self) -> None:
        """--json emits the raw entries."""
        _record("abcdef123456")
        _record("fedcba654321")

        result = runner.invoke(app, ["history", "--json", "-n", "1"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["id"] for d in data] == ["fedcba654321"]
        assert data[0]["failed"] == [{"path": "/var/log/app/c.log", "error": "Permission denied"}]
