"""Unit tests for the `logsweep preview` command."""

import json
from collections.abc import Callable
from pathlib import Path

from logsweep.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestPreview:
    """Tests for logsweep preview."""

    def test_lists_without_deleting(
        self, sweep_dir: Path, write_config: Callable[..., Path]
    ) -> None:
        """Candidates are listed and left on disk."""
        config = write_config([{"path": str(sweep_dir), "regex": r".*\.log$", "day": 30}])

        result = runner.invoke(app, ["preview", "--config", str(config)])

        assert result.exit_code == 0
        assert "app.2024.log" in result.stdout
        assert "y/n" not in result.stdout
        assert (sweep_dir / "app.2024.log").exists()

    def test_json_output(self, sweep_dir: Path, write_config: Callable[..., Path]) -> None:
        """--format json emits parseable JSON."""
        config = write_config([{"path": str(sweep_dir), "regex": r".*\.log$", "day": 30}])

        result = runner.invoke(
            app, ["preview", "--config", str(config), "--format", "json", "--tz", "UTC"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        assert data[0]["error"] is None
        assert [c["path"] for c in data[0]["candidates"]] == [str(sweep_dir / "app.2024.log")]
        assert data[0]["candidates"][0]["age_days"] == 40

    def test_no_matches(self, sweep_dir: Path, write_config: Callable[..., Path]) -> None:
        """Rules without candidates say so."""
        config = write_config([{"path": str(sweep_dir), "regex": "nothing", "day": 0}])

        result = runner.invoke(app, ["preview", "--config", str(config)])

        assert result.exit_code == 0
        assert "No matching files" in result.stdout

    def test_failing_rule(
        self, tmp_path: Path, sweep_dir: Path, write_config: Callable[..., Path]
    ) -> None:
        """A failing rule is reported and sets exit code 1."""
        config = write_config(
            [
                {"path": str(tmp_path / "gone"), "regex": "x", "day": 1},
                {"path": str(sweep_dir), "regex": r"\.txt$", "day": 30},
            ]
        )

        result = runner.invoke(app, ["preview", "--config", str(config)])

        assert result.exit_code == 1
        assert "Directory not found" in result.output
        assert "notes.txt" in result.stdout

    def test_bracketed_invalid_pattern_reported(
        self, sweep_dir: Path, write_config: Callable[..., Path]
    ) -> None:
        """A pattern that looks like Rich markup is reported verbatim."""
        config = write_config([{"path": str(sweep_dir), "regex": "[/a]+(", "day": 1}])

        result = runner.invoke(app, ["preview", "--config", str(config)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid pattern '[/a]+('" in result.output

    def test_bracketed_missing_directory(
        self, tmp_path: Path, write_config: Callable[..., Path]
    ) -> None:
        """Directory names with brackets survive in error messages."""
        missing = tmp_path / "[logs]"
        config = write_config([{"path": str(missing), "regex": "x", "day": 1}])

        result = runner.invoke(app, ["preview", "--config", str(config)])

        assert result.exit_code == 1
        assert f"Directory not found: {missing}" in result.output
