"""Fixtures shared by CLI tests."""

import json
import os
import time
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from logsweep.utils import formatting

DAY = 86400


@pytest.fixture(autouse=True)
def wide_consoles() -> Iterator[None]:
    """Keep Rich from folding long temporary paths across lines."""
    saved = (formatting.console.width, formatting.err_console.width)
    formatting.console.width = 300
    formatting.err_console.width = 300
    yield
    formatting.console.width, formatting.err_console.width = saved


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and state directories into the test's tmp_path."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg-state"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def aged_file() -> Callable[[Path, str, int], Path]:
    """Factory creating a file last modified `days` days ago (wall clock)."""

    def _make(directory: Path, name: str, days: int) -> Path:
        path = directory / name
        path.write_text("log line\n")
        ts = time.time() - days * DAY - 60
        os.utime(path, (ts, ts))
        return path

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[list[dict[str, object]]], Path]:
    """Factory writing a JSON rules file and returning its path."""

    def _write(rules: list[dict[str, object]]) -> Path:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(rules))
        return path

    return _write


@pytest.fixture
def sweep_dir(tmp_path: Path, aged_file: Callable[[Path, str, int], Path]) -> Path:
    """Log directory: app.log (10d), app.2024.log (40d), notes.txt (100d), archive/."""
    directory = tmp_path / "logs"
    directory.mkdir()
    aged_file(directory, "app.log", 10)
    aged_file(directory, "app.2024.log", 40)
    aged_file(directory, "notes.txt", 100)
    (directory / "archive").mkdir()
    return directory
