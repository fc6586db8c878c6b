"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

DAY = 86400

# Whole-second reference time so ages computed from os.utime are exact
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for sweeps."""
    return FIXED_NOW


@pytest.fixture
def make_file(now: datetime) -> Callable[..., Path]:
    """Factory creating a file whose mtime lies a given age before `now`."""

    def _make(directory: Path, name: str, age_seconds: int, content: str = "log") -> Path:
        path = directory / name
        path.write_text(content)
        ts = int(now.timestamp()) - age_seconds
        os.utime(path, (ts, ts))
        return path

    return _make


@pytest.fixture
def log_dir(tmp_path: Path, make_file: Callable[..., Path]) -> Path:
    """Directory with a mix of fresh, expired and non-matching entries.

    - app.log: 10 days old
    - app.2024.log: 40 days old
    - notes.txt: 100 days old
    - archive/: subdirectory holding an old .log file
    """
    directory = tmp_path / "logs"
    directory.mkdir()
    make_file(directory, "app.log", 10 * DAY)
    make_file(directory, "app.2024.log", 40 * DAY)
    make_file(directory, "notes.txt", 100 * DAY)
    archive = directory / "archive"
    archive.mkdir()
    make_file(archive, "old.log", 400 * DAY)
    return directory
