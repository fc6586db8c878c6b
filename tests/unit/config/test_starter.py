"""Unit tests for the starter configuration writer."""

from pathlib import Path

import pytest
from logsweep.config.loader import ConfigError, load_rules
from logsweep.config.starter import STARTER_RULES, ConfigFormat, write_starter_config


class TestWriteStarterConfig:
    """Tests for write_starter_config."""

    @pytest.mark.parametrize("fmt", list(ConfigFormat))
    def test_written_file_loads(self, tmp_path: Path, fmt: ConfigFormat) -> None:
        """The starter file is a valid configuration in either format."""
        path = write_starter_config(tmp_path / f"config.{fmt.value}", fmt)

        rules = load_rules(path)

        assert len(rules) == len(STARTER_RULES)
        assert rules[0].pattern == STARTER_RULES[0]["regex"]

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        """Missing parent directories are created."""
        path = write_starter_config(tmp_path / "a" / "b" / "config.json", ConfigFormat.JSON)
        assert path.is_file()

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless forced."""
        path = tmp_path / "config.json"
        path.write_text("[]")

        with pytest.raises(ConfigError, match="already exists"):
            write_starter_config(path, ConfigFormat.JSON)
        assert path.read_text() == "[]"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """force=True replaces the file."""
        path = tmp_path / "config.json"
        path.write_text("[]")

        write_starter_config(path, ConfigFormat.JSON, force=True)

        assert len(load_rules(path)) == len(STARTER_RULES)
