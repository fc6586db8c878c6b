"""Unit tests for the top-level CLI application."""

import logging

from logsweep import __version__
from logsweep.cli.main import app, configure_logging
from typer.testing import CliRunner

runner = CliRunner()


class TestMain:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command prints usage."""
        result = runner.invoke(app, [])

        assert "Usage" in result.output

    def test_commands_registered(self) -> None:
        """All commands appear in help."""
        result = runner.invoke(app, ["--help"])

        for name in ("run", "preview", "config", "history"):
            assert name in result.stdout


class TestConfigureLogging:
    """Tests for log level selection."""

    def _level_after(self, verbose: bool, quiet: bool) -> int:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []
        try:
            configure_logging(verbose, quiet)
            return root.level
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_default_warning(self) -> None:
        """Warnings and above by default."""
        assert self._level_after(False, False) == logging.WARNING

    def test_verbose_debug(self) -> None:
        """--verbose enables debug logging."""
        assert self._level_after(True, False) == logging.DEBUG

    def test_quiet_errors(self) -> None:
        """--quiet limits logging to errors."""
        assert self._level_after(False, True) == logging.ERROR
