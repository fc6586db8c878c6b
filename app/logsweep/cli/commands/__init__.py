"""CLI commands for logsweep.

This package contains all subcommand implementations.
"""

from logsweep.cli.commands import config, history, preview, run

__all__ = ["config", "history", "preview", "run"]
