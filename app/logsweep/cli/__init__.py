"""CLI package for logsweep.

This package contains the Typer application and all subcommands.
"""

from logsweep.cli.main import app

__all__ = ["app"]
