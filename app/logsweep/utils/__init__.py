"""Utility modules for logsweep.

This module exports commonly used utility functions.
"""

from logsweep.utils.formatting import (
    console,
    create_candidates_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from logsweep.utils.timefmt import DATE_FORMAT, format_mtime, resolve_timezone

__all__ = [
    "DATE_FORMAT",
    "console",
    "create_candidates_table",
    "err_console",
    "format_mtime",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "resolve_timezone",
]
