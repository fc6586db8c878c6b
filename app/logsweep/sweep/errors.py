"""Sweep errors.

Both errors are fatal for the rule being evaluated and carry the rule
so callers can report which one failed.
"""

from logsweep.sweep.models import RetentionRule


class SweepError(Exception):
    """Base exception for a rule that cannot be evaluated."""

    def __init__(self, rule: RetentionRule, message: str) -> None:
        super().__init__(message)
        self.rule = rule


class DirectoryNotFoundError(SweepError):
    """Raised when the rule's directory is missing or cannot be listed."""


class InvalidPatternError(SweepError):
    """Raised when the rule's pattern is not a valid regular expression."""
