"""Retention sweep core.

This package selects expired files for a retention rule, asks the
operator to confirm, and deletes the confirmed files.
"""

from logsweep.sweep.confirm import CONFIRM_TOKEN, ConfirmationGate, is_affirmative
from logsweep.sweep.errors import DirectoryNotFoundError, InvalidPatternError, SweepError
from logsweep.sweep.models import (
    CandidateFile,
    DeleteResult,
    RetentionRule,
    RuleReport,
    RunStatus,
)
from logsweep.sweep.operator import DeleteOperator
from logsweep.sweep.runner import RuleRunner
from logsweep.sweep.scanner import SweepScanner, compute_age_days

__all__ = [
    "CONFIRM_TOKEN",
    "CandidateFile",
    "ConfirmationGate",
    "DeleteOperator",
    "DeleteResult",
    "DirectoryNotFoundError",
    "InvalidPatternError",
    "RetentionRule",
    "RuleReport",
    "RuleRunner",
    "RunStatus",
    "SweepError",
    "SweepScanner",
    "compute_age_days",
    "is_affirmative",
]
