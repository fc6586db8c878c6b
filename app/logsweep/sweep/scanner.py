"""Sweep engine: selects expired files for a retention rule.

Lists the immediate entries of a rule's directory, skips
subdirectories, and keeps regular files whose age in whole days
reaches the retention threshold and whose full path matches the
rule's pattern. Nothing is read or modified.
"""

import logging
import os
import re
import stat
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime

from logsweep.sweep.errors import DirectoryNotFoundError, InvalidPatternError, SweepError
from logsweep.sweep.models import SECONDS_PER_DAY, CandidateFile, RetentionRule

logger = logging.getLogger(__name__)


def compute_age_days(mtime: datetime, now: datetime) -> int:
    """Whole days elapsed between mtime and now.

    Elapsed time is truncated to whole seconds and integer-divided by
    86400. Modification times in the future count as age 0.

    Args:
        mtime: Timezone-aware modification time.
        now: Timezone-aware reference time.

    Returns:
        Age in whole days.
    """
    elapsed = int((now - mtime).total_seconds())
    return max(0, elapsed) // SECONDS_PER_DAY


class SweepScanner:
    """Evaluates retention rules against the filesystem."""

    def evaluate(self, rule: RetentionRule, now: datetime) -> list[CandidateFile]:
        """Select the files a rule would delete.

        Args:
            rule: Rule to evaluate.
            now: Reference time, captured once by the caller.

        Returns:
            Candidates in directory enumeration order (possibly empty).

        Raises:
            InvalidPatternError: If the pattern does not compile.
            DirectoryNotFoundError: If the directory is missing or unlistable.
            ValueError: If now is naive.
        """
        if now.tzinfo is None:
            msg = "Reference time must be timezone-aware"
            raise ValueError(msg)

        try:
            matcher = re.compile(rule.pattern)
        except re.error as e:
            raise InvalidPatternError(
                rule, f"Invalid pattern {rule.pattern!r} for {rule.directory}: {e}"
            ) from e

        try:
            with os.scandir(rule.directory) as it:
                entries = list(it)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise DirectoryNotFoundError(rule, f"Directory not found: {rule.directory}") from e
        except OSError as e:
            raise DirectoryNotFoundError(
                rule, f"Cannot list directory {rule.directory}: {e.strerror or e}"
            ) from e

        logger.debug(
            "Evaluating %d entries in %s (pattern=%r, days=%d)",
            len(entries),
            rule.directory,
            rule.pattern,
            rule.retention_days,
        )

        candidates: list[CandidateFile] = []
        for entry in entries:
            candidate = self._check_entry(entry, rule, matcher, now)
            if candidate is not None:
                candidates.append(candidate)

        return candidates

    def evaluate_all(
        self,
        rules: Sequence[RetentionRule],
        now: datetime,
        max_workers: int = 4,
    ) -> list[list[CandidateFile] | SweepError]:
        """Evaluate several rules concurrently.

        Scans share no state, so each rule runs in its own worker. A
        rule that fails yields its SweepError in place of candidates.

        Args:
            rules: Rules to evaluate.
            now: Single reference time shared by all rules.
            max_workers: Thread pool size.

        Returns:
            One entry per rule, in rule order.
        """

        def _one(rule: RetentionRule) -> list[CandidateFile] | SweepError:
            try:
                return self.evaluate(rule, now)
            except SweepError as e:
                return e

        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as ex:
            return list(ex.map(_one, rules))

    def _check_entry(
        self,
        entry: os.DirEntry[str],
        rule: RetentionRule,
        matcher: re.Pattern[str],
        now: datetime,
    ) -> CandidateFile | None:
        """Apply the directory, age and pattern filters to one entry.

        Args:
            entry: Directory entry to check.
            rule: Rule being evaluated.
            matcher: Compiled rule pattern.
            now: Reference time.

        Returns:
            CandidateFile if the entry qualifies, None otherwise.
        """
        try:
            if entry.is_dir():
                return None
            st = entry.stat()
        except OSError as e:
            logger.warning("Skipping %s: cannot read metadata (%s)", entry.path, e.strerror or e)
            return None

        if not stat.S_ISREG(st.st_mode):
            logger.debug("Skipping non-regular file: %s", entry.path)
            return None

        mtime = datetime.fromtimestamp(st.st_mtime, tz=UTC)
        age = compute_age_days(mtime, now)
        if age < rule.retention_days:
            return None

        if matcher.search(entry.path) is None:
            return None

        return CandidateFile(path=entry.path, mtime=mtime, age_days=age)
