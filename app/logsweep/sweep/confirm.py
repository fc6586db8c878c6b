"""Confirmation gate for destructive sweeps.

Shows the candidate list and blocks on a single line of operator
input. Only the exact token ``y`` (after trimming surrounding
whitespace) approves the deletion.
"""

import logging
from collections.abc import Callable, Sequence
from datetime import tzinfo

from rich.console import Console

from logsweep.sweep.models import CandidateFile
from logsweep.utils.formatting import create_candidates_table

logger = logging.getLogger(__name__)

# Exact, case-sensitive affirmative answer. "Y" and "yes" decline.
CONFIRM_TOKEN = "y"

CONFIRM_QUESTION = "Delete the files listed above? y/n"


def is_affirmative(answer: str) -> bool:
    """Return True iff the trimmed answer is exactly CONFIRM_TOKEN."""
    return answer.strip() == CONFIRM_TOKEN


class ConfirmationGate:
    """Asks the operator to approve a candidate list.

    Args:
        console: Console the candidate table and question are written to.
        tz: Timezone used to render modification dates.
        read_line: Callable returning one line of operator input.
            Defaults to ``console.input``.
    """

    def __init__(
        self,
        console: Console,
        tz: tzinfo,
        read_line: Callable[[], str] | None = None,
    ) -> None:
        self._console = console
        self._tz = tz
        self._read_line = read_line if read_line is not None else console.input

    def confirm(self, candidates: Sequence[CandidateFile]) -> bool:
        """Render candidates and wait for approval.

        An empty candidate list returns False without rendering anything
        or reading input.

        Args:
            candidates: Files selected by the sweep.

        Returns:
            True if the operator answered exactly "y".
        """
        if not candidates:
            return False

        self._console.print(create_candidates_table(candidates, self._tz))
        self._console.print(f"[warning]{CONFIRM_QUESTION}[/]")

        try:
            answer = self._read_line()
        except EOFError:
            logger.info("No operator input available; treating as decline")
            return False

        approved = is_affirmative(answer)
        logger.debug("Operator answered %r (approved=%s)", answer, approved)
        return approved
