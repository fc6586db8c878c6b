"""File deletion operator.

Removes confirmed candidate files one by one with dry-run support.
Failures are isolated per path and never abort the batch.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from logsweep.sweep.models import DeleteResult

logger = logging.getLogger(__name__)


class DeleteOperator:
    """Deletes files selected by a sweep.

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the DeleteOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether deletions are simulated."""
        return self._dry_run

    def delete_all(self, paths: Sequence[str]) -> list[DeleteResult]:
        """Delete every path and return one result per path.

        Every path is attempted regardless of earlier failures. Nothing
        is retried.

        Args:
            paths: File paths to delete.

        Returns:
            List of DeleteResult in input order.
        """
        return [self._delete_single(path) for path in paths]

    def _delete_single(self, path: str) -> DeleteResult:
        """Delete a single file.

        Args:
            path: File path to delete.

        Returns:
            DeleteResult indicating success or failure.
        """
        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeleteResult(path=path, success=True, dry_run=True)

        target = Path(path)

        # Directories are never removed
        if target.is_dir() and not target.is_symlink():
            return DeleteResult(
                path=path,
                success=False,
                error=f"Refusing to delete directory: {path}",
            )

        if not (target.exists() or target.is_symlink()):
            return DeleteResult(
                path=path,
                success=False,
                error=f"Path does not exist: {path}",
            )

        try:
            target.unlink()
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return DeleteResult(path=path, success=False, error=str(e))

        logger.debug("Deleted %s", path)
        return DeleteResult(path=path, success=True)
