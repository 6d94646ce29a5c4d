"""Concurrent deletion of matched artifact directories.

Removes each matched root in a thread pool, isolating failures per
root: an error on one directory is recorded on the batch report and
never stops the others from being attempted.
"""

import logging
import shutil
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from dustctl.sweep.models import BatchReport, DeletionOutcome, DeletionStatus

logger = logging.getLogger(__name__)


class DeletionExecutor:
    """Removes artifact directories and collects per-root outcomes.

    Each root is removed with ``shutil.rmtree``. Failures are reported
    once and not retried; a root that fails partway through is left as
    it is, without rollback.

    Attributes:
        _max_workers: Thread pool size, None lets the executor choose.
        _dry_run: If True, simulate removals without touching the filesystem.
    """

    def __init__(self, max_workers: int | None = None, dry_run: bool = False) -> None:
        """Initialize the DeletionExecutor.

        Args:
            max_workers: Thread pool size. None lets the executor choose.
            dry_run: If True, report what would be removed without removing.
        """
        self._max_workers = max_workers
        self._dry_run = dry_run

    def delete_all(self, roots: Iterable[Path]) -> BatchReport:
        """Remove every root concurrently.

        Args:
            roots: Non-overlapping directories to remove.

        Returns:
            Completed BatchReport with one outcome per distinct root.
        """
        unique_roots = list(dict.fromkeys(roots))
        report = BatchReport()
        report.start()

        if unique_roots:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = [executor.submit(self._delete_single, root) for root in unique_roots]
                for future in as_completed(futures):
                    report.record(future.result())

        report.complete()
        logger.info(
            "Deletion batch finished: %d removed, %d failed",
            report.removed_count,
            report.failed_count,
        )
        return report

    def _delete_single(self, root: Path) -> DeletionOutcome:
        """Remove a single root recursively.

        Args:
            root: Directory to remove.

        Returns:
            DeletionOutcome indicating success or failure.
        """
        if self._dry_run:
            logger.info("Dry-run: would remove %s", root)
            return DeletionOutcome(path=root, status=DeletionStatus.REMOVED, dry_run=True)

        try:
            shutil.rmtree(root)
        except OSError as e:
            logger.warning("Failed to remove %s: %s", root, e)
            return DeletionOutcome(
                path=root,
                status=DeletionStatus.FAILED,
                error=f"{type(e).__name__}: {e}",
            )

        logger.debug("Removed %s", root)
        return DeletionOutcome(path=root, status=DeletionStatus.REMOVED)
