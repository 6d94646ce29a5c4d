"""Sweep domain models for artifact scanning and deletion.

This module defines the data structures passed between the tree
scanner, the size aggregator and the deletion executor: the set of
matched artifact roots, per-root deletion outcomes, and the batch
report that collects them.
"""

import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DeletionStatus(str, Enum):
    """Outcome of removing a single matched root.

    Attributes:
        REMOVED: The directory and everything beneath it was removed.
        FAILED: Removal raised an error; see the outcome's error text.
    """

    REMOVED = "removed"
    FAILED = "failed"


class BatchState(str, Enum):
    """Lifecycle of a deletion batch.

    Attributes:
        PENDING: Report created, no root attempted yet.
        RUNNING: Removals are in flight.
        COMPLETED: Every root has an outcome.
    """

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


@dataclass(frozen=True, slots=True)
class MatchedRootSet:
    """Top-level artifact directories found beneath a scan root.

    No path in ``paths`` is an ancestor of another: the scanner never
    descends into a directory once it has matched.

    Attributes:
        root: Directory the scan started from.
        paths: Matched artifact directories, sorted.
        unreadable: Directories that could not be listed and were skipped.
    """

    root: Path
    paths: tuple[Path, ...] = ()
    unreadable: tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        """Normalize path collections to sorted, de-duplicated tuples."""
        object.__setattr__(self, "paths", tuple(sorted(set(self.paths))))
        object.__setattr__(self, "unreadable", tuple(sorted(set(self.unreadable))))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __contains__(self, item: object) -> bool:
        return item in self.paths

    @property
    def is_empty(self) -> bool:
        """Check if the scan found nothing to remove."""
        return not self.paths


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of removing a single matched root.

    Attributes:
        path: Directory that was operated on.
        status: Whether the removal succeeded.
        error: Description of the failure cause, None on success.
        dry_run: Whether this was a simulated removal.
    """

    path: Path
    status: DeletionStatus
    error: str | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate that failures carry a cause and successes do not."""
        if self.status == DeletionStatus.FAILED and not self.error:
            msg = f"Failed outcome for {self.path} requires an error description"
            raise ValueError(msg)
        if self.status == DeletionStatus.REMOVED and self.error is not None:
            msg = f"Removed outcome for {self.path} cannot carry an error"
            raise ValueError(msg)

    @property
    def success(self) -> bool:
        """Check if the root was removed."""
        return self.status == DeletionStatus.REMOVED


@dataclass(eq=False)
class BatchReport:
    """Thread-safe accumulator for the outcomes of one deletion batch.

    Workers call :meth:`record` concurrently; the outcome list and the
    lifecycle state are only touched under a single lock. Counts are
    derived from the recorded outcomes.
    """

    _outcomes: list[DeletionOutcome] = field(default_factory=list)
    _state: BatchState = BatchState.PENDING
    _started_at: float | None = None
    _finished_at: float | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def state(self) -> BatchState:
        """Current lifecycle state of the batch."""
        with self._lock:
            return self._state

    def start(self) -> None:
        """Move the batch from PENDING to RUNNING.

        Raises:
            RuntimeError: If the batch has already been started.
        """
        with self._lock:
            if self._state != BatchState.PENDING:
                msg = f"Cannot start batch in state {self._state.value}"
                raise RuntimeError(msg)
            self._state = BatchState.RUNNING
            self._started_at = time.perf_counter()

    def record(self, outcome: DeletionOutcome) -> None:
        """Append one root's outcome.

        Raises:
            RuntimeError: If the batch is not running.
        """
        with self._lock:
            if self._state != BatchState.RUNNING:
                msg = f"Cannot record outcome in state {self._state.value}"
                raise RuntimeError(msg)
            self._outcomes.append(outcome)

    def complete(self) -> None:
        """Move the batch from RUNNING to COMPLETED.

        Raises:
            RuntimeError: If the batch is not running.
        """
        with self._lock:
            if self._state != BatchState.RUNNING:
                msg = f"Cannot complete batch in state {self._state.value}"
                raise RuntimeError(msg)
            self._state = BatchState.COMPLETED
            self._finished_at = time.perf_counter()

    @property
    def outcomes(self) -> tuple[DeletionOutcome, ...]:
        """Snapshot of recorded outcomes, ordered by path."""
        with self._lock:
            return tuple(sorted(self._outcomes, key=lambda o: o.path))

    @property
    def removed(self) -> tuple[DeletionOutcome, ...]:
        """Outcomes whose root was removed."""
        return tuple(o for o in self.outcomes if o.success)

    @property
    def failed(self) -> tuple[DeletionOutcome, ...]:
        """Outcomes whose removal failed."""
        return tuple(o for o in self.outcomes if not o.success)

    @property
    def removed_count(self) -> int:
        return len(self.removed)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def elapsed(self) -> float:
        """Wall time of the batch in seconds (0.0 until started)."""
        with self._lock:
            if self._started_at is None:
                return 0.0
            end = self._finished_at if self._finished_at is not None else time.perf_counter()
            return end - self._started_at
