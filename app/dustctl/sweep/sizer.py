"""Concurrent size aggregation over artifact directories.

Each root is measured independently in a thread pool. Any entry that
cannot be listed or stat'ed contributes zero bytes, so a single
unreadable subtree never aborts the report.
"""

import logging
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

logger = logging.getLogger(__name__)


class SizeAggregator:
    """Computes the on-disk size of directory subtrees.

    Sizes are the sum of regular file lengths. Directories are walked
    but not counted, and symbolic links are neither followed nor
    counted.

    Args:
        max_workers: Thread pool size. None lets the executor choose.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers

    def measure(self, root: Path) -> int:
        """Sum the sizes of all regular files beneath ``root``.

        Args:
            root: Directory to measure.

        Returns:
            Total size in bytes. Unreadable parts count as zero.
        """
        total = 0
        pending: list[Path] = [root]

        while pending:
            directory = pending.pop()
            try:
                with os.scandir(directory) as entries:
                    for entry in entries:
                        try:
                            if entry.is_dir(follow_symlinks=False):
                                pending.append(Path(entry.path))
                            elif entry.is_file(follow_symlinks=False):
                                total += entry.stat(follow_symlinks=False).st_size
                        except OSError as e:
                            logger.debug("Cannot stat %s: %s", entry.path, e)
            except OSError as e:
                logger.debug("Cannot read directory %s: %s", directory, e)

        return total

    def sizes(self, roots: Iterable[Path]) -> dict[Path, int]:
        """Measure every root concurrently.

        Args:
            roots: Independent directories to measure.

        Returns:
            Mapping of each root to its size in bytes.
        """
        unique_roots = list(dict.fromkeys(roots))
        if not unique_roots:
            return {}

        results: dict[Path, int] = {}
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            future_to_root = {executor.submit(self.measure, root): root for root in unique_roots}
            for future in as_completed(future_to_root):
                root = future_to_root[future]
                results[root] = future.result()
                logger.debug("Measured %s: %d bytes", root, results[root])

        return results

    def total_size(self, roots: Iterable[Path]) -> int:
        """Compute the combined size of all roots in bytes."""
        return sum(self.sizes(roots).values())
