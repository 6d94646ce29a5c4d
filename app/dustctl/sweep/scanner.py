"""Tree scanner for build-artifact directories.

Walks a root directory breadth-first and collects every top-level
directory whose name matches an artifact pattern. A matched directory
is never descended into, so the result never holds both an ancestor
and one of its descendants.
"""

import logging
import os
from collections import deque
from pathlib import Path

from dustctl.sweep.matcher import PathMatcher
from dustctl.sweep.models import MatchedRootSet

logger = logging.getLogger(__name__)


class RootNotFoundError(Exception):
    """Raised when the scan root does not exist or is not a directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"Root directory not found: {root}")


class TreeScanner:
    """Finds artifact directories beneath a root.

    Only real directories are considered; files and symbolic links
    are ignored, so link cycles are never followed. Directories that
    cannot be listed are skipped and reported on the result.

    Args:
        matcher: Predicate deciding which directory names are artifacts.
            Defaults to a matcher over the built-in artifact names.
    """

    def __init__(self, matcher: PathMatcher | None = None) -> None:
        self._matcher = matcher or PathMatcher()

    def scan(self, root: str | os.PathLike[str]) -> MatchedRootSet:
        """Scan ``root`` for artifact directories.

        The root itself is never matched, whatever its name. Traversal
        uses an explicit queue so arbitrarily deep trees do not grow the
        call stack.

        Args:
            root: Directory to scan.

        Returns:
            MatchedRootSet with the matched directories and any
            directories that could not be read.

        Raises:
            RootNotFoundError: If ``root`` is missing or not a directory.
        """
        root_path = Path(root)
        if not root_path.is_dir():
            raise RootNotFoundError(root_path)

        matched: list[Path] = []
        unreadable: list[Path] = []
        pending: deque[Path] = deque([root_path])

        while pending:
            directory = pending.popleft()
            try:
                subdirs = self._list_subdirectories(directory)
            except OSError as e:
                logger.warning("Cannot read directory %s: %s", directory, e)
                unreadable.append(directory)
                continue

            for subdir in subdirs:
                if self._matcher.matches(subdir):
                    logger.debug("Matched artifact directory: %s", subdir)
                    matched.append(subdir)
                else:
                    pending.append(subdir)

        logger.info(
            "Scanned %s: %d artifact directories, %d unreadable",
            root_path,
            len(matched),
            len(unreadable),
        )
        return MatchedRootSet(root=root_path, paths=tuple(matched), unreadable=tuple(unreadable))

    @staticmethod
    def _list_subdirectories(directory: Path) -> list[Path]:
        """List the real (non-symlink) subdirectories of ``directory``.

        Raises:
            OSError: If the directory cannot be listed.
        """
        subdirs: list[Path] = []
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(Path(entry.path))
                except OSError:
                    # Entry vanished or cannot be stat'ed
                    continue
        return subdirs
