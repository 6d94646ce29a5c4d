"""Artifact directory name matching.

Decides whether a directory path names a build-artifact folder by
comparing its last path segment against a fixed set of names.
"""

import os
from collections.abc import Iterable
from pathlib import PurePosixPath

# Directory names treated as reproducible build output.
DEFAULT_ARTIFACT_NAMES: tuple[str, ...] = (
    "bin",
    "obj",
    "node_modules",
)

_SEPARATORS: tuple[str, ...] = ("/", "\\")


class PathMatcher:
    """Case-insensitive predicate over the final segment of a path.

    Both ``/`` and ``\\`` are accepted as separators so that paths from
    either convention match the same way. The name set is frozen at
    construction and safe to share across threads.

    Args:
        names: Artifact directory names to match. Defaults to
            :data:`DEFAULT_ARTIFACT_NAMES`.

    Raises:
        ValueError: If no names are given, or a name is empty or
            contains a path separator.
    """

    def __init__(self, names: Iterable[str] = DEFAULT_ARTIFACT_NAMES) -> None:
        normalized: set[str] = set()
        for name in names:
            stripped = name.strip()
            if not stripped:
                msg = "Artifact name cannot be empty"
                raise ValueError(msg)
            if any(sep in stripped for sep in _SEPARATORS):
                msg = f"Artifact name cannot contain a path separator: {name!r}"
                raise ValueError(msg)
            normalized.add(stripped.casefold())

        if not normalized:
            msg = "At least one artifact name is required"
            raise ValueError(msg)

        self._names: frozenset[str] = frozenset(normalized)

    @property
    def names(self) -> frozenset[str]:
        """Case-folded artifact names this matcher accepts."""
        return self._names

    def matches(self, path: str | os.PathLike[str]) -> bool:
        """Check if the last segment of ``path`` is an artifact name.

        Args:
            path: Directory path, absolute or relative, in either
                separator convention. Trailing separators are ignored.

        Returns:
            True if the final segment equals a configured name,
            compared case-insensitively.
        """
        raw = os.fspath(path).replace("\\", "/")
        name = PurePosixPath(raw).name
        if not name:
            return False
        return name.casefold() in self._names

    def __repr__(self) -> str:
        return f"PathMatcher(names={sorted(self._names)!r})"
