"""Unit tests for PathMatcher."""

from pathlib import Path

import pytest
from dustctl.sweep.matcher import DEFAULT_ARTIFACT_NAMES, PathMatcher


class TestPathMatcher:
    """Tests for PathMatcher.matches."""

    @pytest.mark.parametrize(
        "path",
        [
            "/proj/bin",
            "/proj/src/obj",
            "web/node_modules",
            "bin",
            "/proj/BIN",
            "/proj/Obj",
            "/proj/Node_Modules",
        ],
    )
    def test_matches_artifact_names(self, path: str) -> None:
        """Final segments equal to an artifact name match, in any case."""
        assert PathMatcher().matches(path) is True

    @pytest.mark.parametrize(
        "path",
        [
            "/proj/binary",
            "/proj/sbin2",
            "/proj/objects",
            "/proj/my_node_modules",
            "/proj/bin/src",
            "/proj/obj/file.txt",
            "",
        ],
    )
    def test_rejects_other_names(self, path: str) -> None:
        """Only an exact final-segment match counts."""
        assert PathMatcher().matches(path) is False

    def test_backslash_separators(self) -> None:
        """Windows-style separators behave like forward slashes."""
        matcher = PathMatcher()
        assert matcher.matches(r"C:\proj\src\obj") is True
        assert matcher.matches(r"C:\proj\obj\src") is False
        assert matcher.matches("C:\\proj/mixed\\node_modules") is True

    def test_trailing_separator_ignored(self) -> None:
        """A trailing separator does not hide the final segment."""
        matcher = PathMatcher()
        assert matcher.matches("/proj/bin/") is True
        assert matcher.matches("C:\\proj\\obj\\") is True

    def test_accepts_path_objects(self, tmp_path: Path) -> None:
        """pathlib paths are accepted as well as strings."""
        assert PathMatcher().matches(tmp_path / "node_modules") is True
        assert PathMatcher().matches(tmp_path / "dist") is False

    def test_custom_names(self) -> None:
        """Custom names replace the defaults and are case-folded."""
        matcher = PathMatcher(["Dist", "target"])
        assert matcher.names == frozenset({"dist", "target"})
        assert matcher.matches("/proj/DIST") is True
        assert matcher.matches("/proj/bin") is False

    def test_default_names(self) -> None:
        """Default matcher uses the built-in artifact names."""
        assert PathMatcher().names == frozenset(DEFAULT_ARTIFACT_NAMES)

    def test_empty_name_rejected(self) -> None:
        """Blank names are rejected."""
        with pytest.raises(ValueError, match="cannot be empty"):
            PathMatcher(["bin", "  "])

    def test_separator_in_name_rejected(self) -> None:
        """Names cannot contain path separators."""
        with pytest.raises(ValueError, match="path separator"):
            PathMatcher(["build/out"])
        with pytest.raises(ValueError, match="path separator"):
            PathMatcher(["build\\out"])

    def test_no_names_rejected(self) -> None:
        """At least one name is required."""
        with pytest.raises(ValueError, match="At least one"):
            PathMatcher([])
