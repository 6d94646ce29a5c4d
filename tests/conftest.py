"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


def write_file(path: Path, size: int) -> Path:
    """Create ``path`` (and parents) containing ``size`` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def make_file() -> Callable[[Path, int], Path]:
    """Factory creating a file of a given size, parents included."""
    return write_file


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config is never read."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Sample project with nested artifact directories.

    Layout::

        proj/
            README.md                 (100 B)
            src/obj/a.o               (1000 B)
            src/main.c                (50 B)
            obj/bin/tool              (2000 B)
            obj/x.pdb                 (300 B)
            web/node_modules/pkg/index.js  (4096 B)
            web/package.json          (10 B)
    """
    root = tmp_path / "proj"
    write_file(root / "README.md", 100)
    write_file(root / "src" / "obj" / "a.o", 1000)
    write_file(root / "src" / "main.c", 50)
    write_file(root / "obj" / "bin" / "tool", 2000)
    write_file(root / "obj" / "x.pdb", 300)
    write_file(root / "web" / "node_modules" / "pkg" / "index.js", 4096)
    write_file(root / "web" / "package.json", 10)
    return root
