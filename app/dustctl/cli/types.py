"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from dustctl.core.config import SweepConfig, require_config
from dustctl.sweep.models import MatchedRootSet
from dustctl.sweep.scanner import RootNotFoundError, TreeScanner
from dustctl.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def get_sweep_config(ctx: typer.Context) -> SweepConfig:
    """Load the sweep settings, honoring the global --config option.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    obj = ctx.find_root().obj or {}
    config_path: Path | None = obj.get("config_path")
    return require_config(config_path).sweep


def resolve_root(path: Path | None) -> Path:
    """Return the root directory, prompting for it when not given."""
    if path is not None:
        return path
    answer: str = typer.prompt("Root directory to scan")
    return Path(answer.strip()).expanduser()


def scan_root(root: Path, config: SweepConfig) -> MatchedRootSet:
    """Scan ``root`` with the configured artifact names.

    Raises:
        typer.Exit: If the root does not exist or is not a directory.
    """
    scanner = TreeScanner(config.build_matcher())
    try:
        return scanner.scan(root)
    except RootNotFoundError as e:
        print_error(f"Path does not exist or is not a directory: {e.root}")
        raise typer.Exit(code=1) from e
