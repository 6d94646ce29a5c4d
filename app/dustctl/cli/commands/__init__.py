"""CLI commands for dustctl.

This package contains all subcommand implementations.
"""

from dustctl.cli.commands import clean, config, scan

__all__ = ["clean", "config", "scan"]
