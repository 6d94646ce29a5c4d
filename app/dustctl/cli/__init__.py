"""CLI package for dustctl.

This package contains the Typer application and all subcommands.
"""

from dustctl.cli.main import app

__all__ = ["app"]
