"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from dustctl.core.theme import get_theme

_KB = 1024
_MB = 1024 * _KB
_GB = 1024 * _MB


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable string.

    Values below 1 KB are shown as whole bytes; larger values use two
    decimals in the largest 1024-based unit up to GB.

    Args:
        size_bytes: Non-negative byte count.

    Returns:
        String such as "0 B", "1.50 KB" or "1.00 GB".
    """
    if size_bytes >= _GB:
        return f"{size_bytes / _GB:.2f} GB"
    if size_bytes >= _MB:
        return f"{size_bytes / _MB:.2f} MB"
    if size_bytes >= _KB:
        return f"{size_bytes / _KB:.2f} KB"
    return f"{size_bytes} B"


def format_elapsed(seconds: float) -> str:
    """Format a duration in seconds for progress summaries."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
