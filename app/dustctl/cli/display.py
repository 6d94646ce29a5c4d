"""Shared Rich display functions for scan and deletion results.

Provides reusable table builders and summary printers used by the
scan and clean commands.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from dustctl.sweep.models import BatchReport, MatchedRootSet
from dustctl.utils.formatting import (
    console,
    format_elapsed,
    format_size,
    print_info,
    print_success,
    print_warning,
)


def create_matches_table(matched: MatchedRootSet, sizes: dict[Path, int]) -> Table:
    """Create a Rich table listing matched artifact directories.

    Args:
        matched: Directories found by the scanner.
        sizes: Size in bytes per matched directory.

    Returns:
        Rich Table with Path and Size columns.
    """
    table = Table(
        title=f"Artifact Directories under {escape(str(matched.root))}",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="artifact", overflow="fold")
    table.add_column("Size", style="size", justify="right", width=12)

    for path in matched:
        table.add_row(escape(str(path)), format_size(sizes.get(path, 0)))

    return table


def print_scan_summary(matched: MatchedRootSet, total_size: int, elapsed: float) -> None:
    """Print the pre-deletion summary line and any skipped directories."""
    console.print(
        f"\n[dim]Found {len(matched)} artifact directories, "
        f"{format_size(total_size)} total (scanned in {format_elapsed(elapsed)})[/dim]"
    )
    for path in matched.unreadable:
        print_warning(f"Skipped unreadable directory: {path}")


def create_results_table(report: BatchReport) -> Table:
    """Create a Rich table displaying per-directory deletion outcomes.

    Args:
        report: Completed batch report.

    Returns:
        Rich Table with Path, Status and Details columns.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold", overflow="fold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for outcome in report.outcomes:
        if outcome.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove"
        elif outcome.success:
            status = "[success]removed[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = outcome.error or "Unknown error"
        table.add_row(escape(str(outcome.path)), status, escape(detail))

    return table


def print_batch_summary(report: BatchReport) -> None:
    """Print removed/failed counts and elapsed time for a batch."""
    elapsed = format_elapsed(report.elapsed)
    dry_count = sum(1 for o in report.outcomes if o.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} directories would be removed.")
    elif report.failed_count:
        print_warning(
            f"{report.removed_count} removed, {report.failed_count} failed (took {elapsed})"
        )
    else:
        print_success(f"All {report.removed_count} directories removed (took {elapsed}).")
