"""Clean command implementation.

Scans for artifact directories, reports them with their total size,
asks for confirmation and removes them concurrently.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from dustctl.cli.display import (
    create_matches_table,
    create_results_table,
    print_batch_summary,
    print_scan_summary,
)
from dustctl.cli.types import get_sweep_config, resolve_root, scan_root
from dustctl.sweep.operator import DeletionExecutor
from dustctl.sweep.sizer import SizeAggregator
from dustctl.utils.formatting import console, print_info, print_success


def clean(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Argument(help="Root directory to clean. Prompted for when omitted."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove artifact directories (bin, obj, node_modules) beneath a root.

    Examples:
        dustctl clean ~/projects
        dustctl clean ~/projects --dry-run
        dustctl clean ~/projects --yes
    """
    config = get_sweep_config(ctx)
    root = resolve_root(path)

    started = time.perf_counter()
    matched = scan_root(root, config)

    if matched.is_empty:
        print_success("No artifact directories found.")
        return

    sizes = SizeAggregator(max_workers=config.max_workers).sizes(matched)
    elapsed = time.perf_counter() - started

    console.print(create_matches_table(matched, sizes))
    print_scan_summary(matched, sum(sizes.values()), elapsed)

    # Confirm unless --yes or --dry-run
    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nRemove {len(matched)} directories?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    # The same set shown above is the set removed; no re-scan in between
    executor = DeletionExecutor(max_workers=config.max_workers, dry_run=dry_run)
    report = executor.delete_all(matched)

    console.print(create_results_table(report))
    print_batch_summary(report)

    if report.failed_count:
        raise typer.Exit(code=1)
