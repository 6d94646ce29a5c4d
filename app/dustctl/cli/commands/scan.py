"""Scan command implementation.

Lists artifact directories beneath a root with their sizes, without
modifying anything.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer

from dustctl.cli.display import create_matches_table, print_scan_summary
from dustctl.cli.types import OutputFormat, get_sweep_config, resolve_root, scan_root
from dustctl.sweep.sizer import SizeAggregator
from dustctl.utils.formatting import console, print_success


def scan(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Argument(help="Root directory to scan. Prompted for when omitted."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Report artifact directories and their total size.

    Examples:
        dustctl scan ~/projects
        dustctl scan ~/projects --format json
    """
    config = get_sweep_config(ctx)
    root = resolve_root(path)

    started = time.perf_counter()
    matched = scan_root(root, config)
    sizes = SizeAggregator(max_workers=config.max_workers).sizes(matched)
    elapsed = time.perf_counter() - started
    total = sum(sizes.values())

    if output_format == OutputFormat.JSON:
        data = {
            "root": str(matched.root),
            "total_bytes": total,
            "elapsed_seconds": round(elapsed, 3),
            "directories": [{"path": str(p), "size_bytes": sizes.get(p, 0)} for p in matched],
            "unreadable": [str(p) for p in matched.unreadable],
        }
        console.print_json(json.dumps(data))
        return

    if matched.is_empty:
        print_success("No artifact directories found.")
        return

    console.print(create_matches_table(matched, sizes))
    print_scan_summary(matched, total, elapsed)
