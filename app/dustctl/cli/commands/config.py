"""Configuration commands.

Provides commands to show the effective configuration, write the
default configuration file, and print its location.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dustctl.core.config import AppConfig, ConfigError, config_to_dict, require_config, save_config
from dustctl.core.paths import get_config_path
from dustctl.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or initialize the dustctl configuration.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the effective configuration as JSON."""
    path = _config_path(ctx)
    config = require_config(path)
    if not path.exists():
        console.print(
            f"[dim]No config file at {escape(str(path))}, showing defaults[/dim]",
            soft_wrap=True,
        )
    console.print_json(json.dumps(config.model_dump(mode="json")))


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default configuration file."""
    path = _config_path(ctx)
    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(AppConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")
    console.print(f"[dim]{json.dumps(config_to_dict(AppConfig()))}[/dim]")


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the configuration file location."""
    console.print(str(_config_path(ctx)), soft_wrap=True)
