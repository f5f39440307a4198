"""Configuration commands.

Provides commands to show the effective configuration and to write a
default configuration file.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from fileutils.cli.types import get_config_from_context
from fileutils.core.config import ConfigError, FileUtilsConfig, save_config
from fileutils.core.paths import CONFIG_FILENAME, ensure_config_dir
from fileutils.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or initialize the configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration as JSON."""
    config = get_config_from_context(ctx)
    console.print_json(json.dumps(config.model_dump()))


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    if config_path is None:
        config_path = ensure_config_dir() / CONFIG_FILENAME

    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(FileUtilsConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
