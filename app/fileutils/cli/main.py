"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from fileutils import __version__
from fileutils.cli.commands import config, cp, find, ls, mkdir, mv, rm, touch, which
from fileutils.core.config import ConfigError, get_config
from fileutils.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="fileutils",
    help="Portable file-tree utilities: ls, find, which, mkdir, touch, rm, cp, mv.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fileutils version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route log records to stderr through Rich."""
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to config file (default: ~/.config/fileutils/config.toml).",
        ),
    ] = None,
) -> None:
    """fileutils - portable file-tree utilities.

    Composable equivalents of common Unix file commands built on a
    path algebra and a predicate engine.
    """
    configure_logging(verbose, quiet)

    try:
        loaded = get_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = loaded
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="ls")(ls.ls_command)
app.command(name="find")(find.find_command)
app.command(name="test")(find.test_command)
app.command(name="which")(which.which_command)
app.command(name="mkdir")(mkdir.mkdir_command)
app.command(name="touch")(touch.touch_command)
app.command(name="rm")(rm.rm_command)
app.command(name="cp")(cp.cp_command)
app.command(name="mv")(mv.mv_command)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
