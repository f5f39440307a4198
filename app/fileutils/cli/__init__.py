"""CLI package for fileutils.

This package contains the Typer application and all subcommands.
"""

from fileutils.cli.main import app

__all__ = ["app"]
