"""CLI commands for fileutils.

This package contains all subcommand implementations.
"""

from fileutils.cli.commands import config, cp, find, ls, mkdir, mv, rm, touch, which

__all__ = ["config", "cp", "find", "ls", "mkdir", "mv", "rm", "touch", "which"]
