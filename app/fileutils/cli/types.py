"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

import typer

from fileutils.core.config import FileUtilsConfig, get_config
from fileutils.errors import FileUtilsError
from fileutils.operations.interactive import FORCE, Ask, Interactive
from fileutils.operations.operator import FileOperator
from fileutils.predicates.matchers import GlobMatcher, PatternMatcher, RegexMatcher
from fileutils.predicates.tree import (
    AlwaysTrue,
    HasExtension,
    IsDevBlock,
    IsDevChar,
    IsDir,
    IsExec,
    IsFile,
    IsLink,
    IsPipe,
    IsReadable,
    IsSocket,
    IsWriteable,
    Match,
    Predicate,
    SizeNotNull,
)
from fileutils.utils.formatting import print_error


class KindChoice(str, Enum):
    """Entry kinds accepted by --type (find(1) letters)."""

    FILE = "f"
    DIRECTORY = "d"
    SYMLINK = "l"
    FIFO = "p"
    SOCKET = "s"
    BLOCK = "b"
    CHAR = "c"


_KIND_PREDICATES: dict[KindChoice, type[Predicate]] = {
    KindChoice.FILE: IsFile,
    KindChoice.DIRECTORY: IsDir,
    KindChoice.SYMLINK: IsLink,
    KindChoice.FIFO: IsPipe,
    KindChoice.SOCKET: IsSocket,
    KindChoice.BLOCK: IsDevBlock,
    KindChoice.CHAR: IsDevChar,
}


def get_config_from_context(ctx: typer.Context) -> FileUtilsConfig:
    """Return the configuration loaded by the main callback.

    Falls back to loading the default config file when the command is
    invoked without the main callback (e.g. from a sub-application).
    """
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("config"), FileUtilsConfig):
        return ctx.obj["config"]
    return get_config()


def get_matcher(config: FileUtilsConfig, glob: bool = False) -> PatternMatcher:
    """Get the pattern matcher selected by the config or the --glob flag."""
    if glob or config.matcher == "glob":
        return GlobMatcher()
    return RegexMatcher()


def get_operator(ctx: typer.Context, glob: bool = False) -> FileOperator:
    """Build a FileOperator configured from the CLI context.

    Args:
        ctx: Typer context carrying the loaded configuration.
        glob: Force glob-style patterns for name filters.

    Returns:
        FileOperator instance.
    """
    config = get_config_from_context(ctx)
    return FileOperator(
        get_matcher(config, glob),
        buffer_size=config.buffer_size,
        default_mode=config.mkdir_mode,
    )


def _confirm(path: str) -> bool:
    return typer.confirm(f"Proceed with {path}?", default=False)


def get_interactive(ctx: typer.Context, interactive: bool) -> Interactive:
    """Get the confirmation policy for destructive commands.

    Args:
        ctx: Typer context carrying the loaded configuration.
        interactive: Value of the command's --interactive flag.

    Returns:
        Ask (prompting on the terminal) or FORCE.
    """
    if interactive or get_config_from_context(ctx).interactive:
        return Ask(_confirm)
    return FORCE


def build_predicate(
    kind: KindChoice | None = None,
    name: str | None = None,
    extension: str | None = None,
    executable: bool = False,
    readable: bool = False,
    writable: bool = False,
    nonempty: bool = False,
) -> Predicate:
    """Combine CLI filter options into a single predicate.

    Every given option must hold. With no options the predicate is AlwaysTrue.
    """
    tests: list[Predicate] = []
    if kind is not None:
        tests.append(_KIND_PREDICATES[kind]())
    if name is not None:
        tests.append(Match(name))
    if extension is not None:
        tests.append(HasExtension(extension))
    if executable:
        tests.append(IsExec())
    if readable:
        tests.append(IsReadable())
    if writable:
        tests.append(IsWriteable())
    if nonempty:
        tests.append(SizeNotNull())

    if not tests:
        return AlwaysTrue()
    predicate = tests[0]
    for test in tests[1:]:
        predicate = predicate & test
    return predicate


def parse_mode(value: str | None) -> int | None:
    """Parse an octal permission string such as "755"."""
    if value is None:
        return None
    try:
        mode = int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value}") from e
    if not 0 <= mode <= 0o7777:
        raise typer.BadParameter(f"Mode out of range: {value}")
    return mode


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn FileUtilsError into an error message and exit code 1."""
    try:
        yield
    except FileUtilsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"{e.strerror or e}: {e.filename}" if e.filename else str(e))
        raise typer.Exit(code=1) from e
