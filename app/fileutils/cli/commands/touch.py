"""touch command implementation."""

from typing import Annotated

import typer

from fileutils.cli.types import get_operator, report_errors


def touch_command(
    ctx: typer.Context,
    paths: Annotated[list[str], typer.Argument(help="Files to touch.")],
    no_create: Annotated[
        bool,
        typer.Option("--no-create", "-c", help="Do not create missing files."),
    ] = False,
) -> None:
    """Update file timestamps, creating missing files."""
    operator = get_operator(ctx)

    with report_errors():
        for path in paths:
            operator.touch(path, create=not no_create)
