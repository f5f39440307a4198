"""mkdir command implementation."""

from typing import Annotated

import typer

from fileutils.cli.types import get_operator, parse_mode, report_errors


def mkdir_command(
    ctx: typer.Context,
    paths: Annotated[list[str], typer.Argument(help="Directories to create.")],
    parent: Annotated[
        bool,
        typer.Option("--parents", "-p", help="Create missing parent directories."),
    ] = False,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Octal permission bits, e.g. 700."),
    ] = None,
) -> None:
    """Create directories."""
    operator = get_operator(ctx)
    real_mode = parse_mode(mode)

    with report_errors():
        for path in paths:
            operator.mkdir(path, parent=parent, mode=real_mode)
