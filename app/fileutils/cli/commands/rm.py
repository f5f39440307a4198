"""rm command implementation."""

from typing import Annotated

import typer

from fileutils.cli.types import get_interactive, get_operator, report_errors

RecurseOption = Annotated[
    bool,
    typer.Option("--recursive", "-r", help="Operate on directories recursively."),
]
InteractiveOption = Annotated[
    bool,
    typer.Option("--interactive", "-i", help="Ask before each destructive step."),
]


def rm_command(
    ctx: typer.Context,
    paths: Annotated[list[str], typer.Argument(help="Paths to remove.")],
    recurse: RecurseOption = False,
    interactive: InteractiveOption = False,
) -> None:
    """Remove files and directories."""
    operator = get_operator(ctx)
    policy = get_interactive(ctx, interactive)

    with report_errors():
        for path in paths:
            operator.rm(path, recurse=recurse, interactive=policy)
