"""cp command implementation."""

from typing import Annotated

import typer

from fileutils.cli.commands.rm import InteractiveOption, RecurseOption
from fileutils.cli.types import get_interactive, get_operator, report_errors


def cp_command(
    ctx: typer.Context,
    src: Annotated[str, typer.Argument(help="Source path.")],
    dst: Annotated[str, typer.Argument(help="Destination path.")],
    recurse: RecurseOption = False,
    interactive: InteractiveOption = False,
) -> None:
    """Copy a file or directory hierarchy.

    Copying a directory requires --recursive. Copying a directory onto an
    existing directory merges its content into it.
    """
    operator = get_operator(ctx)
    policy = get_interactive(ctx, interactive)

    with report_errors():
        operator.cp(src, dst, recurse=recurse, interactive=policy)
