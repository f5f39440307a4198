"""mv command implementation."""

from typing import Annotated

import typer

from fileutils.cli.commands.rm import InteractiveOption
from fileutils.cli.types import get_interactive, get_operator, report_errors


def mv_command(
    ctx: typer.Context,
    src: Annotated[str, typer.Argument(help="Source path.")],
    dst: Annotated[str, typer.Argument(help="Destination path or directory.")],
    interactive: InteractiveOption = False,
) -> None:
    """Move or rename a file or directory."""
    operator = get_operator(ctx)
    policy = get_interactive(ctx, interactive)

    with report_errors():
        operator.mv(src, dst, interactive=policy)
