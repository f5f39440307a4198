"""which command implementation.

Locates an executable in the search path.
"""

from typing import Annotated

import typer

from fileutils.cli.types import get_config_from_context, get_operator, report_errors
from fileutils.path.algebra import path_list_of_string


def which_command(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Executable name.")],
    search_path: Annotated[
        str | None,
        typer.Option(
            "--path",
            "-p",
            help="Search path (os.pathsep separated). Defaults to the config or PATH.",
        ),
    ] = None,
) -> None:
    """Print the first executable named NAME found in the search path."""
    operator = get_operator(ctx)

    directories: list[str] | None
    if search_path is not None:
        directories = path_list_of_string(search_path)
    else:
        directories = get_config_from_context(ctx).search_path

    with report_errors():
        typer.echo(operator.which(name, directories))
