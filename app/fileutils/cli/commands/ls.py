"""ls command implementation.

Lists the entries of a directory.
"""

import json
from typing import Annotated

import typer

from fileutils.cli.types import get_operator, report_errors
from fileutils.utils.formatting import console, create_listing_table, format_listing_row


def ls_command(
    ctx: typer.Context,
    directory: Annotated[str, typer.Argument(help="Directory to list.")] = ".",
    long: Annotated[
        bool,
        typer.Option("--long", "-l", help="Show mode, kind, size and mtime."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """List the entries of a directory."""
    operator = get_operator(ctx)

    with report_errors():
        entries = operator.ls(directory)

        if json_output:
            data = []
            for entry in entries:
                meta = operator.stat(entry)
                data.append(
                    {
                        "path": entry,
                        "kind": meta.kind.value,
                        "permissions": oct(meta.permissions),
                        "size": meta.size,
                        "mtime": meta.mtime,
                    }
                )
            console.print_json(json.dumps(data))
            return

        if long:
            table = create_listing_table(directory)
            for entry in entries:
                table.add_row(*format_listing_row(entry, operator.stat(entry)))
            console.print(table)
            return

    for entry in entries:
        typer.echo(entry)
