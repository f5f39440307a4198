"""find and test commands.

Both commands turn their filter options into a predicate tree: find
searches a directory tree with it, test evaluates it on a single path
and reports the result through the exit code.
"""

import json
from typing import Annotated

import typer

from fileutils.cli.types import KindChoice, build_predicate, get_operator, report_errors
from fileutils.utils.formatting import console

KindOption = Annotated[
    KindChoice | None,
    typer.Option("--type", "-t", help="Entry kind: f, d, l, p, s, b or c."),
]
NameOption = Annotated[
    str | None,
    typer.Option(
        "--name",
        "-n",
        help=(
            "Pattern matched against the whole path from its start, "
            "e.g. '.*/foo$', or '*/foo' with --glob."
        ),
    ),
]
GlobOption = Annotated[
    bool,
    typer.Option("--glob", "-g", help="Treat --name as a shell glob instead of a regex."),
]
ExtensionOption = Annotated[
    str | None,
    typer.Option("--ext", "-e", help="Required file extension."),
]
ExecutableOption = Annotated[bool, typer.Option("--executable", help="Any execute bit set.")]
ReadableOption = Annotated[bool, typer.Option("--readable", help="Any read bit set.")]
WritableOption = Annotated[bool, typer.Option("--writable", help="Any write bit set.")]
NonEmptyOption = Annotated[bool, typer.Option("--nonempty", help="Size greater than zero.")]


def find_command(
    ctx: typer.Context,
    root: Annotated[str, typer.Argument(help="Directory to search.")] = ".",
    kind: KindOption = None,
    name: NameOption = None,
    glob: GlobOption = False,
    extension: ExtensionOption = None,
    executable: ExecutableOption = False,
    readable: ReadableOption = False,
    writable: WritableOption = False,
    nonempty: NonEmptyOption = False,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
) -> None:
    """Recursively search a directory tree.

    Examples:
        fileutils find src --type f --ext py
        fileutils find . --name '*.log' --glob
    """
    operator = get_operator(ctx, glob=glob)
    predicate = build_predicate(
        kind=kind,
        name=name,
        extension=extension,
        executable=executable,
        readable=readable,
        writable=writable,
        nonempty=nonempty,
    )

    with report_errors():
        results = operator.find(predicate, root)

    if json_output:
        console.print_json(json.dumps(results))
        return

    for path in results:
        typer.echo(path)


def test_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Path to test.")],
    kind: KindOption = None,
    name: NameOption = None,
    glob: GlobOption = False,
    extension: ExtensionOption = None,
    executable: ExecutableOption = False,
    readable: ReadableOption = False,
    writable: WritableOption = False,
    nonempty: NonEmptyOption = False,
) -> None:
    """Test a path; exit with 0 if every condition holds, 1 otherwise."""
    operator = get_operator(ctx, glob=glob)
    predicate = build_predicate(
        kind=kind,
        name=name,
        extension=extension,
        executable=executable,
        readable=readable,
        writable=writable,
        nonempty=nonempty,
    )

    with report_errors():
        holds = operator.test(predicate, path)
    if not holds:
        raise typer.Exit(code=1)
