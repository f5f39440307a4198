"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import stat
import sys
from datetime import datetime

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from fileutils.metadata.models import FileKind, FileMetadata

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "kind.directory": "bold #0e8ac8",
        "kind.symlink": "#d44ebc",
        "kind.special": "#faf870",
    }
)


def _detect_color_system() -> str | None:
    """Return "truecolor" for interactive terminals, None to let Rich auto-detect."""
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_listing_table(title: str) -> Table:
    """Create a pre-configured table for long directory listings.

    Args:
        title: Table title.

    Returns:
        Rich Table with mode, kind, size, mtime and path columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Mode", style="muted", no_wrap=True)
    table.add_column("Kind", width=12)
    table.add_column("Size", style="info", justify="right")
    table.add_column("Modified", style="muted")
    table.add_column("Path", no_wrap=True)
    return table


def format_listing_row(path: str, meta: FileMetadata) -> tuple[str, str, str, str, str]:
    """Format one entry as a row of the listing table.

    Args:
        path: Entry path.
        meta: Entry metadata.

    Returns:
        Tuple of (mode, kind, size, mtime, path) with Rich markup.
    """
    if meta.kind == FileKind.DIRECTORY:
        style = "kind.directory"
    elif meta.kind == FileKind.SYMLINK:
        style = "kind.symlink"
    elif meta.kind == FileKind.FILE:
        style = "text"
    else:
        style = "kind.special"

    mode = stat.filemode(meta.permissions | _type_bits(meta.kind))
    mtime = datetime.fromtimestamp(meta.mtime).strftime("%Y-%m-%d %H:%M")
    return (
        mode,
        f"[{style}]{meta.kind.value}[/]",
        format_size(meta.size),
        mtime,
        f"[{style}]{path}[/]",
    )


def _type_bits(kind: FileKind) -> int:
    return {
        FileKind.FILE: stat.S_IFREG,
        FileKind.DIRECTORY: stat.S_IFDIR,
        FileKind.SYMLINK: stat.S_IFLNK,
        FileKind.FIFO: stat.S_IFIFO,
        FileKind.BLOCK_DEVICE: stat.S_IFBLK,
        FileKind.CHAR_DEVICE: stat.S_IFCHR,
        FileKind.SOCKET: stat.S_IFSOCK,
    }.get(kind, 0)


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
