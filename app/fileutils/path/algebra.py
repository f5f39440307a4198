"""Path algebra on component sequences.

A path is exploded into an ordered list of components. An absolute path
starts with an empty marker component, so "/usr/bin" explodes to
["", "usr", "bin"] and "usr/bin" to ["usr", "bin"]. All other helpers in
this module (normalization, absolute/relative conversion, basename,
dirname, extensions) work on that representation and never touch the
filesystem.
"""

import os

from fileutils.errors import PathRelativeError

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."
EXTENSION_SEPARATOR = "."


def explode(path: str) -> list[str]:
    """Split a path into its components.

    Args:
        path: Path to split.

    Returns:
        Component list. Absolute paths begin with an empty component; a
        trailing separator does not produce a trailing empty component.
    """
    if not path:
        return []
    components = path.split(SEPARATOR)
    if components[-1] == "":
        components.pop()
    return components


def implode(components: list[str]) -> str:
    """Join components back into a path.

    An empty leading component re-creates the leading separator.
    """
    if components and components[0] == "":
        return SEPARATOR + SEPARATOR.join(components[1:])
    return SEPARATOR.join(components)


def is_relative(path: str) -> bool:
    """Check whether a path is relative (does not start with the separator)."""
    return not path.startswith(SEPARATOR)


def is_current(name: str) -> bool:
    """Check whether a component is the current-dir marker."""
    return name == CURRENT_DIR


def is_parent(name: str) -> bool:
    """Check whether a component is the parent-dir marker."""
    return name == PARENT_DIR


def concat(dirname: str, name: str) -> str:
    """Append a name to a directory path."""
    if not dirname or dirname.endswith(SEPARATOR):
        return dirname + name
    return dirname + SEPARATOR + name


def basename(path: str) -> str:
    """Return the last component of a path ("" for the root)."""
    components = explode(path)
    return components[-1] if components else ""


def dirname(path: str) -> str:
    """Return the directory part of a path.

    Never returns an empty string: a bare name yields the current-dir
    marker and a top-level absolute path yields the root.
    """
    components = explode(path)
    if not components or components == [""]:
        return SEPARATOR if components else CURRENT_DIR
    parent = components[:-1]
    if not parent:
        return CURRENT_DIR
    return implode(parent)


def get_extension(path: str) -> str | None:
    """Return the extension of the basename without its leading dot.

    Returns:
        The extension, or None if the basename has no extension.
        Dotfiles such as ".bashrc" have no extension.
    """
    name = basename(path)
    head, sep, ext = name.rpartition(EXTENSION_SEPARATOR)
    if not sep or not head:
        return None
    return ext


def check_extension(path: str, extension: str) -> bool:
    """Check the extension of a path; a leading dot on `extension` is ignored."""
    return get_extension(path) == extension.removeprefix(EXTENSION_SEPARATOR)


def path_list_of_string(value: str) -> list[str]:
    """Split a PATH-like string on the platform path-list separator."""
    return [entry for entry in value.split(os.pathsep) if entry]


def reduce_components(components: list[str]) -> list[str]:
    """Remove "." and "name/.." sequences from a component list.

    Single left-to-right pass. At each position, a parent marker two
    places ahead drops the following component and the marker, and a
    current-dir marker right after drops that marker; the scan then
    retries the same position. It never steps back, so the result is not
    fully normalized when parent markers follow each other:
    "/a/b/../.." reduces to "/a/..".
    """
    reduced = list(components)
    position = 0
    while position < len(reduced):
        if position + 2 < len(reduced) and reduced[position + 2] == PARENT_DIR:
            del reduced[position + 1 : position + 3]
        elif position + 1 < len(reduced) and reduced[position + 1] == CURRENT_DIR:
            del reduced[position + 1]
        else:
            position += 1
    return reduced


def _check_absolute(path: str) -> None:
    if is_relative(path):
        raise PathRelativeError(path)


def reduce(path: str) -> str:
    """Normalize an absolute path, removing "." and "dir/.." components.

    Args:
        path: Absolute path.

    Returns:
        The reduced path.

    Raises:
        PathRelativeError: If `path` is relative.
    """
    _check_absolute(path)
    return implode(reduce_components(explode(path)))


def make_absolute(base: str, path: str) -> str:
    """Resolve `path` against the absolute directory `base`.

    Absolute paths are returned unchanged.

    Raises:
        PathRelativeError: If `path` is relative and `base` is relative too.
    """
    if not is_relative(path):
        return path
    _check_absolute(base)
    base_components = reduce_components(explode(base))
    return implode(reduce_components(base_components + explode(path)))


def make_relative(base: str, path: str) -> str:
    """Express the absolute `path` relative to the absolute directory `base`.

    Relative paths are returned unchanged. When both reduce to the same
    path the current-dir marker is returned.

    Raises:
        PathRelativeError: If `path` is absolute and `base` is relative.
    """
    if is_relative(path):
        return path
    _check_absolute(base)
    base_components = reduce_components(explode(base))
    path_components = reduce_components(explode(path))

    common = 0
    for base_part, path_part in zip(base_components, path_components, strict=False):
        if base_part != path_part:
            break
        common += 1

    relative = [PARENT_DIR] * (len(base_components) - common) + path_components[common:]
    return implode(relative) or CURRENT_DIR
