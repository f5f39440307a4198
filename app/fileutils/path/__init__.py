"""Path algebra module.

Pure string manipulation of paths: splitting into components,
normalization and conversion between absolute and relative forms.
"""

from fileutils.path.algebra import (
    CURRENT_DIR,
    PARENT_DIR,
    SEPARATOR,
    basename,
    check_extension,
    concat,
    dirname,
    explode,
    get_extension,
    implode,
    is_current,
    is_parent,
    is_relative,
    make_absolute,
    make_relative,
    path_list_of_string,
    reduce,
)

__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "SEPARATOR",
    "basename",
    "check_extension",
    "concat",
    "dirname",
    "explode",
    "get_extension",
    "implode",
    "is_current",
    "is_parent",
    "is_relative",
    "make_absolute",
    "make_relative",
    "path_list_of_string",
    "reduce",
]
