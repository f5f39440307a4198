"""fileutils - portable file-tree utilities.

Path algebra, a composable predicate engine and the file operations
built on them (ls, filter, test, find, which, mkdir, touch, rm, cp, mv).
"""

__version__ = "0.1.0"

from fileutils.errors import (  # noqa: E402
    CpCannotCopyDirToDirError,
    CpCannotCopyDirToFileError,
    CpCannotCopyError,
    CpNoSourceFileError,
    FileDoesNotExistError,
    FileUtilsError,
    MkdirDirnameAlreadyUsedError,
    MkdirMissingComponentPathError,
    MvNoSourceFileError,
    NotFoundError,
    PathRelativeError,
    RmDirNotEmptyError,
)
from fileutils.operations import FORCE, Ask, FileOperator, Force  # noqa: E402

__all__ = [
    "FORCE",
    "Ask",
    "CpCannotCopyDirToDirError",
    "CpCannotCopyDirToFileError",
    "CpCannotCopyError",
    "CpNoSourceFileError",
    "FileDoesNotExistError",
    "FileOperator",
    "FileUtilsError",
    "Force",
    "MkdirDirnameAlreadyUsedError",
    "MkdirMissingComponentPathError",
    "MvNoSourceFileError",
    "NotFoundError",
    "PathRelativeError",
    "RmDirNotEmptyError",
    "__version__",
]
