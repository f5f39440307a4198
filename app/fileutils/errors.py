"""Exception taxonomy for fileutils.

Every error raised by the path algebra and the file operations derives
from FileUtilsError and carries the path that triggered it.
"""


class FileUtilsError(Exception):
    """Base exception for fileutils errors.

    Attributes:
        path: The path the failing operation was working on.
    """

    default_message = "File operation failed"

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(f"{message or self.default_message}: {path}")


class PathRelativeError(FileUtilsError):
    """Raised when an absolute-only operation receives a relative path."""

    default_message = "Path is relative"


class FileDoesNotExistError(FileUtilsError):
    """Raised when metadata is requested for a missing path."""

    default_message = "File does not exist"


class NotFoundError(FileUtilsError):
    """Raised when which() exhausts the search path."""

    default_message = "Executable not found in search path"


class MkdirMissingComponentPathError(FileUtilsError):
    """Raised when an intermediate directory of a mkdir target is missing."""

    default_message = "Missing component in path"


class MkdirDirnameAlreadyUsedError(FileUtilsError):
    """Raised when a non-directory already occupies a mkdir target."""

    default_message = "Directory name already used by a non-directory"


class RmDirNotEmptyError(FileUtilsError):
    """Raised when a non-recursive rm targets a non-empty directory."""

    default_message = "Directory not empty"


class CpCannotCopyDirToDirError(FileUtilsError):
    """Raised when copying a directory without recursion."""

    default_message = "Cannot copy directory to directory without recursion"


class CpCannotCopyDirToFileError(FileUtilsError):
    """Raised when copying a directory over an existing non-directory."""

    default_message = "Cannot copy directory to file"


class CpCannotCopyError(FileUtilsError):
    """Raised when the source is a link, fifo, device or socket."""

    default_message = "Cannot copy special file"


class CpNoSourceFileError(FileUtilsError):
    """Raised when the copy source does not exist."""

    default_message = "No source file"


class MvNoSourceFileError(FileUtilsError):
    """Raised when the move source does not exist."""

    default_message = "No source file"
