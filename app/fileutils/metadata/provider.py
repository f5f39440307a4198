"""Metadata and directory-listing providers.

Providers are the only place where the predicate engine and the tree
walker touch the filesystem, so alternative backends (or test doubles)
can be injected in their place.
"""

import os
import stat
from typing import Protocol

from fileutils.errors import FileDoesNotExistError
from fileutils.metadata.models import FileKind, FileMetadata


class MetadataProvider(Protocol):
    """Stat-like lookups on a path."""

    def stat(self, path: str) -> FileMetadata:
        """Return fresh metadata for `path`.

        Raises:
            FileDoesNotExistError: If the path does not exist.
            OSError: For any other I/O failure.
        """
        ...


class ListingProvider(Protocol):
    """Directory listing."""

    def list(self, dirname: str) -> list[str]:
        """Return the entry names of a directory (order is provider-defined)."""
        ...


class OsMetadataProvider:
    """Metadata provider backed by os.lstat.

    Symbolic links are reported as links rather than followed.
    """

    def stat(self, path: str) -> FileMetadata:
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise FileDoesNotExistError(path) from e

        return FileMetadata(
            kind=FileKind.from_mode(st.st_mode),
            permissions=stat.S_IMODE(st.st_mode),
            size=st.st_size,
            uid=st.st_uid,
            gid=st.st_gid,
            mtime=st.st_mtime,
            device=st.st_dev,
            rdevice=st.st_rdev,
            inode=st.st_ino,
        )


class OsListingProvider:
    """Listing provider backed by os.listdir, sorted by name."""

    def list(self, dirname: str) -> list[str]:
        return sorted(os.listdir(dirname))
