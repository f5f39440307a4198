"""File metadata models.

This module defines the data structures returned by metadata providers:
the kind of a filesystem entry and an immutable snapshot of its stat
information.
"""

import stat
from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    """Kind of filesystem entry.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (the link itself, not its target).
        FIFO: Named pipe.
        BLOCK_DEVICE: Block special device.
        CHAR_DEVICE: Character special device.
        SOCKET: Unix domain socket.
        UNKNOWN: Kind could not be determined.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "fifo"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "FileKind":
        """Derive the kind from a raw st_mode value."""
        for check, kind in _MODE_CHECKS:
            if check(mode):
                return kind
        return cls.UNKNOWN


_MODE_CHECKS = (
    (stat.S_ISREG, FileKind.FILE),
    (stat.S_ISDIR, FileKind.DIRECTORY),
    (stat.S_ISLNK, FileKind.SYMLINK),
    (stat.S_ISFIFO, FileKind.FIFO),
    (stat.S_ISBLK, FileKind.BLOCK_DEVICE),
    (stat.S_ISCHR, FileKind.CHAR_DEVICE),
    (stat.S_ISSOCK, FileKind.SOCKET),
)


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Snapshot of the stat information of a filesystem entry.

    Produced fresh for every query; never cached.

    Attributes:
        kind: Kind of the entry.
        permissions: Permission bits (mode & 0o7777), including
            set-uid, set-gid and sticky bits.
        size: Size in bytes.
        uid: Owner user id.
        gid: Owner group id.
        mtime: Last modification time as a POSIX timestamp.
        device: Id of the device containing the entry.
        rdevice: Device id for special files (0 otherwise).
        inode: Inode number.
    """

    kind: FileKind
    permissions: int
    size: int
    uid: int
    gid: int
    mtime: float
    device: int
    rdevice: int
    inode: int
