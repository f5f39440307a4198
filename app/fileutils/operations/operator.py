"""File operations.

FileOperator provides portable equivalents of test, ls, find, which,
mkdir, touch, rm, cp and mv. It is built on the path algebra, the
predicate engine and the tree walker; the pattern matcher used by Match
predicates is chosen when the operator is constructed.

Recursive operations are not atomic: the first failure aborts the
remaining work and leaves the tree partially modified.
"""

import errno
import logging
import os
import shutil

from fileutils.errors import (
    CpCannotCopyDirToDirError,
    CpCannotCopyDirToFileError,
    CpCannotCopyError,
    CpNoSourceFileError,
    FileDoesNotExistError,
    MkdirDirnameAlreadyUsedError,
    MkdirMissingComponentPathError,
    MvNoSourceFileError,
    NotFoundError,
    RmDirNotEmptyError,
)
from fileutils.metadata.models import FileKind, FileMetadata
from fileutils.metadata.provider import ListingProvider, MetadataProvider, OsMetadataProvider
from fileutils.operations.interactive import FORCE, Interactive
from fileutils.operations.walker import TreeWalker
from fileutils.path.algebra import (
    basename,
    concat,
    dirname,
    explode,
    make_absolute,
    make_relative,
    path_list_of_string,
    reduce,
)
from fileutils.predicates.compiler import EvaluationContext, compile_predicate
from fileutils.predicates.matchers import PatternMatcher, RegexMatcher
from fileutils.predicates.tree import AlwaysTrue, Exists, IsDir, IsExec, Not, Predicate

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o755
DEFAULT_BUFFER_SIZE = 64 * 1024


class FileOperator:
    """Portable file-tree operations.

    Attributes:
        _metadata: Provider answering stat queries.
        _context: Evaluation context shared by every compiled predicate.
        _walker: Tree walker used by ls, filter and find.
        _buffer_size: Chunk size used when streaming file contents.
        _default_mode: Permission bits used by mkdir when none are given.
    """

    def __init__(
        self,
        matcher: PatternMatcher | None = None,
        *,
        metadata: MetadataProvider | None = None,
        listing: ListingProvider | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        default_mode: int = DEFAULT_MODE,
    ) -> None:
        """Initialize the FileOperator.

        Args:
            matcher: Pattern matcher for Match predicates. Defaults to RegexMatcher.
            metadata: Metadata provider. Defaults to OsMetadataProvider.
            listing: Directory listing provider. Defaults to OsListingProvider.
            buffer_size: Chunk size in bytes for file copies.
            default_mode: Permission bits for new directories.
        """
        self._metadata = metadata or OsMetadataProvider()
        self._context = EvaluationContext(
            metadata=self._metadata,
            matcher=matcher or RegexMatcher(),
        )
        self._walker = TreeWalker(self._context, listing)
        self._buffer_size = buffer_size
        self._default_mode = default_mode

    # === Queries ===

    def stat(self, path: str) -> FileMetadata:
        """Return the metadata of `path`.

        Raises:
            FileDoesNotExistError: If the path does not exist.
        """
        return self._metadata.stat(path)

    def size(self, path: str) -> int:
        """Return the size of `path` in bytes.

        Raises:
            FileDoesNotExistError: If the path does not exist.
        """
        return self._metadata.stat(path).size

    def test(self, predicate: Predicate, path: str) -> bool:
        """Evaluate a predicate on a single path.

        A missing path makes metadata-based tests false instead of raising.
        """
        return compile_predicate(predicate, self._context)(path)

    def ls(self, dirname: str) -> list[str]:
        """List the entries of a directory as paths joined onto `dirname`."""
        return self._walker.ls(dirname)

    def filter(self, predicate: Predicate, paths: list[str]) -> list[str]:
        """Keep the paths satisfying `predicate`."""
        return self._walker.filter(predicate, paths)

    def find(self, predicate: Predicate, root: str) -> list[str]:
        """Recursively collect the paths under `root` satisfying `predicate`."""
        return self._walker.find(predicate, root)

    def which(self, name: str, path: list[str] | None = None) -> str:
        """Locate an executable in a search path.

        Args:
            name: Executable name.
            path: Directories to search in order. Defaults to the PATH
                environment variable.

        Returns:
            The first ``dir/name`` that is executable and not a directory.

        Raises:
            NotFoundError: If no directory contains a matching entry.
        """
        search_path = path if path is not None else path_list_of_string(os.environ.get("PATH", ""))
        is_program = compile_predicate(IsExec() & Not(IsDir()), self._context)

        for directory in search_path:
            candidate = concat(directory, name)
            if is_program(candidate):
                return candidate

        raise NotFoundError(name)

    # === Mutations ===

    def mkdir(self, path: str, *, parent: bool = False, mode: int | None = None) -> None:
        """Create a directory.

        Args:
            path: Directory to create.
            parent: If True, create every missing ancestor first.
            mode: Permission bits (subject to the umask). Defaults to the
                operator's default mode.

        Raises:
            MkdirDirnameAlreadyUsedError: If a non-directory occupies `path`.
            MkdirMissingComponentPathError: If an ancestor is missing and
                `parent` is False.
        """
        real_mode = self._default_mode if mode is None else mode
        if parent:
            self._mkdir_parents(path, real_mode)
        else:
            self._mkdir_simple(path, real_mode)

    def _mkdir_parents(self, path: str, mode: int) -> None:
        if not self.test(Exists(), path):
            self._mkdir_parents(dirname(path), mode)
        self._mkdir_simple(path, mode)

    def _mkdir_simple(self, path: str, mode: int) -> None:
        if self.test(Exists(), path):
            if self.test(IsDir(), path):
                return
            raise MkdirDirnameAlreadyUsedError(path)

        logger.debug("Creating directory %s (mode %o)", path, mode)
        try:
            os.mkdir(path, mode)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise MkdirMissingComponentPathError(path) from e

    def touch(self, path: str, *, create: bool = True) -> None:
        """Update the access and modification times of `path`.

        The content of an existing file is preserved.

        Args:
            path: Path to touch.
            create: If True, create an empty file when `path` is missing.
        """
        if self.test(Exists(), path):
            logger.debug("Updating timestamps of %s", path)
            os.utime(path)
        elif create:
            logger.debug("Creating empty file %s", path)
            with open(path, "ab"):
                pass

    def rm(
        self,
        path: str,
        *,
        recurse: bool = False,
        interactive: Interactive = FORCE,
    ) -> None:
        """Remove a file or directory.

        Args:
            path: Path to remove.
            recurse: If True, remove a directory and everything below it,
                deepest entries first.
            interactive: Policy consulted for every entry; a declined entry
                is skipped.

        Raises:
            RmDirNotEmptyError: If a directory to remove is not empty.
            FileDoesNotExistError: If an entry to remove does not exist.
        """
        if recurse and self.test(IsDir(), path):
            entries = self.find(AlwaysTrue(), path)
            # Deepest first so that no directory precedes its descendants.
            entries.sort(key=lambda entry: len(explode(entry)), reverse=True)
            for entry in entries:
                self._rm_simple(entry, interactive)

        self._rm_simple(path, interactive)

    def _rm_simple(self, path: str, interactive: Interactive) -> None:
        if not interactive.confirm(path):
            logger.info("Skipping removal of %s", path)
            return

        logger.debug("Removing %s", path)
        if self.test(IsDir(), path):
            try:
                os.rmdir(path)
            except OSError as e:
                if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                    raise RmDirNotEmptyError(path) from e
                raise
        else:
            try:
                os.unlink(path)
            except FileNotFoundError as e:
                raise FileDoesNotExistError(path) from e

    def cp(
        self,
        src: str,
        dst: str,
        *,
        recurse: bool = False,
        interactive: Interactive = FORCE,
        cwd: str | None = None,
    ) -> None:
        """Copy files and directory hierarchies.

        Behavior depends on whether `src` and `dst` are directories:

        - directory to existing directory: merge-copy with `recurse`,
          CpCannotCopyDirToDirError without;
        - directory to missing path: with `recurse`, create `dst` then
          merge-copy; CpCannotCopyDirToFileError if `dst` is a file;
        - file to directory: copy to ``dst/basename(src)``;
        - file to file: direct copy.

        Args:
            src: Source path.
            dst: Destination path.
            recurse: Allow copying directories.
            interactive: Policy consulted before overwriting an existing entry.
            cwd: Directory relative paths are resolved against. Defaults
                to the process working directory.

        Raises:
            CpCannotCopyDirToDirError: If `src` is a directory and `recurse` is False.
            CpCannotCopyDirToFileError: If `src` is a directory and `dst` is not.
            CpNoSourceFileError: If `src` does not exist.
            CpCannotCopyError: If a source entry is a link, fifo, device or socket.
        """
        cwd = cwd or os.getcwd()
        src_abs = make_absolute(cwd, src)
        dst_abs = make_absolute(cwd, dst)

        src_is_dir = self.test(IsDir(), src_abs)
        dst_is_dir = self.test(IsDir(), dst_abs)

        if src_is_dir:
            if not recurse:
                raise CpCannotCopyDirToDirError(src)
            if not dst_is_dir:
                if self.test(Exists(), dst_abs):
                    raise CpCannotCopyDirToFileError(dst)
                self.mkdir(dst_abs)
            self._copy_tree(src_abs, dst_abs, interactive)
            return

        if not self.test(Exists(), src_abs):
            raise CpNoSourceFileError(src)

        if dst_is_dir:
            dst_abs = make_absolute(dst_abs, basename(src_abs))
        self._copy_entry(src_abs, dst_abs, interactive)

    def _copy_tree(self, src_abs: str, dst_abs: str, interactive: Interactive) -> None:
        # find() lists each directory before its content, so parents are
        # created before their children are copied.
        for source in self.find(AlwaysTrue(), src_abs):
            target = make_absolute(dst_abs, make_relative(src_abs, source))
            self._copy_entry(source, target, interactive)

    def _copy_entry(self, src: str, dst: str, interactive: Interactive) -> None:
        if reduce(src) == reduce(dst):
            logger.debug("Not copying %s onto itself", src)
            return

        if self.test(Exists(), dst) and not interactive.confirm(dst):
            logger.info("Skipping copy over %s", dst)
            return

        kind = self.stat(src).kind
        if kind == FileKind.FILE:
            logger.debug("Copying %s -> %s", src, dst)
            with open(src, "rb") as fsrc, open(dst, "wb") as fdst:
                shutil.copyfileobj(fsrc, fdst, self._buffer_size)
        elif kind == FileKind.DIRECTORY:
            self.mkdir(dst)
        else:
            raise CpCannotCopyError(src)

    def mv(
        self,
        src: str,
        dst: str,
        *,
        interactive: Interactive = FORCE,
        cwd: str | None = None,
    ) -> None:
        """Move or rename a file or directory.

        Moving onto an existing directory moves `src` inside it. An entry
        already at the final place is removed (non-recursively) once the
        policy agrees, then `src` is renamed.

        Args:
            src: Source path.
            dst: Destination path.
            interactive: Policy consulted before replacing an existing entry.
            cwd: Directory relative paths are resolved against. Defaults
                to the process working directory.

        Raises:
            MvNoSourceFileError: If `src` does not exist.
            RmDirNotEmptyError: If the entry to replace is a non-empty directory.
        """
        cwd = cwd or os.getcwd()
        src_abs = make_absolute(cwd, src)
        dst_abs = make_absolute(cwd, dst)

        if reduce(src_abs) == reduce(dst_abs):
            return

        if not self.test(Exists(), src_abs):
            raise MvNoSourceFileError(src)

        # Only the destination given by the caller can mean "move inside".
        if self.test(IsDir(), dst_abs):
            dst_abs = make_absolute(dst_abs, basename(src_abs))
            if reduce(src_abs) == reduce(dst_abs):
                return

        if self.test(Exists(), dst_abs):
            if not interactive.confirm(dst_abs):
                logger.info("Skipping move over %s", dst_abs)
                return
            self.rm(dst_abs)

        logger.debug("Renaming %s -> %s", src_abs, dst_abs)
        os.rename(src_abs, dst_abs)
