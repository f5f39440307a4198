"""Unit tests for FileOperator.

Tests which, mkdir, touch, rm, cp and mv against a temporary directory,
including interactive policies, the copy decision table and error cases.
"""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest
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
from fileutils.metadata import FileKind
from fileutils.operations import FORCE, Ask, FileOperator
from fileutils.predicates import GlobMatcher, IsDir, IsFile, Match


def _recording_policy(answer: bool = True) -> tuple[Ask, list[str]]:
    """Create an Ask policy that records every path it is asked about."""
    asked: list[str] = []

    def decide(path: str) -> bool:
        asked.append(path)
        return answer

    return Ask(decide), asked


def _snapshot(root: Path) -> dict[str, str | None]:
    """Map every entry below root to its content (None for directories)."""
    return {
        str(path.relative_to(root)): None if path.is_dir() else path.read_text()
        for path in sorted(root.rglob("*"))
    }


class TestQueries:
    """Tests for stat, size, test and find."""

    def test_stat_and_size(self, sample_tree: Path) -> None:
        """stat and size report the entry metadata."""
        op = FileOperator()
        target = str(sample_tree / "a.txt")

        assert op.stat(target).kind == FileKind.FILE
        assert op.size(target) == 5

    def test_size_missing_raises(self, tmp_path: Path) -> None:
        """Direct metadata queries are not fail-safe."""
        with pytest.raises(FileDoesNotExistError):
            FileOperator().size(str(tmp_path / "missing"))

    def test_test(self, sample_tree: Path) -> None:
        """test evaluates a predicate on one path."""
        op = FileOperator()

        assert op.test(IsDir(), str(sample_tree / "sub")) is True
        assert op.test(IsFile(), str(sample_tree / "missing")) is False

    def test_find_with_glob_matcher(self, sample_tree: Path) -> None:
        """The operator's matcher is used by Match predicates."""
        op = FileOperator(GlobMatcher())
        root = str(sample_tree)

        result = op.find(Match("*.txt"), root)

        assert result == [f"{root}/a.txt", f"{root}/sub/c.txt"]


class TestWhich:
    """Tests for FileOperator.which."""

    @pytest.fixture
    def bin_dirs(self, tmp_path: Path) -> tuple[Path, Path]:
        """Two search directories; only the second holds the program."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        tool = second / "tool"
        tool.write_text("#!/bin/sh\n")
        tool.chmod(0o755)
        return first, second

    def test_finds_executable(self, bin_dirs: tuple[Path, Path]) -> None:
        """The first directory holding an executable entry wins."""
        first, second = bin_dirs

        result = FileOperator().which("tool", [str(first), str(second)])

        assert result == f"{second}/tool"

    def test_skips_non_executable(self, bin_dirs: tuple[Path, Path]) -> None:
        """Entries without execute bits are ignored."""
        first, second = bin_dirs
        (first / "tool").write_text("data")
        (first / "tool").chmod(0o644)

        assert FileOperator().which("tool", [str(first), str(second)]) == f"{second}/tool"

    def test_skips_directories(self, bin_dirs: tuple[Path, Path]) -> None:
        """Directories with execute bits are not programs."""
        first, _ = bin_dirs
        (first / "subdir").mkdir(mode=0o755)

        with pytest.raises(NotFoundError) as exc_info:
            FileOperator().which("subdir", [str(first)])

        assert exc_info.value.path == "subdir"

    def test_not_found(self, bin_dirs: tuple[Path, Path]) -> None:
        """An exhausted search path raises NotFoundError."""
        with pytest.raises(NotFoundError):
            FileOperator().which("missing-tool", [str(path) for path in bin_dirs])

    def test_defaults_to_path_variable(self, bin_dirs: tuple[Path, Path]) -> None:
        """Without an explicit list the PATH variable is searched."""
        first, second = bin_dirs
        search = os.pathsep.join([str(first), str(second)])

        with patch.dict(os.environ, {"PATH": search}):
            result = FileOperator().which("tool")

        assert result == f"{second}/tool"


class TestMkdir:
    """Tests for FileOperator.mkdir."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """A missing directory is created."""
        target = tmp_path / "new"

        FileOperator().mkdir(str(target))

        assert target.is_dir()

    def test_explicit_mode(self, tmp_path: Path) -> None:
        """The given mode is applied (within the umask)."""
        target = tmp_path / "private"

        FileOperator().mkdir(str(target), mode=0o700)

        assert stat.S_IMODE(target.stat().st_mode) == 0o700

    def test_default_mode_from_operator(self, tmp_path: Path) -> None:
        """The operator's default mode is used when none is given."""
        target = tmp_path / "private"

        FileOperator(default_mode=0o700).mkdir(str(target))

        assert stat.S_IMODE(target.stat().st_mode) == 0o700

    def test_existing_directory_is_noop(self, tmp_path: Path) -> None:
        """Creating an existing directory does nothing."""
        FileOperator().mkdir(str(tmp_path))

        assert tmp_path.is_dir()

    def test_name_used_by_file(self, tmp_path: Path) -> None:
        """A file occupying the path raises MkdirDirnameAlreadyUsedError."""
        target = tmp_path / "taken"
        target.write_text("x")

        with pytest.raises(MkdirDirnameAlreadyUsedError):
            FileOperator().mkdir(str(target))

    def test_missing_component(self, tmp_path: Path) -> None:
        """A missing ancestor raises without parent=True."""
        with pytest.raises(MkdirMissingComponentPathError) as exc_info:
            FileOperator().mkdir(str(tmp_path / "a" / "b"))

        assert exc_info.value.path == str(tmp_path / "a" / "b")

    def test_parents(self, tmp_path: Path) -> None:
        """parent=True creates every missing ancestor; repeating is a no-op."""
        target = tmp_path / "a" / "b" / "c"
        op = FileOperator()

        op.mkdir(str(target), parent=True)
        op.mkdir(str(target), parent=True)

        assert (tmp_path / "a").is_dir()
        assert (tmp_path / "a" / "b").is_dir()
        assert target.is_dir()

    def test_parents_blocked_by_file(self, tmp_path: Path) -> None:
        """A file among the ancestors raises MkdirDirnameAlreadyUsedError."""
        (tmp_path / "file").write_text("x")

        with pytest.raises(MkdirDirnameAlreadyUsedError) as exc_info:
            FileOperator().mkdir(str(tmp_path / "file" / "sub"), parent=True)

        assert exc_info.value.path == str(tmp_path / "file")


class TestTouch:
    """Tests for FileOperator.touch."""

    def test_creates_empty_file(self, tmp_path: Path) -> None:
        """A missing file is created empty."""
        target = tmp_path / "new.txt"

        FileOperator().touch(str(target))

        assert target.is_file()
        assert target.read_text() == ""

    def test_no_create(self, tmp_path: Path) -> None:
        """create=False leaves a missing path alone."""
        target = tmp_path / "absent.txt"

        FileOperator().touch(str(target), create=False)

        assert not target.exists()

    def test_updates_timestamp_preserving_content(self, tmp_path: Path) -> None:
        """An existing file keeps its content and gets a fresh mtime."""
        target = tmp_path / "old.txt"
        target.write_text("keep me")
        os.utime(target, (0, 0))

        FileOperator().touch(str(target))

        assert target.read_text() == "keep me"
        assert target.stat().st_mtime > 0

    def test_directory(self, tmp_path: Path) -> None:
        """Directories are touched too."""
        target = tmp_path / "dir"
        target.mkdir()
        os.utime(target, (0, 0))

        FileOperator().touch(str(target), create=False)

        assert target.stat().st_mtime > 0


class TestRm:
    """Tests for FileOperator.rm."""

    def test_removes_file(self, sample_tree: Path) -> None:
        """A file is unlinked."""
        target = sample_tree / "a.txt"

        FileOperator().rm(str(target))

        assert not target.exists()

    def test_removes_empty_directory(self, sample_tree: Path) -> None:
        """An empty directory is removed without recursion."""
        FileOperator().rm(str(sample_tree / "zdir"))

        assert not (sample_tree / "zdir").exists()

    def test_non_empty_directory(self, sample_tree: Path) -> None:
        """A non-empty directory needs recurse=True."""
        with pytest.raises(RmDirNotEmptyError):
            FileOperator().rm(str(sample_tree / "sub"))

        assert (sample_tree / "sub" / "c.txt").exists()

    def test_missing_path(self, tmp_path: Path) -> None:
        """Removing a missing path raises FileDoesNotExistError."""
        with pytest.raises(FileDoesNotExistError):
            FileOperator().rm(str(tmp_path / "missing"))

    def test_recursive_deepest_first(self, tmp_path: Path) -> None:
        """Recursive removal deletes children before their directories."""
        d = tmp_path / "d"
        (d / "x").mkdir(parents=True)
        (d / "x" / "y.txt").write_text("y")
        policy, asked = _recording_policy()

        FileOperator().rm(str(d), recurse=True, interactive=policy)

        assert asked == [str(d / "x" / "y.txt"), str(d / "x"), str(d)]
        assert not d.exists()

    def test_recursive_whole_tree(self, sample_tree: Path) -> None:
        """Every entry of a tree is removed."""
        FileOperator().rm(str(sample_tree), recurse=True)

        assert not sample_tree.exists()

    def test_recursive_on_file(self, sample_tree: Path) -> None:
        """recurse=True on a file removes just the file."""
        FileOperator().rm(str(sample_tree / "b.py"), recurse=True)

        assert not (sample_tree / "b.py").exists()

    def test_recursive_keeps_link_target(self, sample_tree: Path, tmp_path: Path) -> None:
        """Links to directories are unlinked, their targets kept."""
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("x")
        (sample_tree / "link").symlink_to(outside)

        FileOperator().rm(str(sample_tree), recurse=True)

        assert not sample_tree.exists()
        assert (outside / "keep.txt").exists()

    def test_declined_file(self, sample_tree: Path) -> None:
        """A declined removal is a silent no-op."""
        policy, asked = _recording_policy(answer=False)

        FileOperator().rm(str(sample_tree / "a.txt"), interactive=policy)

        assert asked == [str(sample_tree / "a.txt")]
        assert (sample_tree / "a.txt").exists()

    def test_declined_child_aborts_parent(self, tmp_path: Path) -> None:
        """A kept child makes removing its directory fail."""
        d = tmp_path / "d"
        d.mkdir()
        (d / "keep.txt").write_text("x")
        (d / "drop.txt").write_text("x")
        policy = Ask(lambda path: not path.endswith("keep.txt"))

        with pytest.raises(RmDirNotEmptyError):
            FileOperator().rm(str(d), recurse=True, interactive=policy)

        assert (d / "keep.txt").exists()
        assert not (d / "drop.txt").exists()


class TestCp:
    """Tests for FileOperator.cp."""

    def test_file_to_file(self, sample_tree: Path) -> None:
        """A file is copied to a new path."""
        dst = sample_tree / "copy.txt"

        FileOperator().cp(str(sample_tree / "a.txt"), str(dst))

        assert dst.read_text() == "alpha"

    def test_file_to_directory(self, sample_tree: Path) -> None:
        """Copying into a directory keeps the basename."""
        FileOperator().cp(str(sample_tree / "a.txt"), str(sample_tree / "zdir"))

        assert (sample_tree / "zdir" / "a.txt").read_text() == "alpha"

    def test_small_buffer(self, tmp_path: Path) -> None:
        """Content larger than the buffer is copied in chunks."""
        src = tmp_path / "big.bin"
        payload = bytes(range(256)) * 10
        src.write_bytes(payload)

        FileOperator(buffer_size=7).cp(str(src), str(tmp_path / "out.bin"))

        assert (tmp_path / "out.bin").read_bytes() == payload

    def test_relative_paths_use_cwd(self, sample_tree: Path) -> None:
        """Relative paths are resolved against the given cwd."""
        FileOperator().cp("a.txt", "sub/a-copy.txt", cwd=str(sample_tree))

        assert (sample_tree / "sub" / "a-copy.txt").read_text() == "alpha"

    def test_missing_source(self, tmp_path: Path) -> None:
        """A missing source raises CpNoSourceFileError."""
        with pytest.raises(CpNoSourceFileError):
            FileOperator().cp(str(tmp_path / "missing"), str(tmp_path / "dst"))

    def test_missing_source_into_directory(self, sample_tree: Path) -> None:
        """A missing source raises even when the destination is a directory."""
        with pytest.raises(CpNoSourceFileError):
            FileOperator().cp(str(sample_tree / "missing"), str(sample_tree / "zdir"))

    def test_copy_onto_itself(self, sample_tree: Path) -> None:
        """Copying a path onto itself changes nothing."""
        before = _snapshot(sample_tree)
        op = FileOperator()

        op.cp(str(sample_tree / "a.txt"), str(sample_tree / "a.txt"))
        op.cp(str(sample_tree / "a.txt"), str(sample_tree))
        op.cp(str(sample_tree / "sub"), str(sample_tree / "sub" / ".." / "sub"), recurse=True)

        assert _snapshot(sample_tree) == before

    def test_overwrite_asks(self, sample_tree: Path) -> None:
        """An existing destination is only replaced when the policy agrees."""
        dst = sample_tree / "sub" / "c.txt"
        policy, asked = _recording_policy(answer=False)

        FileOperator().cp(str(sample_tree / "a.txt"), str(dst), interactive=policy)

        assert asked == [str(dst)]
        assert dst.read_text() == "gamma"

    def test_overwrite_forced(self, sample_tree: Path) -> None:
        """FORCE replaces an existing destination."""
        dst = sample_tree / "sub" / "c.txt"

        FileOperator().cp(str(sample_tree / "a.txt"), str(dst), interactive=FORCE)

        assert dst.read_text() == "alpha"

    def test_directory_without_recurse(self, sample_tree: Path, tmp_path: Path) -> None:
        """Directories need recurse=True; the destination is left untouched."""
        d2 = tmp_path / "d2"
        d2.mkdir()
        (d2 / "existing.txt").write_text("e")

        with pytest.raises(CpCannotCopyDirToDirError):
            FileOperator().cp(str(sample_tree), str(d2))

        assert _snapshot(d2) == {"existing.txt": "e"}

    def test_directory_to_missing_without_recurse(self, sample_tree: Path, tmp_path: Path) -> None:
        """A missing destination does not lift the recursion requirement."""
        with pytest.raises(CpCannotCopyDirToDirError):
            FileOperator().cp(str(sample_tree), str(tmp_path / "new"))

        assert not (tmp_path / "new").exists()

    def test_directory_to_file(self, sample_tree: Path) -> None:
        """A directory cannot replace an existing file."""
        with pytest.raises(CpCannotCopyDirToFileError):
            FileOperator().cp(str(sample_tree / "sub"), str(sample_tree / "a.txt"), recurse=True)

    def test_directory_to_missing(self, sample_tree: Path, tmp_path: Path) -> None:
        """The destination is created and receives the whole tree."""
        dst = tmp_path / "copy"

        FileOperator().cp(str(sample_tree), str(dst), recurse=True)

        assert _snapshot(dst) == _snapshot(sample_tree)

    def test_directory_merge(self, sample_tree: Path, tmp_path: Path) -> None:
        """Copying onto an existing directory merges the content into it."""
        dst = tmp_path / "dst"
        (dst / "sub").mkdir(parents=True)
        (dst / "sub" / "c.txt").write_text("old")
        (dst / "own.txt").write_text("own")

        FileOperator().cp(str(sample_tree), str(dst), recurse=True)

        assert (dst / "own.txt").read_text() == "own"
        assert (dst / "sub" / "c.txt").read_text() == "gamma"
        assert (dst / "sub" / "deeper" / "d.py").read_text() == "delta"
        assert (dst / "a.txt").read_text() == "alpha"

    def test_symlink_source(self, sample_tree: Path) -> None:
        """Symbolic links are not copied."""
        link = sample_tree / "link"
        link.symlink_to(sample_tree / "a.txt")

        with pytest.raises(CpCannotCopyError) as exc_info:
            FileOperator().cp(str(link), str(sample_tree / "out"))

        assert exc_info.value.path == str(link)

    def test_fifo_source(self, tmp_path: Path) -> None:
        """Named pipes are not copied."""
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)

        with pytest.raises(CpCannotCopyError):
            FileOperator().cp(str(fifo), str(tmp_path / "out"))


class TestMv:
    """Tests for FileOperator.mv."""

    def test_rename_file(self, sample_tree: Path) -> None:
        """A file is renamed to the destination."""
        FileOperator().mv(str(sample_tree / "a.txt"), str(sample_tree / "renamed.txt"))

        assert not (sample_tree / "a.txt").exists()
        assert (sample_tree / "renamed.txt").read_text() == "alpha"

    def test_into_directory(self, sample_tree: Path) -> None:
        """Moving onto a directory moves the source inside it."""
        FileOperator().mv(str(sample_tree / "a.txt"), str(sample_tree / "zdir"))

        assert (sample_tree / "zdir" / "a.txt").read_text() == "alpha"

    def test_directory_into_directory(self, sample_tree: Path) -> None:
        """Directories move with their content."""
        FileOperator().mv(str(sample_tree / "sub"), str(sample_tree / "zdir"))

        assert (sample_tree / "zdir" / "sub" / "deeper" / "d.py").read_text() == "delta"
        assert not (sample_tree / "sub").exists()

    def test_replaces_existing_file(self, sample_tree: Path) -> None:
        """An existing file destination is replaced under FORCE."""
        FileOperator().mv(str(sample_tree / "a.txt"), str(sample_tree / "b.py"))

        assert (sample_tree / "b.py").read_text() == "alpha"
        assert not (sample_tree / "a.txt").exists()

    def test_declined_replacement(self, sample_tree: Path) -> None:
        """Declining the replacement leaves both paths untouched."""
        policy, asked = _recording_policy(answer=False)

        FileOperator().mv(
            str(sample_tree / "a.txt"), str(sample_tree / "b.py"), interactive=policy
        )

        assert asked == [str(sample_tree / "b.py")]
        assert (sample_tree / "a.txt").read_text() == "alpha"
        assert (sample_tree / "b.py").read_text() == "print('b')\n"

    def test_missing_source(self, sample_tree: Path) -> None:
        """A missing source raises and the destination survives."""
        with pytest.raises(MvNoSourceFileError):
            FileOperator().mv(str(sample_tree / "missing"), str(sample_tree / "b.py"))

        assert (sample_tree / "b.py").exists()

    def test_same_path(self, sample_tree: Path) -> None:
        """Moving a path onto itself is a no-op."""
        before = _snapshot(sample_tree)

        FileOperator().mv("a.txt", "./sub/../a.txt", cwd=str(sample_tree))

        assert _snapshot(sample_tree) == before

    def test_relative_paths_use_cwd(self, sample_tree: Path) -> None:
        """Relative paths are resolved against the given cwd."""
        FileOperator().mv("b.py", "zdir", cwd=str(sample_tree))

        assert (sample_tree / "zdir" / "b.py").exists()

    def test_replaces_empty_directory_inside_destination(self, tmp_path: Path) -> None:
        """An empty directory at dst/basename(src) is replaced, not descended into."""
        (tmp_path / "x" / "a").mkdir(parents=True)
        (tmp_path / "x" / "a" / "f").write_text("f")
        (tmp_path / "y" / "a").mkdir(parents=True)

        FileOperator().mv(str(tmp_path / "x" / "a"), str(tmp_path / "y"))

        assert (tmp_path / "y" / "a" / "f").read_text() == "f"
        assert not (tmp_path / "y" / "a" / "a").exists()
        assert not (tmp_path / "x" / "a").exists()

    def test_non_empty_directory_inside_destination(self, tmp_path: Path) -> None:
        """A non-empty directory at dst/basename(src) is not replaced."""
        (tmp_path / "x" / "a").mkdir(parents=True)
        (tmp_path / "x" / "a" / "f").write_text("f")
        (tmp_path / "y" / "a").mkdir(parents=True)
        (tmp_path / "y" / "a" / "g").write_text("g")

        with pytest.raises(RmDirNotEmptyError):
            FileOperator().mv(str(tmp_path / "x" / "a"), str(tmp_path / "y"))

        assert (tmp_path / "x" / "a" / "f").exists()
        assert not (tmp_path / "y" / "a" / "a").exists()

    def test_into_own_parent_is_noop(self, sample_tree: Path) -> None:
        """Moving an entry into the directory that already holds it changes nothing."""
        before = _snapshot(sample_tree)

        FileOperator().mv(str(sample_tree / "a.txt"), str(sample_tree))

        assert _snapshot(sample_tree) == before
