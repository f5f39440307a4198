"""Predicate tree nodes.

A predicate tree is a boolean expression over file-attribute tests. Leaf
nodes test one property of a path; And, Or and Not combine them. Nodes
are immutable and may also be combined with the ``&``, ``|`` and ``~``
operators::

    IsFile() & (HasExtension("py") | Match(r".*/setup\\.cfg$"))

Each node knows how to build its own evaluator; use
:func:`fileutils.predicates.compiler.compile_predicate` to compile a tree.
"""

from __future__ import annotations

import stat
from dataclasses import dataclass
from typing import ClassVar

from fileutils.metadata.models import FileKind
from fileutils.path.algebra import basename, check_extension, is_current, is_parent
from fileutils.predicates.compiler import EvaluationContext, Evaluator, compile_predicate


class Predicate:
    """Base class of every predicate node."""

    __slots__ = ()

    def build(self, context: EvaluationContext) -> Evaluator:
        """Build the unguarded evaluator of this node."""
        raise NotImplementedError

    def __and__(self, other: Predicate) -> And:
        return And(self, other)

    def __or__(self, other: Predicate) -> Or:
        return Or(self, other)

    def __invert__(self) -> Not:
        return Not(self)


# === Kind tests ===


@dataclass(frozen=True, slots=True)
class _KindTest(Predicate):
    kind: ClassVar[FileKind]

    def build(self, context: EvaluationContext) -> Evaluator:
        kind = self.kind
        return lambda path: context.metadata.stat(path).kind == kind


@dataclass(frozen=True, slots=True)
class IsFile(_KindTest):
    """Path exists and is a regular file."""

    kind = FileKind.FILE


@dataclass(frozen=True, slots=True)
class IsDir(_KindTest):
    """Path exists and is a directory."""

    kind = FileKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class IsLink(_KindTest):
    """Path exists and is a symbolic link."""

    kind = FileKind.SYMLINK


@dataclass(frozen=True, slots=True)
class IsPipe(_KindTest):
    """Path exists and is a named pipe."""

    kind = FileKind.FIFO


@dataclass(frozen=True, slots=True)
class IsSocket(_KindTest):
    """Path exists and is a socket."""

    kind = FileKind.SOCKET


@dataclass(frozen=True, slots=True)
class IsDevBlock(_KindTest):
    """Path exists and is block special."""

    kind = FileKind.BLOCK_DEVICE


@dataclass(frozen=True, slots=True)
class IsDevChar(_KindTest):
    """Path exists and is character special."""

    kind = FileKind.CHAR_DEVICE


# === Permission tests ===


@dataclass(frozen=True, slots=True)
class _PermissionTest(Predicate):
    mask: ClassVar[int]

    def build(self, context: EvaluationContext) -> Evaluator:
        mask = self.mask
        return lambda path: (context.metadata.stat(path).permissions & mask) != 0


@dataclass(frozen=True, slots=True)
class IsReadable(_PermissionTest):
    """Any read bit is set."""

    mask = stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


@dataclass(frozen=True, slots=True)
class IsWriteable(_PermissionTest):
    """Any write bit is set."""

    mask = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


@dataclass(frozen=True, slots=True)
class IsExec(_PermissionTest):
    """Any execute bit is set."""

    mask = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True, slots=True)
class HasSetUserId(_PermissionTest):
    """The set-user-ID bit is set."""

    mask = stat.S_ISUID


@dataclass(frozen=True, slots=True)
class IsSetGroupId(_PermissionTest):
    """The set-group-ID bit is set."""

    mask = stat.S_ISGID


@dataclass(frozen=True, slots=True)
class HasStickyBit(_PermissionTest):
    """The sticky bit is set."""

    mask = stat.S_ISVTX


# === Existence, size and ownership ===


@dataclass(frozen=True, slots=True)
class Exists(Predicate):
    """Path exists (a dangling symlink exists)."""

    def build(self, context: EvaluationContext) -> Evaluator:
        def evaluate(path: str) -> bool:
            context.metadata.stat(path)
            return True

        return evaluate


@dataclass(frozen=True, slots=True)
class SizeNotNull(Predicate):
    """Path exists and has a size greater than zero."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: context.metadata.stat(path).size > 0


@dataclass(frozen=True, slots=True)
class IsOwnedByUserId(Predicate):
    """Path is owned by the effective user id."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: context.metadata.stat(path).uid == context.effective_uid()


@dataclass(frozen=True, slots=True)
class IsOwnedByGroupId(Predicate):
    """Path is owned by the effective group id."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: context.metadata.stat(path).gid == context.effective_gid()


# === Two-path comparisons ===
# These ignore the evaluated path and compare the two given paths.


@dataclass(frozen=True, slots=True)
class IsNewerThan(Predicate):
    """`first` was modified more recently than `second`."""

    first: str
    second: str

    def build(self, context: EvaluationContext) -> Evaluator:
        stat_of = context.metadata.stat
        return lambda _path: stat_of(self.first).mtime > stat_of(self.second).mtime


@dataclass(frozen=True, slots=True)
class IsOlderThan(Predicate):
    """`first` was modified before `second`."""

    first: str
    second: str

    def build(self, context: EvaluationContext) -> Evaluator:
        stat_of = context.metadata.stat
        return lambda _path: stat_of(self.first).mtime < stat_of(self.second).mtime


@dataclass(frozen=True, slots=True)
class HasSameDeviceAndInode(Predicate):
    """`first` and `second` have the same device and inode numbers."""

    first: str
    second: str

    def build(self, context: EvaluationContext) -> Evaluator:
        def identity(path: str) -> tuple[int, int, int]:
            meta = context.metadata.stat(path)
            return (meta.device, meta.rdevice, meta.inode)

        return lambda _path: identity(self.first) == identity(self.second)


# === Name tests ===


@dataclass(frozen=True, slots=True)
class Match(Predicate):
    """The path matches `pattern` according to the injected pattern matcher."""

    pattern: str

    def build(self, context: EvaluationContext) -> Evaluator:
        matcher = context.matcher
        compiled = matcher.compile(self.pattern)
        return lambda path: matcher.test(compiled, path)


@dataclass(frozen=True, slots=True)
class HasExtension(Predicate):
    """The basename has the given extension (leading dot optional)."""

    extension: str

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: check_extension(path, self.extension)


@dataclass(frozen=True, slots=True)
class IsCurrentDir(Predicate):
    """The basename is the current-dir marker."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: is_current(basename(path))


@dataclass(frozen=True, slots=True)
class IsParentDir(Predicate):
    """The basename is the parent-dir marker."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda path: is_parent(basename(path))


# === Constants ===


@dataclass(frozen=True, slots=True)
class AlwaysTrue(Predicate):
    """Always true."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda _path: True


@dataclass(frozen=True, slots=True)
class AlwaysFalse(Predicate):
    """Always false."""

    def build(self, context: EvaluationContext) -> Evaluator:
        return lambda _path: False


# === Combinators ===


@dataclass(frozen=True, slots=True)
class And(Predicate):
    """Both operands hold; `right` is not evaluated when `left` is false."""

    left: Predicate
    right: Predicate

    def build(self, context: EvaluationContext) -> Evaluator:
        left = compile_predicate(self.left, context)
        right = compile_predicate(self.right, context)
        return lambda path: left(path) and right(path)


@dataclass(frozen=True, slots=True)
class Or(Predicate):
    """Either operand holds; `right` is not evaluated when `left` is true."""

    left: Predicate
    right: Predicate

    def build(self, context: EvaluationContext) -> Evaluator:
        left = compile_predicate(self.left, context)
        right = compile_predicate(self.right, context)
        return lambda path: left(path) or right(path)


@dataclass(frozen=True, slots=True)
class Not(Predicate):
    """The operand does not hold."""

    operand: Predicate

    def build(self, context: EvaluationContext) -> Evaluator:
        operand = compile_predicate(self.operand, context)
        return lambda path: not operand(path)
