"""Predicate engine.

Declarative file tests combined into boolean trees, compiled once into
evaluators over paths.
"""

from fileutils.predicates.compiler import (
    EvaluationContext,
    Evaluator,
    compile_predicate,
    fail_safe,
)
from fileutils.predicates.matchers import GlobMatcher, PatternMatcher, RegexMatcher
from fileutils.predicates.tree import (
    AlwaysFalse,
    AlwaysTrue,
    And,
    Exists,
    HasExtension,
    HasSameDeviceAndInode,
    HasSetUserId,
    HasStickyBit,
    IsCurrentDir,
    IsDevBlock,
    IsDevChar,
    IsDir,
    IsExec,
    IsFile,
    IsLink,
    IsNewerThan,
    IsOlderThan,
    IsOwnedByGroupId,
    IsOwnedByUserId,
    IsParentDir,
    IsPipe,
    IsReadable,
    IsSetGroupId,
    IsSocket,
    IsWriteable,
    Match,
    Not,
    Or,
    Predicate,
    SizeNotNull,
)

__all__ = [
    "AlwaysFalse",
    "AlwaysTrue",
    "And",
    "EvaluationContext",
    "Evaluator",
    "Exists",
    "GlobMatcher",
    "HasExtension",
    "HasSameDeviceAndInode",
    "HasSetUserId",
    "HasStickyBit",
    "IsCurrentDir",
    "IsDevBlock",
    "IsDevChar",
    "IsDir",
    "IsExec",
    "IsFile",
    "IsLink",
    "IsNewerThan",
    "IsOlderThan",
    "IsOwnedByGroupId",
    "IsOwnedByUserId",
    "IsParentDir",
    "IsPipe",
    "IsReadable",
    "IsSetGroupId",
    "IsSocket",
    "IsWriteable",
    "Match",
    "Not",
    "Or",
    "PatternMatcher",
    "Predicate",
    "RegexMatcher",
    "SizeNotNull",
    "compile_predicate",
    "fail_safe",
]
