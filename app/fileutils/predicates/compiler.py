"""Compilation of predicate trees into evaluators.

compile_predicate() walks a predicate tree once and returns a plain
callable taking a path. Every compiled node is guarded so that a missing
file makes the test evaluate to False instead of raising.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fileutils.errors import FileDoesNotExistError
from fileutils.metadata.provider import MetadataProvider, OsMetadataProvider
from fileutils.predicates.matchers import PatternMatcher, RegexMatcher

if TYPE_CHECKING:
    from fileutils.predicates.tree import Predicate

Evaluator = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class EvaluationContext:
    """Collaborators available to compiled predicates.

    Attributes:
        metadata: Provider used by every metadata-based leaf test.
        matcher: Pattern matcher used by Match.
    """

    metadata: MetadataProvider = field(default_factory=OsMetadataProvider)
    matcher: PatternMatcher = field(default_factory=RegexMatcher)

    def effective_uid(self) -> int:
        """Effective user id of the running process."""
        return os.geteuid()

    def effective_gid(self) -> int:
        """Effective group id of the running process."""
        return os.getegid()


def fail_safe(evaluator: Evaluator) -> Evaluator:
    """Wrap an evaluator so that FileDoesNotExistError yields False."""

    def evaluate(path: str) -> bool:
        try:
            return evaluator(path)
        except FileDoesNotExistError:
            return False

    return evaluate


def compile_predicate(
    predicate: Predicate,
    context: EvaluationContext | None = None,
) -> Evaluator:
    """Compile a predicate tree into an evaluator.

    Args:
        predicate: Root of the predicate tree.
        context: Collaborators to evaluate against. Defaults to the OS
            metadata provider and RegexMatcher.

    Returns:
        Callable returning True when the path satisfies the predicate.
    """
    return fail_safe(predicate.build(context or EvaluationContext()))
