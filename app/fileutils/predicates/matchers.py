"""Pluggable pattern matchers for the Match predicate.

A matcher is a strategy object with two operations: compile a pattern
once, then test compiled patterns against names.
"""

import fnmatch
import re
from typing import Any, Protocol


class PatternMatcher(Protocol):
    """Strategy used by the Match predicate."""

    def compile(self, pattern: str) -> Any:
        """Compile `pattern` into a matcher-specific object."""
        ...

    def test(self, compiled: Any, name: str) -> bool:
        """Test a compiled pattern against `name`."""
        ...


class RegexMatcher:
    """Regular expressions anchored at the start of the name (re.match)."""

    def compile(self, pattern: str) -> re.Pattern[str]:
        return re.compile(pattern)

    def test(self, compiled: re.Pattern[str], name: str) -> bool:
        return compiled.match(name) is not None


class GlobMatcher:
    """Shell-style wildcards with fnmatch semantics.

    Attributes:
        _case_sensitive: If False, patterns match regardless of case.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive

    def compile(self, pattern: str) -> re.Pattern[str]:
        flags = 0 if self._case_sensitive else re.IGNORECASE
        return re.compile(fnmatch.translate(pattern), flags)

    def test(self, compiled: re.Pattern[str], name: str) -> bool:
        return compiled.match(name) is not None
