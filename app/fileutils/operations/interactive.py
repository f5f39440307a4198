"""Interactive confirmation policies.

Destructive operations (rm, cp over an existing file, mv over an
existing entry) consult a policy before acting on each path.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol


class Interactive(Protocol):
    """Decides whether an operation may proceed on a path."""

    def confirm(self, path: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class Force:
    """Always proceed."""

    def confirm(self, path: str) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Ask:
    """Ask a decision function for every path.

    Attributes:
        decide: Called with the path; returns True to proceed.
    """

    decide: Callable[[str], bool]

    def confirm(self, path: str) -> bool:
        return self.decide(path)


FORCE = Force()
