"""Directory listing, filtering and recursive search.

TreeWalker lists directories through a ListingProvider and evaluates
predicates through an EvaluationContext, so the whole traversal can run
against injected collaborators.
"""

import logging

from fileutils.metadata.provider import ListingProvider, OsListingProvider
from fileutils.path.algebra import concat
from fileutils.predicates.compiler import EvaluationContext, Evaluator, compile_predicate
from fileutils.predicates.tree import IsCurrentDir, IsDir, IsParentDir, Predicate

logger = logging.getLogger(__name__)

_MARKERS = IsCurrentDir() | IsParentDir()


class TreeWalker:
    """Lists and searches directory trees.

    Attributes:
        _context: Collaborators used to evaluate predicates.
        _listing: Provider used to read directory entries.
    """

    def __init__(
        self,
        context: EvaluationContext | None = None,
        listing: ListingProvider | None = None,
    ) -> None:
        """Initialize the TreeWalker.

        Args:
            context: Evaluation context for predicates.
            listing: Directory listing provider. Defaults to OsListingProvider.
        """
        self._context = context or EvaluationContext()
        self._listing = listing or OsListingProvider()

    def ls(self, dirname: str) -> list[str]:
        """List a directory.

        Args:
            dirname: Directory to list.

        Returns:
            Entry paths (entry names joined onto `dirname`), in listing order.
        """
        return [concat(dirname, name) for name in self._listing.list(dirname)]

    def filter(self, predicate: Predicate, paths: list[str]) -> list[str]:
        """Keep the paths that satisfy `predicate`, preserving order."""
        evaluate = compile_predicate(predicate, self._context)
        return [path for path in paths if evaluate(path)]

    def find(self, predicate: Predicate, root: str) -> list[str]:
        """Recursively collect the paths under `root` satisfying `predicate`.

        Every subdirectory is descended, whether or not it matches.
        Entries of one directory come first, followed by the results of
        each subdirectory in listing order, so the output is not sorted by
        depth. The current- and parent-dir markers are never returned.

        Args:
            predicate: Test selecting the paths to return.
            root: Directory to search, or a single path to test.

        Returns:
            Matching paths. If `root` is not a directory, [root] when it
            matches and [] otherwise.
        """
        matches = compile_predicate(predicate & ~_MARKERS, self._context)
        descend = compile_predicate(IsDir() & ~_MARKERS, self._context)

        if not compile_predicate(IsDir(), self._context)(root):
            return [root] if matches(root) else []

        return self._find_in(root, matches, descend)

    def _find_in(self, dirname: str, matches: Evaluator, descend: Evaluator) -> list[str]:
        logger.debug("Searching %s", dirname)
        entries = self.ls(dirname)
        found = [entry for entry in entries if matches(entry)]
        for entry in entries:
            if descend(entry):
                found.extend(self._find_in(entry, matches, descend))
        return found
