"""File operations module.

This module provides the tree walker, the interactive confirmation
policies and the FileOperator implementing ls, find, which, mkdir,
touch, rm, cp and mv.
"""

from fileutils.operations.interactive import FORCE, Ask, Force, Interactive
from fileutils.operations.operator import DEFAULT_BUFFER_SIZE, DEFAULT_MODE, FileOperator
from fileutils.operations.walker import TreeWalker

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_MODE",
    "FORCE",
    "Ask",
    "FileOperator",
    "Force",
    "Interactive",
    "TreeWalker",
]
