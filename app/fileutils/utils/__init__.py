"""Utility modules for fileutils.

This module exports commonly used utility functions.
"""

from fileutils.utils.formatting import (
    console,
    create_listing_table,
    err_console,
    format_listing_row,
    format_size,
    print_error,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_listing_table",
    "err_console",
    "format_listing_row",
    "format_size",
    "print_error",
    "print_success",
    "print_warning",
]
