"""File metadata module.

This module provides the metadata models and the providers used to
query the filesystem for entry kinds, permissions, sizes and listings.
"""

from fileutils.metadata.models import FileKind, FileMetadata
from fileutils.metadata.provider import (
    ListingProvider,
    MetadataProvider,
    OsListingProvider,
    OsMetadataProvider,
)

__all__ = [
    "FileKind",
    "FileMetadata",
    "ListingProvider",
    "MetadataProvider",
    "OsListingProvider",
    "OsMetadataProvider",
]
