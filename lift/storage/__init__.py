"""Persistent JSON metadata describing the scanned directory tree."""

from .directory_index import (
    AggregateIndex,
    DirectoryEntry,
    DirectoryIndex,
    IndexGenerator,
    IndexSummary,
    SubdirectoryEntry,
)

__all__ = [
    "AggregateIndex",
    "DirectoryEntry",
    "DirectoryIndex",
    "IndexGenerator",
    "IndexSummary",
    "SubdirectoryEntry",
]
