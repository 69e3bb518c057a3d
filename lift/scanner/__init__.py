"""File discovery - exclusion rules, glob filters and directory traversal."""

from .directory import DirectoryScanner
from .matcher import DOCUMENT_EXTENSIONS, PathMatcher, default_is_document_file, glob_to_regex

__all__ = [
    "DOCUMENT_EXTENSIONS",
    "DirectoryScanner",
    "PathMatcher",
    "default_is_document_file",
    "glob_to_regex",
]
