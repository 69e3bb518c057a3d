"""Directory scanner - discovers document files under an input root."""

import logging
from pathlib import Path

from lift.errors import ScanError

from .matcher import PathMatcher

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Recursively collects document files, pruning excluded directories."""

    def __init__(self, matcher: PathMatcher) -> None:
        self.matcher = matcher

    def validate_directory(self, path: Path) -> None:
        """Ensure path exists and is a directory."""
        if not path.exists():
            raise ScanError(f"Input path does not exist: {path}")
        if not path.is_dir():
            raise ScanError(f"Input path is not a directory: {path}")

    def scan(self, root: Path) -> list[Path]:
        """Scan a directory for document files, depth-first.

        Returns absolute file paths in directory listing order (sorted by name
        at every level). Ordering for output is decided later by the
        document processor.
        """
        root = root.resolve()
        self.validate_directory(root)

        try:
            entries = self._list_dir(root)
        except OSError as e:
            raise ScanError(f"Failed to scan directory {root}: {e}") from e

        files: list[Path] = []
        self._scan_entries(root, entries, files)
        logger.debug(f"Found {len(files)} document files under {root}")
        return files

    def _scan_entries(self, root: Path, entries: list[Path], files: list[Path]) -> None:
        for entry in entries:
            # Symlinks are not followed
            if entry.is_symlink():
                continue

            rel_path = entry.relative_to(root).as_posix()

            if entry.is_dir():
                # Excluded directories are pruned, their contents never visited
                if self.matcher.is_excluded(entry.name, rel_path):
                    continue

                try:
                    children = self._list_dir(entry)
                except OSError as e:
                    logger.warning(f"Skipping unreadable directory {entry}: {e}")
                    continue

                self._scan_entries(root, children, files)

            elif entry.is_file():
                if (
                    self.matcher.is_document_file(entry.name)
                    and not self.matcher.is_excluded(entry.name, rel_path)
                    and self.matcher.matches_globs(rel_path)
                ):
                    files.append(entry)

    @staticmethod
    def _list_dir(path: Path) -> list[Path]:
        return sorted(path.iterdir(), key=lambda p: p.name)
