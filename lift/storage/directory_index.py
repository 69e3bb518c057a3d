"""Per-directory index.json files and the master-index.json rollup."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from lift.errors import OutputError, ScanError

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.json"
MASTER_INDEX_FILENAME = "master-index.json"


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _join(relative_path: str, name: str) -> str:
    """Join posix relative paths, treating '' and '.' as the root."""
    if relative_path in ("", "."):
        return name
    return f"{relative_path}/{name}"


def get_file_extension(filename: str) -> str:
    """Get file extension including the dot, or '' when there is none."""
    dot = filename.rfind(".")
    return filename[dot:] if dot != -1 else ""


@dataclass
class DirectoryEntry:
    """Metadata about a single file in a directory."""

    name: str
    path: str
    size: int
    modified: str
    extension: str
    is_document: bool

    @property
    def type(self) -> str:
        return self.extension[1:]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "size": self.size,
            "modified": self.modified,
            "type": self.type,
            "extension": self.extension,
            "isDocument": self.is_document,
        }


@dataclass
class SubdirectoryEntry:
    """Pointer from a directory index to a child directory's index."""

    name: str
    path: str
    index_path: str

    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path, "indexPath": self.index_path}


@dataclass
class IndexSummary:
    """Counts and sizes for one directory."""

    total_files: int = 0
    total_subdirectories: int = 0
    document_files: int = 0
    total_size: int = 0

    def to_dict(self) -> dict:
        return {
            "totalFiles": self.total_files,
            "totalSubdirectories": self.total_subdirectories,
            "documentFiles": self.document_files,
            "totalSize": self.total_size,
        }


@dataclass
class DirectoryIndex:
    """Inventory of one directory's immediate children."""

    directory: str
    generated: str
    files: list[DirectoryEntry] = field(default_factory=list)
    subdirectories: list[SubdirectoryEntry] = field(default_factory=list)

    @property
    def summary(self) -> IndexSummary:
        return IndexSummary(
            total_files=len(self.files),
            total_subdirectories=len(self.subdirectories),
            document_files=sum(1 for f in self.files if f.is_document),
            total_size=sum(f.size for f in self.files),
        )

    @property
    def index_path(self) -> str:
        return _join(self.directory, INDEX_FILENAME)

    def to_dict(self) -> dict:
        return {
            "directory": self.directory,
            "generated": self.generated,
            "files": [f.to_dict() for f in self.files],
            "subdirectories": [s.to_dict() for s in self.subdirectories],
            "summary": self.summary.to_dict(),
        }


@dataclass
class AggregateIndex:
    """Rollup of every directory index written in a run."""

    project: str
    generated: str
    directories: list[DirectoryIndex] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return sum(d.summary.total_files for d in self.directories)

    @property
    def total_document_files(self) -> int:
        return sum(d.summary.document_files for d in self.directories)

    @property
    def total_size(self) -> int:
        return sum(d.summary.total_size for d in self.directories)

    def to_dict(self) -> dict:
        return {
            "project": self.project,
            "generated": self.generated,
            "totalDirectories": len(self.directories),
            "totalFiles": self.total_files,
            "totalDocumentFiles": self.total_document_files,
            "totalSize": self.total_size,
            "directories": [
                {
                    "path": d.directory,
                    "indexPath": d.index_path,
                    "summary": d.summary.to_dict(),
                }
                for d in self.directories
            ],
        }


class IndexGenerator:
    """Mirrors the input tree under the output root as index.json files."""

    def __init__(
        self,
        input_dir: Path,
        output_dir: Path,
        is_excluded: Callable[[str, str], bool],
        is_document_file: Callable[[str], bool],
    ) -> None:
        self.input_dir = input_dir.resolve()
        self.output_dir = output_dir.resolve()
        self.is_excluded = is_excluded
        self.is_document_file = is_document_file

    def generate_all(self) -> AggregateIndex:
        """Write index.json for every directory, then master-index.json at the root."""
        indexes: list[DirectoryIndex] = []
        self._collect(self.input_dir, "", indexes)

        for index in indexes:
            self._write_json(self.output_dir / index.index_path, index.to_dict())

        aggregate = AggregateIndex(
            project=self.input_dir.name,
            generated=_iso(datetime.now(UTC)),
            directories=indexes,
        )
        self._write_json(self.output_dir / MASTER_INDEX_FILENAME, aggregate.to_dict())

        logger.debug(
            f"Indexed {len(indexes)} directories, {aggregate.total_files} files "
            f"({aggregate.total_size} bytes)"
        )
        return aggregate

    def build_directory_index(self, directory: Path, relative_path: str = "") -> DirectoryIndex:
        """Describe the immediate children of one directory."""
        files: list[DirectoryEntry] = []
        subdirectories: list[SubdirectoryEntry] = []

        for entry in directory.iterdir():
            entry_path = _join(relative_path, entry.name)

            if entry.is_symlink() or self.is_excluded(entry.name, entry_path):
                continue

            try:
                if entry.is_dir():
                    subdirectories.append(
                        SubdirectoryEntry(
                            name=entry.name,
                            path=entry_path,
                            index_path=_join(entry_path, INDEX_FILENAME),
                        )
                    )
                elif entry.is_file():
                    stat = entry.stat()
                    files.append(
                        DirectoryEntry(
                            name=entry.name,
                            path=entry_path,
                            size=stat.st_size,
                            modified=_iso(datetime.fromtimestamp(stat.st_mtime, UTC)),
                            extension=get_file_extension(entry.name),
                            is_document=self.is_document_file(entry.name),
                        )
                    )
            except OSError as e:
                logger.debug(f"Skipping {entry}: {e}")

        return DirectoryIndex(
            directory=relative_path or ".",
            generated=_iso(datetime.now(UTC)),
            files=sorted(files, key=lambda f: f.name),
            subdirectories=sorted(subdirectories, key=lambda s: s.name),
        )

    def _collect(self, directory: Path, relative_path: str, indexes: list[DirectoryIndex]) -> None:
        try:
            index = self.build_directory_index(directory, relative_path)
        except OSError as e:
            if not relative_path:
                raise ScanError(f"Failed to generate index for {directory}: {e}") from e
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return

        indexes.append(index)
        for sub in index.subdirectories:
            self._collect(directory / sub.name, sub.path, indexes)

    def _write_json(self, path: Path, data: dict) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise OutputError(f"Failed to write {path}: {e}") from e
