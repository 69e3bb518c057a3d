"""Document processing - reading, classification and ordering."""

import locale
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from .frontmatter import strip_front_matter

logger = logging.getLogger(__name__)

INDEX_NAMES = ("index", "readme", "home")
INDEX_EXTENSIONS = (".md", ".mdx", ".html")

IMPORTANT_PATTERNS = (
    "doc",
    "docs",
    "guide",
    "guides",
    "tutorial",
    "tutorials",
    "intro",
    "introduction",
    "getting-started",
    "get-started",
    "quickstart",
    "quick-start",
    "start",
)


class DocumentKind(str, Enum):
    """Ordering bucket a document is classified into."""

    INDEX = "index"
    IMPORTANT = "important"
    OTHER = "other"


@dataclass(frozen=True)
class Document:
    """A document file read once, with front matter removed."""

    relative_path: str
    content: str
    source_path: Path


@dataclass(frozen=True)
class OrderedDocuments:
    """Documents partitioned into priority buckets, each bucket sorted."""

    index: list[Document] = field(default_factory=list)
    important: list[Document] = field(default_factory=list)
    other: list[Document] = field(default_factory=list)

    @property
    def all(self) -> list[Document]:
        return [*self.index, *self.important, *self.other]

    @property
    def core(self) -> list[Document]:
        """Documents listed under Core Documentation."""
        return [*self.index, *self.important]


def _index_basename(relative_path: str) -> str | None:
    """Return 'index', 'readme' or 'home' when the file name is one of those documents."""
    filename = PurePosixPath(relative_path).name.lower()
    for name in INDEX_NAMES:
        if filename in (name + ext for ext in INDEX_EXTENSIONS):
            return name
    return None


def classify(relative_path: str) -> DocumentKind:
    """Classify a document by its path.

    Matching is plain substring containment on the lowercased path, not word
    matching: "restart-policy.md" is important because it contains "start".
    """
    lower = relative_path.lower()

    if _index_basename(relative_path) is not None or any(
        f"/{name}." in lower for name in INDEX_NAMES
    ):
        return DocumentKind.INDEX

    if any(pattern in lower for pattern in IMPORTANT_PATTERNS):
        return DocumentKind.IMPORTANT

    return DocumentKind.OTHER


def index_priority(relative_path: str) -> int:
    """Get priority for index documents (lower number = higher priority)."""
    name = _index_basename(relative_path)
    if name is None:
        return len(INDEX_NAMES) + 1
    return INDEX_NAMES.index(name) + 1


def collation_key(relative_path: str) -> tuple[str, str]:
    """Locale-aware sort key, lowercase before uppercase on otherwise equal paths."""
    return locale.strxfrm(relative_path.casefold()), relative_path.swapcase()


def order_documents(documents: list[Document]) -> OrderedDocuments:
    """Order documents according to importance heuristics.

    Index documents are ordered by priority only; documents sharing a
    priority keep their discovery order.
    """
    buckets: dict[DocumentKind, list[Document]] = {kind: [] for kind in DocumentKind}
    for doc in documents:
        buckets[classify(doc.relative_path)].append(doc)

    return OrderedDocuments(
        index=sorted(buckets[DocumentKind.INDEX], key=lambda d: index_priority(d.relative_path)),
        important=sorted(
            buckets[DocumentKind.IMPORTANT], key=lambda d: collation_key(d.relative_path)
        ),
        other=sorted(buckets[DocumentKind.OTHER], key=lambda d: collation_key(d.relative_path)),
    )


class DocumentProcessor:
    """Reads document files relative to an input directory."""

    def __init__(self, input_dir: Path) -> None:
        self.input_dir = input_dir.resolve()

    def process_files(self, file_paths: list[Path]) -> list[Document]:
        """Read files into documents, skipping any that cannot be read."""
        documents: list[Document] = []

        for file_path in file_paths:
            try:
                content = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read {file_path}: {e}")
                continue

            rel_path = Path(os.path.relpath(file_path.resolve(), self.input_dir)).as_posix()
            documents.append(
                Document(
                    relative_path=rel_path,
                    content=strip_front_matter(content),
                    source_path=file_path,
                )
            )

        return documents

    def order(self, documents: list[Document]) -> OrderedDocuments:
        return order_documents(documents)
