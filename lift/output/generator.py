"""Generate llms.txt and llms-full.txt from ordered documents."""

import logging
from dataclasses import dataclass
from pathlib import Path

from lift.documents import Document, OrderedDocuments
from lift.errors import OutputError

logger = logging.getLogger(__name__)

INDEX_FILENAME = "llms.txt"
FULL_FILENAME = "llms-full.txt"


@dataclass
class GeneratedOutputs:
    """Paths and byte sizes of the written files."""

    index_path: Path
    full_path: Path
    index_size: int
    full_size: int


def _header(title: str) -> list[str]:
    return [f"# {title}", "", f"> Documentation for {title}", ""]


def _link_lines(documents: list[Document]) -> list[str]:
    return [f"- [{doc.relative_path}]({doc.relative_path})" for doc in documents]


def render_index(title: str, ordered: OrderedDocuments) -> str:
    """Render the structured llms.txt index.

    Index and important documents go under "Core Documentation", the rest
    under "Optional". Empty sections are left out.
    """
    lines = _header(title)

    if ordered.core:
        lines.append("## Core Documentation")
        lines.extend(_link_lines(ordered.core))
        lines.append("")

    if ordered.other:
        lines.append("## Optional")
        lines.extend(_link_lines(ordered.other))
        lines.append("")

    return "\n".join(lines) + "\n"


def render_full(title: str, documents: list[Document]) -> str:
    """Render llms-full.txt: every document's content under its path heading."""
    lines = _header(title)

    for doc in documents:
        lines.extend([f"## {doc.relative_path}", "", doc.content, "", "---", ""])

    return "\n".join(lines) + "\n"


def format_size(size: int) -> str:
    """Format byte size for human readability."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


class OutputGenerator:
    """Writes the two llms text files into an output directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def generate(self, title: str, ordered: OrderedDocuments) -> GeneratedOutputs:
        """Render and write llms.txt and llms-full.txt."""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {self.output_dir}: {e}") from e

        index_path = self.output_dir / INDEX_FILENAME
        full_path = self.output_dir / FULL_FILENAME

        index_size = self._write(index_path, render_index(title, ordered))
        full_size = self._write(full_path, render_full(title, ordered.all))

        logger.info(f"Writing to: {self.output_dir}")
        logger.info(f"✔ {INDEX_FILENAME} ({format_size(index_size)})")
        logger.info(f"✔ {FULL_FILENAME} ({format_size(full_size)})")

        return GeneratedOutputs(
            index_path=index_path,
            full_path=full_path,
            index_size=index_size,
            full_size=full_size,
        )

    def _write(self, path: Path, content: str) -> int:
        data = content.encode("utf-8")
        try:
            path.write_bytes(data)
        except OSError as e:
            raise OutputError(f"Failed to write {path}: {e}") from e
        return len(data)
