"""Tests for the LiftProcessor pipeline."""

import json
from pathlib import Path

import pytest

from lift.config import get_settings
from lift.errors import ProcessingError
from lift.processor import LiftProcessor


def _run(input_dir: Path, output_dir: Path, **options):
    settings = get_settings(input_path=input_dir, output_path=output_dir, **options)
    return LiftProcessor(settings).process()


class TestLiftProcessor:
    """Tests for LiftProcessor."""

    def test_core_and_optional_sections(self, tmp_path: Path, output_dir: Path):
        docs = tmp_path / "docs-a"
        docs.mkdir()
        (docs / "index.md").write_text("# I")
        (docs / "guide.md").write_text("# G")
        (docs / "zz.md").write_text("# Z")

        _run(docs, output_dir)
        llms = (output_dir / "llms.txt").read_text(encoding="utf-8")

        core, optional = llms.split("## Optional")
        assert "## Core Documentation" in core
        assert core.index("- [index.md](index.md)") < core.index("- [guide.md](guide.md)")
        assert "- [zz.md](zz.md)" in optional
        assert "zz.md" not in core

    def test_full_output_contains_stripped_content(self, tmp_docs: Path, output_dir: Path):
        _run(tmp_docs, output_dir)
        full = (output_dir / "llms-full.txt").read_text(encoding="utf-8")

        assert full.startswith(f"# {tmp_docs.name}\n\n> Documentation for {tmp_docs.name}\n\n")
        assert "## index.md\n\n# Index\n\nIndex content\n\n---\n\n" in full
        assert "title: Home" not in full
        assert "Should be ignored" not in full

    def test_result(self, tmp_docs: Path, output_dir: Path):
        result = _run(tmp_docs, output_dir)

        assert result.files_found == 4
        assert [d.relative_path for d in result.ordered.all] == [
            "index.md",
            "guide.md",
            "subdir/nested.md",
            "zz.md",
        ]
        assert result.outputs.index_path == output_dir.resolve() / "llms.txt"
        assert result.aggregate is None

    def test_empty_input_writes_nothing(self, tmp_path: Path, output_dir: Path, caplog):
        caplog.set_level("INFO")
        empty = tmp_path / "empty"
        empty.mkdir()
        (empty / "notes.txt").write_text("not a document")

        result = _run(empty, output_dir)

        assert result.files_found == 0
        assert result.outputs is None
        assert not output_dir.exists()
        assert "No document files found." in caplog.text

    def test_globs_applied(self, tmp_docs: Path, output_dir: Path):
        result = _run(tmp_docs, output_dir, include_globs=["*.md"], exclude_globs=["zz.md"])

        assert [d.relative_path for d in result.ordered.all] == ["index.md", "guide.md"]

    def test_extra_excludes(self, tmp_docs: Path, output_dir: Path):
        result = _run(tmp_docs, output_dir, extra_excludes="subdir")

        assert "subdir/nested.md" not in [d.relative_path for d in result.ordered.all]

    def test_generate_index(self, tmp_docs: Path, output_dir: Path):
        result = _run(tmp_docs, output_dir, generate_index=True)

        root = json.loads((output_dir / "index.json").read_text(encoding="utf-8"))
        sub = json.loads((output_dir / "subdir" / "index.json").read_text(encoding="utf-8"))
        master = json.loads((output_dir / "master-index.json").read_text(encoding="utf-8"))

        assert master["totalFiles"] == root["summary"]["totalFiles"] + sub["summary"]["totalFiles"]
        assert result.aggregate.total_files == master["totalFiles"]

    def test_index_not_generated_by_default(self, tmp_docs: Path, output_dir: Path):
        _run(tmp_docs, output_dir)

        assert not (output_dir / "index.json").exists()
        assert not (output_dir / "master-index.json").exists()

    def test_missing_input_wrapped(self, tmp_path: Path, output_dir: Path):
        with pytest.raises(ProcessingError, match="Processing failed: Input path does not exist"):
            _run(tmp_path / "missing", output_dir)

    def test_unwritable_output_wrapped(self, tmp_docs: Path, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(ProcessingError, match="Processing failed: Cannot create output"):
            _run(tmp_docs, blocker / "nested")
