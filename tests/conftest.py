"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch):
    """Keep stray .env / lift.yaml files and LIFT_ variables out of tests."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for var in (
        "LIFT_INPUT_PATH",
        "LIFT_OUTPUT_PATH",
        "LIFT_INCLUDE_GLOBS",
        "LIFT_EXCLUDE_GLOBS",
        "LIFT_EXTRA_EXCLUDES",
        "LIFT_GENERATE_INDEX",
        "LIFT_SILENT",
    ):
        monkeypatch.delenv(var, raising=False)
    return workdir


@pytest.fixture
def tmp_docs(tmp_path: Path) -> Path:
    """Create a temporary documentation tree with sample files."""
    docs = tmp_path / "project"
    docs.mkdir()

    (docs / "index.md").write_text("---\ntitle: Home\n---\n# Index\n\nIndex content")
    (docs / "guide.md").write_text("# Guide\n\nGuide content")
    (docs / "zz.md").write_text("# Z\n\nZ content")
    (docs / "notes.txt").write_text("Not a document")

    # Excluded directory
    node_modules = docs / "node_modules"
    node_modules.mkdir()
    (node_modules / "ignore.md").write_text("# Should be ignored")

    # Nested folder
    sub = docs / "subdir"
    sub.mkdir()
    (sub / "nested.md").write_text("# Nested\n\nNested content")
    (sub / "data.json").write_text('{"test": true}')

    return docs


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "site"
