"""Tests for writing generated files."""

from pathlib import Path

import pytest

from docmd.crate_metadata import CrateDocMetadata
from docmd.errors import FileWriteFailed
from docmd.write_corpus import write_corpus, write_file_atomic


def test_write_corpus_creates_directories(tmp_path: Path) -> None:
    """Verify nested pages are written and no temporary files remain."""
    written = write_corpus(tmp_path, {"index.md": "# lib\n", "de/struct.Error.md": "# Error\n"})
    assert written == 2  # noqa: PLR2004
    assert (tmp_path / "de" / "struct.Error.md").read_text(encoding="utf-8") == "# Error\n"
    assert sorted(p.name for p in tmp_path.rglob("*") if p.is_file()) == ["index.md", "struct.Error.md"]


def test_write_file_atomic_replaces_content(tmp_path: Path) -> None:
    """Verify an existing file is replaced in full."""
    path = tmp_path / "page.md"
    path.write_text("old content that is longer", encoding="utf-8")
    write_file_atomic(path, "new")
    assert path.read_text(encoding="utf-8") == "new"


def test_write_failure(tmp_path: Path) -> None:
    """Verify OS errors are reported with the destination path."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(FileWriteFailed, match="blocker"):
        write_file_atomic(blocker / "page.md", "content")


def test_metadata_sidecar(tmp_path: Path) -> None:
    """Verify the sidecar keeps both spellings and a sorted item map."""
    path = tmp_path / "metadata.json"
    CrateDocMetadata("serde-json", "serde_json", {"serde_json::b": "b.md", "serde_json::a": "a.md"}).save(path)
    text = path.read_text(encoding="utf-8")
    assert text.index("serde_json::a") < text.index("serde_json::b")
    loaded = CrateDocMetadata.load(path)
    assert loaded.declared_name == "serde-json"
    assert loaded.format == "html"
