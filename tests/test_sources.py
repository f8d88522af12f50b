"""Tests for the documentation bundle."""

from __future__ import annotations

from pathlib import Path

import pytest

from hyprdocs.exceptions import LoadError
from hyprdocs.sources import DEFAULT_SOURCES, DocumentBundle


class TestDocumentBundle:
    """Tests for DocumentBundle."""

    def test_from_mapping_creates_markdown_documents(self) -> None:
        bundle = DocumentBundle.from_mapping({"Variables": "# Variables"})

        document = bundle.load("Variables")

        assert document.text == "# Variables"
        assert document.format == "markdown"
        assert "Variables" in bundle

    def test_load_unknown_raises(self) -> None:
        bundle = DocumentBundle.from_mapping({})

        with pytest.raises(LoadError, match="No documentation file named 'Missing'"):
            bundle.load("Missing")

    def test_from_directory(self, tmp_path: Path) -> None:
        (tmp_path / "Variables.md").write_text("# Variables", encoding="utf-8")
        (tmp_path / "Page.html").write_text("<h1>Page</h1>", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        (tmp_path / "nested.md").mkdir()

        bundle = DocumentBundle.from_directory(tmp_path)

        assert sorted(bundle.names()) == ["Page", "Variables"]
        assert bundle.load("Page").format == "html"
        assert bundle.load("Variables").format == "markdown"

    def test_from_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError, match="not found"):
            DocumentBundle.from_directory(tmp_path / "absent")

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / "Broken.md").write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(LoadError, match="Failed to read"):
            DocumentBundle.from_directory(tmp_path)


class TestDefaultSources:
    """Tests for the standard document set."""

    def test_layout_documents_share_root_names(self) -> None:
        by_name = {source.name: source for source in DEFAULT_SOURCES}

        assert by_name["Variables"].heading_root_level == 3
        assert by_name["Variables"].root_name is None
        assert by_name["Master-Layout"].root_name == "Master"
        assert by_name["Dwindle-Layout"].root_name == "Dwindle"
