"""Bundled documentation pages and the standard document set."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from hyprdocs.exceptions import LoadError
from hyprdocs.schemas import Document, DocumentSource, Variable

_FORMATS = {".md": "markdown", ".html": "html", ".htm": "html"}

DEFAULT_SOURCES: tuple[DocumentSource, ...] = (
    DocumentSource(name="Variables", heading_root_level=3),
    DocumentSource(name="Master-Layout", heading_root_level=2, root_name="Master"),
    DocumentSource(name="Dwindle-Layout", heading_root_level=2, root_name="Dwindle"),
)

# Accepted by the compositor but missing from the variable tables.
UNDOCUMENTED_GENERAL_VARIABLES: tuple[Variable, ...] = (
    Variable(
        name="autogenerated",
        description="Whether this configuration was autogenerated",
        type="bool",
        default="1",
    ),
)


class DocumentBundle:
    """Documentation pages held in memory, addressed by name."""

    def __init__(self, documents: Iterable[Document] = ()) -> None:
        self._documents: dict[str, Document] = {doc.name: doc for doc in documents}

    @classmethod
    def from_mapping(cls, texts: Mapping[str, str]) -> DocumentBundle:
        """Create a bundle of Markdown documents from ``name -> text``."""
        return cls(Document(name=name, text=text) for name, text in texts.items())

    @classmethod
    def from_directory(cls, path: Path) -> DocumentBundle:
        """Load every ``.md`` and ``.html`` file in ``path``, named by file stem.

        Raises:
            LoadError: If the directory does not exist or a file cannot be read.
        """
        if not path.is_dir():
            raise LoadError(f"Documentation directory not found: {path}")
        documents = []
        for file_path in sorted(path.iterdir()):
            doc_format = _FORMATS.get(file_path.suffix.lower())
            if doc_format is None or not file_path.is_file():
                continue
            try:
                text = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise LoadError(f"Failed to read {file_path}: {exc}") from exc
            documents.append(Document(name=file_path.stem, text=text, format=doc_format))
        return cls(documents)

    def __contains__(self, name: object) -> bool:
        return name in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def names(self) -> list[str]:
        return list(self._documents)

    def load(self, name: str) -> Document:
        """Return the document called ``name``.

        Raises:
            LoadError: If no such document is bundled.
        """
        try:
            return self._documents[name]
        except KeyError:
            raise LoadError(f"No documentation file named {name!r}") from None
