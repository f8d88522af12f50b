"""Shared schemas for hyprdocs."""

from hyprdocs.schemas.documents import Document, DocumentSource
from hyprdocs.schemas.keywords import Keyword
from hyprdocs.schemas.model import DocumentationModel
from hyprdocs.schemas.sections import Section, Variable

__all__ = [
    "Document",
    "DocumentSource",
    "DocumentationModel",
    "Keyword",
    "Section",
    "Variable",
]
