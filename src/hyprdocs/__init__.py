"""hyprdocs: extract a typed configuration schema from documentation pages."""

from hyprdocs.exceptions import (
    DocumentStructureError,
    HeadingNotFoundError,
    HyprdocsError,
    LoadError,
    ModelBuildError,
    ParseError,
    SerializationError,
)
from hyprdocs.model import build_model
from hyprdocs.schemas import (
    Document,
    DocumentationModel,
    DocumentSource,
    Keyword,
    Section,
    Variable,
)
from hyprdocs.sources import DEFAULT_SOURCES, DocumentBundle

__all__ = [
    "DEFAULT_SOURCES",
    "Document",
    "DocumentBundle",
    "DocumentSource",
    "DocumentStructureError",
    "DocumentationModel",
    "HeadingNotFoundError",
    "HyprdocsError",
    "Keyword",
    "LoadError",
    "ModelBuildError",
    "ParseError",
    "Section",
    "SerializationError",
    "Variable",
    "build_model",
]
