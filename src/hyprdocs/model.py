"""Build the documentation model from bundled documents."""

from __future__ import annotations

import logging
from typing import Iterable

from hyprdocs.config import HYPRDOCS_DEBUG
from hyprdocs.exceptions import (
    DocumentStructureError,
    LoadError,
    ModelBuildError,
    ParseError,
)
from hyprdocs.keywords import describe_keywords
from hyprdocs.schemas import DocumentationModel, DocumentSource, Keyword, Section
from hyprdocs.sections import add_variables
from hyprdocs.sources import DEFAULT_SOURCES, UNDOCUMENTED_GENERAL_VARIABLES, DocumentBundle
from hyprdocs.tables import parse_documentation

logger = logging.getLogger(__name__)


def build_model(
    bundle: DocumentBundle,
    sources: Iterable[DocumentSource] = DEFAULT_SOURCES,
    keywords: Iterable[Keyword] = (),
    *,
    verbose: bool | None = None,
) -> DocumentationModel:
    """Extract sections and keyword descriptions into a :class:`DocumentationModel`.

    Section extraction is all or nothing: a missing section document or a
    malformed heading structure aborts the build. Keyword lookups degrade to
    an empty description for the affected keyword only.

    Args:
        bundle: Documentation pages to read from.
        sources: Documents contributing sections, in output order.
        keywords: Keyword registry; empty descriptions are filled in place.
        verbose: Log dropped content while capturing descriptions. Defaults
            to ``HYPRDOCS_DEBUG``.

    Returns:
        The finished model.

    Raises:
        ModelBuildError: If section extraction fails.
    """
    if verbose is None:
        verbose = HYPRDOCS_DEBUG

    sections: list[Section] = []
    for source in sources:
        try:
            document = bundle.load(source.name)
            sections.extend(
                parse_documentation(document, source.heading_root_level, source.root_name)
            )
        except (LoadError, DocumentStructureError, ParseError) as exc:
            raise ModelBuildError(f"Failed to extract sections from {source.name}: {exc}") from exc
    sections = add_variables(sections, "General", UNDOCUMENTED_GENERAL_VARIABLES)

    registry = tuple(keywords)
    described = describe_keywords(registry, bundle, verbose=verbose)
    logger.info(
        "Built documentation model: %d sections, %d/%d keywords described",
        len(sections),
        described,
        len(registry),
    )
    return DocumentationModel(sections=tuple(sections), keywords=registry)
