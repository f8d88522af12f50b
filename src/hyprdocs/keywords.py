"""Resolve keyword descriptions from documentation headings."""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from hyprdocs.config import HYPRDOCS_DEBUG
from hyprdocs.exceptions import HeadingNotFoundError, LoadError, SerializationError
from hyprdocs.markdown import convert_fragment_to_markdown
from hyprdocs.schemas import Keyword
from hyprdocs.sources import DocumentBundle
from hyprdocs.tree import DocumentTree, Heading, parse_tree

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^0-9a-z]+")
# Hugo front matter rendered into a heading, e.g. "weight: 3 title: Foo".
_WEIGHT_PREFIX_RE = re.compile(r"^weight-\d+-(?:title-)?")


def slugify_heading(text: str) -> str:
    """Derive the anchor slug of a heading from its visible text."""
    slug = _NON_ALNUM_RE.sub("-", text.strip().lower()).strip("-")
    return _WEIGHT_PREFIX_RE.sub("", slug)


def find_heading(tree: DocumentTree, slug: str) -> Heading:
    """Return the first heading whose id or derived slug equals ``slug``.

    Raises:
        HeadingNotFoundError: If no heading matches.
    """
    for heading in tree.headings():
        if heading.anchor == slug:
            return heading
        if slugify_heading(heading.text) == slug:
            return heading
    raise HeadingNotFoundError(f"No heading matches {slug!r}")


def collect_range(tree: DocumentTree, heading: Heading, *, verbose: bool = HYPRDOCS_DEBUG) -> str:
    """Concatenate the markup following ``heading`` up to the next heading of
    the same or a higher rank.

    Siblings that cannot be serialized are left out.
    """
    parts: list[str] = []
    cursor = tree.next_sibling(heading.index)
    while cursor is not None:
        node = tree[cursor]
        if isinstance(node, Heading) and node.level <= heading.level:
            break
        try:
            parts.append(tree.markup(cursor))
        except SerializationError as exc:
            if verbose:
                logger.debug("Dropping sibling after %r: %s", heading.text, exc)
        cursor = tree.next_sibling(cursor)
    return "".join(parts)


def describe_keywords(
    keywords: Iterable[Keyword],
    bundle: DocumentBundle,
    *,
    converter: Callable[[str], str] = convert_fragment_to_markdown,
    verbose: bool = HYPRDOCS_DEBUG,
) -> int:
    """Fill in the description of every keyword that has none.

    Documents that cannot be loaded and slugs without a matching heading are
    logged and skipped. Returns the number of keywords described.
    """
    trees: dict[str, DocumentTree] = {}
    described = 0
    for keyword in keywords:
        if keyword.description:
            continue

        tree = trees.get(keyword.documentation_file)
        if tree is None:
            try:
                document = bundle.load(keyword.documentation_file)
            except LoadError as exc:
                logger.warning(
                    "Failed to read documentation file for %s: %s", keyword.name, exc
                )
                continue
            tree = parse_tree(document.text, format=document.format)
            trees[keyword.documentation_file] = tree

        try:
            heading = find_heading(tree, keyword.documentation_heading_slug)
        except HeadingNotFoundError:
            logger.warning(
                "Failed to find heading %s in %s",
                keyword.documentation_heading_slug,
                keyword.documentation_file,
            )
            continue

        keyword.describe(converter(collect_range(tree, heading, verbose=verbose)))
        described += 1
    return described
