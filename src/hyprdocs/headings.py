"""Resolve the chain of ancestor heading titles leading to a node."""

from __future__ import annotations

from hyprdocs.exceptions import DocumentStructureError
from hyprdocs.tree import DocumentTree, Heading


def backtrack_to_heading(tree: DocumentTree, index: int) -> Heading:
    """Return the node at ``index`` if it is a heading, else the nearest preceding one.

    Only siblings are considered: the walk never climbs to a parent.

    Raises:
        DocumentStructureError: If the siblings run out before a heading is found.
    """
    node = tree[index]
    if isinstance(node, Heading):
        return node
    previous = tree.previous_sibling(index)
    if previous is None:
        raise DocumentStructureError(
            f"No heading precedes <{_describe(tree, index)}> (node {index})"
        )
    return backtrack_to_heading(tree, previous)


def resolve_path(tree: DocumentTree, index: int, root_level: int) -> tuple[str, ...]:
    """Return the heading titles from the top-level heading down to ``index``.

    A heading whose level is numerically at most ``root_level`` ends the walk.
    Deeper headings contribute their title and the walk continues from
    whatever precedes them in document order, so the result depends only on
    heading order and levels, not on an explicit outline.
    """
    heading = backtrack_to_heading(tree, index)
    if heading.level <= root_level:
        return (heading.text,)
    previous = tree.previous_sibling(heading.index)
    if previous is None:
        raise DocumentStructureError(
            f"Heading {heading.text!r} (h{heading.level}) has no enclosing "
            f"heading at level {root_level} or above"
        )
    return resolve_path(tree, previous, root_level) + (heading.text,)


def _describe(tree: DocumentTree, index: int) -> str:
    node = tree[index]
    return getattr(node, "tag", type(node).__name__.lower())
