"""Normalize documentation markup into an immutable node arena."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Literal, Union

import markdown2

from hyprdocs.config import HYPRDOCS_MAX_MARKUP_DEPTH
from hyprdocs.exceptions import ParseError, SerializationError

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^h[1-6]$")
# highlightjs-lang keeps fenced blocks as <code class="language-..."> even when
# Pygments is importable.
_MARKDOWN_EXTRAS = ["tables", "fenced-code-blocks", "highlightjs-lang"]


@dataclass(frozen=True)
class Node:
    """Base node: position in the arena and serialized markup.

    ``markup`` is ``None`` when the subtree could not be serialized.
    """

    index: int
    parent: int | None
    markup: str | None


@dataclass(frozen=True)
class Heading(Node):
    level: int
    anchor: str | None
    text: str


@dataclass(frozen=True)
class Table(Node):
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class Text(Node):
    text: str


@dataclass(frozen=True)
class Other(Node):
    tag: str


AnyNode = Union[Heading, Table, Text, Other]


class DocumentTree:
    """Document-ordered nodes with sibling lookups by index."""

    def __init__(
        self,
        nodes: tuple[AnyNode, ...],
        children: dict[int | None, tuple[int, ...]],
    ) -> None:
        self.nodes = nodes
        self._children = children
        self._positions: dict[int, int] = {
            child: position
            for siblings in children.values()
            for position, child in enumerate(siblings)
        }

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> AnyNode:
        return self.nodes[index]

    def children(self, index: int | None = None) -> tuple[int, ...]:
        """Child indices of ``index``; top-level nodes when ``index`` is None."""
        return self._children.get(index, ())

    def previous_sibling(self, index: int) -> int | None:
        position = self._positions[index]
        if position == 0:
            return None
        return self._children[self.nodes[index].parent][position - 1]

    def next_sibling(self, index: int) -> int | None:
        siblings = self._children[self.nodes[index].parent]
        position = self._positions[index] + 1
        if position >= len(siblings):
            return None
        return siblings[position]

    def headings(self) -> Iterator[Heading]:
        for node in self.nodes:
            if isinstance(node, Heading):
                yield node

    def tables(self) -> Iterator[Table]:
        for node in self.nodes:
            if isinstance(node, Table):
                yield node

    def markup(self, index: int) -> str:
        markup = self.nodes[index].markup
        if markup is None:
            raise SerializationError(f"Node {index} could not be serialized")
        return markup


def heading_level(tag_name: str) -> int:
    """Return the numeric level of an ``h1``..``h6`` tag name."""
    token = tag_name[1:]
    try:
        level = int(token)
    except ValueError as exc:
        raise ParseError(f"Invalid heading level {token!r} in <{tag_name}>") from exc
    if not 1 <= level <= 6:
        raise ParseError(f"Heading level {level} out of range in <{tag_name}>")
    return level


def render_markdown(text: str) -> str:
    """Render Markdown documentation to HTML."""
    return markdown2.markdown(text, extras=_MARKDOWN_EXTRAS)


def parse_tree(text: str, *, format: Literal["markdown", "html"] = "markdown") -> DocumentTree:
    """Parse Markdown or HTML into a :class:`DocumentTree`."""
    html = render_markdown(text) if format == "markdown" else text
    soup = BeautifulSoup(html, "lxml")
    builder = _TreeBuilder()
    builder.walk(soup.body or soup)
    return builder.build()


class _TreeBuilder:
    """Flattens a soup into document order without recursing on its depth."""

    def __init__(self, max_markup_depth: int = HYPRDOCS_MAX_MARKUP_DEPTH) -> None:
        self.max_markup_depth = max_markup_depth
        self.elements: list[Tag | NavigableString] = []
        self.parents: list[int | None] = []
        self.children: dict[int | None, list[int]] = {}

    def walk(self, container: Tag) -> None:
        stack: list[tuple[Tag | NavigableString, int | None]] = [
            (child, None) for child in reversed(list(container.children))
        ]
        while stack:
            element, parent = stack.pop()
            if isinstance(element, Tag):
                index = self._append(element, parent)
                stack.extend((child, index) for child in reversed(list(element.children)))
            elif isinstance(element, NavigableString):
                if isinstance(element, PreformattedString) or not element.strip():
                    continue
                self._append(element, parent)

    def build(self) -> DocumentTree:
        depths = self._subtree_depths()
        nodes = tuple(
            self._node(index, element, depths[index])
            for index, element in enumerate(self.elements)
        )
        children = {parent: tuple(indices) for parent, indices in self.children.items()}
        return DocumentTree(nodes, children)

    def _append(self, element: Tag | NavigableString, parent: int | None) -> int:
        index = len(self.elements)
        self.elements.append(element)
        self.parents.append(parent)
        self.children.setdefault(parent, []).append(index)
        return index

    def _subtree_depths(self) -> list[int]:
        # Children always come after their parent in document order.
        depths = [1] * len(self.elements)
        for index in range(len(self.elements) - 1, -1, -1):
            parent = self.parents[index]
            if parent is not None:
                depths[parent] = max(depths[parent], depths[index] + 1)
        return depths

    def _node(self, index: int, element: Tag | NavigableString, depth: int) -> AnyNode:
        parent = self.parents[index]
        if not isinstance(element, Tag):
            return Text(index=index, parent=parent, markup=element.output_ready(), text=str(element))

        if depth > self.max_markup_depth:
            logger.debug("Not serializing <%s>: nested %d levels deep", element.name, depth)
            markup = None
        else:
            markup = _serialize(element)

        if _HEADING_RE.match(element.name):
            return Heading(
                index=index,
                parent=parent,
                markup=markup,
                level=heading_level(element.name),
                anchor=element.get("id"),
                text=element.get_text().strip(),
            )
        if element.name == "table":
            return Table(
                index=index,
                parent=parent,
                markup=markup,
                header=tuple(cell.get_text() for cell in element.find_all("th")),
                rows=tuple(
                    tuple(cell.get_text() for cell in row.find_all("td"))
                    for row in element.find_all("tr")[1:]
                ),
            )
        return Other(index=index, parent=parent, markup=markup, tag=element.name)


def _serialize(tag: Tag) -> str | None:
    try:
        return str(tag)
    except (RecursionError, ValueError):
        logger.debug("Could not serialize <%s>", tag.name)
        return None
