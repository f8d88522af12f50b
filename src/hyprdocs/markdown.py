"""Convert captured documentation HTML to Markdown with a custom serializer."""

from __future__ import annotations

import re

from hyprdocs.config import HYPRDOCS_LINK_BASE

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_RELATIVE_LINK_PREFIX = "../"


def convert_fragment_to_markdown(html: str, *, link_base: str = HYPRDOCS_LINK_BASE) -> str:
    """Convert an HTML fragment into Markdown.

    Parameters
    ----------
    html : str
        The HTML fragment to convert.
    link_base : str
        Base URL substituted for the leading ``../`` of relative links, which
        point outside the page in the documentation wiki.
    """
    soup = BeautifulSoup(html, "lxml")
    _strip_unwanted_elements(soup)
    root = soup.body or soup
    blocks = _serialize_children(root, link_base=link_base)
    return "\n\n".join(block for block in blocks if block).strip()


def _strip_unwanted_elements(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(["script", "style", "noscript", "link", "meta"]):
        tag.decompose()


def _serialize_children(container: Tag, *, link_base: str) -> list[str]:
    blocks: list[str] = []
    for child in container.children:
        if isinstance(child, NavigableString):
            text = _normalize_text(str(child))
            if text:
                blocks.append(text)
            continue
        if not isinstance(child, Tag):
            continue
        blocks.extend(_serialize_block(child, link_base=link_base))
    return blocks


def _serialize_block(tag: Tag, *, link_base: str) -> list[str]:
    if tag.name in {"section", "article", "div"}:
        return _serialize_children(tag, link_base=link_base)

    if tag.name in {"h1", "h2", "h3", "h4", "h5", "h6"}:
        level = int(tag.name[1])
        heading = _normalize_text(tag.get_text(" ", strip=True))
        if not heading:
            return []
        return [f"{'#' * level} {heading}"]

    if tag.name == "p":
        paragraph = _cleanup_inline_text(_serialize_inline(tag, link_base=link_base))
        return [paragraph] if paragraph else []

    if tag.name in {"ul", "ol"}:
        lines = _serialize_list(tag, ordered=tag.name == "ol", link_base=link_base)
        return ["\n".join(lines)] if lines else []

    if tag.name == "pre":
        return [_serialize_code_block(tag)]

    if tag.name == "table":
        table_md = _serialize_table(tag, link_base=link_base)
        return [table_md] if table_md else []

    if tag.name == "blockquote":
        inner = _serialize_children(tag, link_base=link_base)
        if not inner:
            return []
        quoted = "\n\n".join(inner).splitlines()
        return ["\n".join(f"> {line}".rstrip() for line in quoted)]

    if tag.name == "hr":
        return ["---"]

    if tag.name == "br":
        return []

    inline = _cleanup_inline_text(_serialize_inline(tag, link_base=link_base))
    return [inline] if inline else []


def _serialize_inline(node: Tag | NavigableString, *, link_base: str) -> str:
    if isinstance(node, NavigableString):
        return str(node)

    if node.name == "br":
        return "\n"

    if node.name in {"em", "i"}:
        return f"*{_serialize_children_inline(node, link_base=link_base)}*"

    if node.name in {"strong", "b"}:
        return f"**{_serialize_children_inline(node, link_base=link_base)}**"

    if node.name == "code":
        return f"`{node.get_text()}`"

    if node.name == "a":
        text = _serialize_children_inline(node, link_base=link_base).strip()
        href = node.get("href")
        if not href:
            return text
        return f"[{text or href}]({_rewrite_href(href, link_base)})"

    if node.name == "img":
        alt = node.get("alt") or ""
        src = node.get("src")
        return f"![{alt}]({src})" if src else alt

    return _serialize_children_inline(node, link_base=link_base)


def _serialize_children_inline(tag: Tag, *, link_base: str) -> str:
    return "".join(_serialize_inline(child, link_base=link_base) for child in tag.children)


def _rewrite_href(href: str, link_base: str) -> str:
    if href.startswith(_RELATIVE_LINK_PREFIX):
        return link_base + href[len(_RELATIVE_LINK_PREFIX):]
    return href


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text)
    return text.strip()


def _serialize_list(
    list_tag: Tag, indent: int = 0, *, ordered: bool = False, link_base: str
) -> list[str]:
    lines: list[str] = []
    for number, item in enumerate(list_tag.find_all("li", recursive=False), start=1):
        item_text_parts: list[str] = []
        nested_lists: list[Tag] = []
        for child in item.children:
            if isinstance(child, Tag) and child.name in {"ul", "ol"}:
                nested_lists.append(child)
            else:
                item_text_parts.append(_serialize_inline(child, link_base=link_base))
        item_text = _cleanup_inline_text("".join(item_text_parts))
        marker = f"{number}. " if ordered else "- "
        prefix = "  " * indent + marker
        lines.append(prefix + item_text if item_text else prefix.rstrip())
        for nested in nested_lists:
            lines.extend(
                _serialize_list(
                    nested, indent + 1, ordered=nested.name == "ol", link_base=link_base
                )
            )
    return lines


def _serialize_code_block(pre: Tag) -> str:
    code = pre.find("code")
    language = ""
    if code:
        for cls in code.get("class", []):
            if cls.startswith("language-"):
                language = cls[len("language-"):]
                break
    body = (code or pre).get_text().rstrip("\n")
    return f"```{language}\n{body}\n```"


def _serialize_table(table: Tag, *, link_base: str) -> str:
    """Render a table as a pipe table; the first row is the header.

    Variable tables in the wiki hold links and inline code in their cells,
    so cells go through the inline serializer. Short rows are padded.
    """
    rows = [
        [_table_cell(cell, link_base=link_base) for cell in cells]
        for cells in (row.find_all(["th", "td"], recursive=False) for row in table.find_all("tr"))
        if cells
    ]
    if not rows:
        return ""

    width = max(len(row) for row in rows)
    header, *body = (row + [""] * (width - len(row)) for row in rows)
    lines = [_table_line(header), _table_line(["---"] * width)]
    lines.extend(_table_line(row) for row in body)
    return "\n".join(lines)


def _table_cell(cell: Tag, *, link_base: str) -> str:
    text = _cleanup_inline_text(_serialize_inline(cell, link_base=link_base))
    return text.replace("|", "\\|").replace("\n", "<br>")


def _table_line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
