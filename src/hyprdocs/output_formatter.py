"""Format the documentation model into human-readable text."""

from __future__ import annotations

from typing import Iterable

from hyprdocs.schemas import DocumentationModel, Keyword, Section


def format_model(model: DocumentationModel) -> str:
    """Render the section tree followed by the keyword table."""
    roots = [section for section in model.sections if section.is_root]
    blocks = [
        f"Sections: {count_sections(roots)}\n" + _create_sections_tree(roots),
        f"Keywords: {len(model.keywords)}\n" + _create_keywords_table(model.keywords),
    ]
    return "\n\n".join(blocks).rstrip()


def count_sections(sections: Iterable[Section]) -> int:
    """Count sections including their subsections."""
    total = 0
    for section in sections:
        total += 1
        total += count_sections(section.subsections)
    return total


def _create_sections_tree(sections: Iterable[Section], indent: int = 0) -> str:
    lines: list[str] = []
    for section in sections:
        title = section.name if indent == 0 else " > ".join(section.path[1:])
        lines.append(" " * (indent * 4) + f"{title} ({len(section.variables)} variables)")
        if section.subsections:
            lines.append(_create_sections_tree(section.subsections, indent + 1))
    return "\n".join(lines)


def _create_keywords_table(keywords: Iterable[Keyword]) -> str:
    lines: list[str] = []
    for keyword in keywords:
        summary = keyword.description.splitlines()[0] if keyword.description else "(undocumented)"
        lines.append(f"{keyword.name}: {summary}")
    return "\n".join(lines)
