"""Extract variable sections from documentation tables."""

from __future__ import annotations

import logging

from hyprdocs.headings import resolve_path
from hyprdocs.schemas import Document, Section, Variable
from hyprdocs.sections import attach_subsections, rename_root
from hyprdocs.tree import DocumentTree, Table, parse_tree

logger = logging.getLogger(__name__)

VARIABLE_TABLE_HEADER = ("name", "description", "type", "default")


def is_variable_table(table: Table) -> bool:
    """Check whether the table's header row is exactly the variable header."""
    header = tuple(cell.strip() for cell in table.header)
    return header == VARIABLE_TABLE_HEADER


def extract_sections(tree: DocumentTree, root_level: int) -> list[Section]:
    """Create one flat section per variable table, in document order.

    Raises:
        DocumentStructureError: If a table has no preceding heading.
    """
    sections: list[Section] = []
    for table in tree.tables():
        if not is_variable_table(table):
            continue
        path = resolve_path(tree, table.index, root_level)
        variables = tuple(
            Variable(
                name=row[0].strip(),
                description=row[1].strip(),
                type=row[2].strip(),
                default=row[3].strip(),
            )
            for row in table.rows
            if len(row) == len(VARIABLE_TABLE_HEADER)
        )
        logger.debug("Section %s: %d variables", " > ".join(path), len(variables))
        sections.append(Section(path=path, variables=variables))
    return sections


def parse_documentation(
    document: Document, root_level: int, root_name: str | None = None
) -> list[Section]:
    """Parse a document into sections with subsections attached.

    When ``root_name`` is given, it replaces every section's top-level title.
    """
    tree = parse_tree(document.text, format=document.format)
    sections = attach_subsections(extract_sections(tree, root_level))
    if root_name is not None:
        sections = rename_root(sections, root_name)
    logger.info("Parsed %d sections from %s", len(sections), document.name)
    return sections
