"""Section hierarchy utilities."""

from __future__ import annotations

from typing import Iterable

from hyprdocs.schemas import Section, Variable


def attach_subsections(sections: list[Section]) -> list[Section]:
    """Attach every nested section to the root sharing its top-level title.

    Nesting is a single level deep: a section three headings down is
    attached directly to the root, not to its intermediate parent.
    """
    attached: list[Section] = []
    for section in sections:
        if not section.is_root:
            attached.append(section)
            continue
        subsections = tuple(
            other
            for other in sections
            if other is not section
            and not other.is_root
            and other.root_name == section.root_name
        )
        attached.append(
            Section(path=section.path, variables=section.variables, subsections=subsections)
        )
    return attached


def rename_root(sections: Iterable[Section], root_name: str) -> list[Section]:
    """Replace the top-level title of every section, subsections included."""

    def _rename(section: Section) -> Section:
        return Section(
            path=(root_name,) + section.path[1:],
            variables=section.variables,
            subsections=tuple(_rename(sub) for sub in section.subsections),
        )

    return [_rename(section) for section in sections]


def add_variables(
    sections: Iterable[Section], section_name: str, variables: Iterable[Variable]
) -> list[Section]:
    """Append ``variables`` to every section named ``section_name``."""
    extra = tuple(variables)
    return [
        section.model_copy(update={"variables": section.variables + extra})
        if section.name == section_name
        else section
        for section in sections
    ]
