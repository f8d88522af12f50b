"""Documentation model handed to consumers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hyprdocs.schemas.keywords import Keyword
from hyprdocs.schemas.sections import Section


class DocumentationModel(BaseModel):
    """Sections and keywords extracted from the documentation, built once."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[Section, ...] = ()
    keywords: tuple[Keyword, ...] = ()

    def section(self, name: str) -> Section | None:
        """Find a section by name, searching roots before subsections."""
        for section in self.sections:
            if section.name == name:
                return section
        for section in self.sections:
            for subsection in section.subsections:
                if subsection.name == name:
                    return subsection
        return None

    def keyword(self, name: str) -> Keyword | None:
        for keyword in self.keywords:
            if keyword.name == name:
                return keyword
        return None
