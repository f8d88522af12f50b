"""Keyword registry model."""

from __future__ import annotations

from pydantic import BaseModel


class Keyword(BaseModel):
    """A keyword whose description is looked up in the documentation.

    Attributes:
        name: Keyword as written in configuration files.
        documentation_file: Name of the bundled document to search.
        documentation_heading_slug: Anchor of the heading describing the keyword.
        description: Markdown description, empty until resolved.
    """

    name: str
    documentation_file: str
    documentation_heading_slug: str
    description: str = ""

    def describe(self, description: str) -> None:
        """Set the description; an existing description is never overwritten."""
        if self.description:
            raise ValueError(f"Keyword {self.name!r} already has a description")
        self.description = description
