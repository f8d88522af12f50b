"""Documentation source models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Raw documentation markup and the name it is bundled under."""

    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    format: Literal["markdown", "html"] = "markdown"


class DocumentSource(BaseModel):
    """How a bundled document contributes sections to the model.

    Attributes:
        name: Name of the document in the bundle.
        heading_root_level: Headings at or above this level (numerically lower
            or equal) start a top-level section.
        root_name: Optional replacement for every section's top-level title,
            used to merge separately parsed documents under one name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    heading_root_level: int = Field(..., ge=1, le=6)
    root_name: str | None = None
