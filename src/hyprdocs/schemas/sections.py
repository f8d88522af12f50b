"""Section and variable models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Variable(BaseModel):
    """A documented configuration variable."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: str
    default: str


class Section(BaseModel):
    """A named group of variables, identified by its heading path."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(..., min_length=1)
    variables: tuple[Variable, ...] = ()
    subsections: tuple["Section", ...] = ()

    @model_validator(mode="after")
    def check_subsections(self) -> Section:
        if self.subsections and len(self.path) > 1:
            raise ValueError(f"Nested section {self.path!r} cannot own subsections")
        for subsection in self.subsections:
            if len(subsection.path) < 2 or subsection.root_name != self.root_name:
                raise ValueError(
                    f"Subsection {subsection.path!r} does not belong under {self.path!r}"
                )
        return self

    @property
    def name(self) -> str:
        return self.path[-1]

    @property
    def root_name(self) -> str:
        return self.path[0]

    @property
    def is_root(self) -> bool:
        return len(self.path) == 1

    def variable(self, name: str) -> Variable | None:
        """Return the first variable called ``name``, in document order."""
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None
