"""Project schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from project_tracker.schemas.fields import TechStack

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
GithubLink = Annotated[str, StringConstraints(strip_whitespace=True, max_length=2048)]
Description = Annotated[str, StringConstraints(min_length=1, max_length=10000)]


class CamelModel(BaseModel):
    """Base for project payloads exchanged in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectCreate(CamelModel):
    """Create a new project."""

    model_config = ConfigDict(extra="forbid")

    title: Title
    description: Description
    github_link: GithubLink | None = ""
    tech_stack: TechStack

    @field_validator("github_link")
    @classmethod
    def default_github_link(cls, v: str | None) -> str:
        return v or ""


class ProjectUpdate(CamelModel):
    """Partial update of a project. Only supplied fields are applied."""

    model_config = ConfigDict(extra="forbid")

    title: Title | None = None
    description: Description | None = None
    github_link: GithubLink | None = None
    tech_stack: TechStack | None = None

    @field_validator("title", "description", "tech_stack")
    @classmethod
    def reject_null(cls, v, info: ValidationInfo):
        # Defaults are not validated, so only an explicit null reaches here.
        if v is None:
            raise ValueError(f"{to_camel(info.field_name)} cannot be null")
        return v

    @field_validator("github_link")
    @classmethod
    def null_clears_github_link(cls, v: str | None) -> str:
        return v or ""

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class ProjectResponse(CamelModel):
    """Project response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    github_link: str
    tech_stack: list[str]
    created_at: datetime
    updated_at: datetime
