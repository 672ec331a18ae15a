"""Pydantic schemas for Profile and project search endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from playground_api.models.profiles import load_json_list

from .base import CamelModel


class ProjectSchema(CamelModel):
    """A project embedded in a profile."""

    title: str
    description: str
    links: list[str] = []

    @field_validator("links", mode="before")
    @classmethod
    def coerce_links(cls, v: Any) -> list:
        return [] if v is None else v


class ProfilePayload(CamelModel):
    """Body for POST and PUT.

    Name and email are checked for presence by the endpoint so that a missing
    value produces the documented 400 rather than a schema error.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    education: Optional[str] = None
    skills: Optional[list[str]] = None
    projects: Optional[list[ProjectSchema]] = None

    def has_required_fields(self) -> bool:
        return bool(self.name) and bool(self.email)

    def to_fields(self) -> dict[str, Any]:
        """Normalized store fields: absent optionals become null or []."""
        return {
            "name": self.name,
            "email": self.email,
            "education": self.education,
            "skills": list(self.skills or []),
            "projects": [p.model_dump() for p in self.projects or []],
        }


class ProfileResponse(CamelModel):
    """Schema for profile response.

    Timestamps keep their column names on the wire; clients read
    created_at and updated_at straight off the row shape.
    """

    id: int
    name: str
    email: str
    education: Optional[str] = None
    skills: list[str] = []
    projects: list[ProjectSchema] = []
    created_at: datetime = Field(serialization_alias="created_at")
    updated_at: datetime = Field(serialization_alias="updated_at")

    # Stored as JSON text on the row
    @field_validator("skills", "projects", mode="before")
    @classmethod
    def parse_json_text(cls, v: Any) -> list:
        return load_json_list(v)


class ProfileCreated(CamelModel):
    """Response for a newly created profile."""

    id: int
    message: str


class ProjectSearchResult(ProjectSchema):
    """A matching project annotated with its owning profile."""

    profile_id: int
    profile_name: str
