"""Profile model.

Skills and projects live on the row as JSON text. Projects have no identity of
their own and are only reachable through their profile.
"""

import json
from typing import Any

from sqlalchemy import Column, Integer, String, Text

from playground_api.config.database import Base

from .base import TimestampMixin


def dump_json_list(items: Any) -> str:
    """Serialize a list for a JSON text column."""
    return json.dumps(list(items or []), ensure_ascii=False)


def load_json_list(data: Any) -> list:
    """Deserialize a JSON text column, falling back to an empty list."""
    if not data:
        return []
    if isinstance(data, list):
        return data
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, TypeError):
        return []
    return value if isinstance(value, list) else []


class Profile(Base, TimestampMixin):
    """A person with their education, skills and embedded projects."""

    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    education = Column(Text, nullable=True)

    skills = Column(Text, nullable=False, default="[]")  # JSON: ["Python", "SQL"]
    projects = Column(Text, nullable=False, default="[]")  # JSON: [{title, description, links}]

    @property
    def skill_list(self) -> list[str]:
        return load_json_list(self.skills)

    @property
    def project_list(self) -> list[dict]:
        return load_json_list(self.projects)

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, email={self.email})>"
