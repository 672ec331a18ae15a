"""Base Pydantic schemas with CamelCase conversion."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from humps import camelize


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    return camelize(string)


class CamelModel(BaseModel):
    """
    Base model that converts snake_case fields to camelCase in JSON responses.

    Usage:
        class MyResponse(CamelModel):
            profile_id: int     # JSON: profileId
            profile_name: str   # JSON: profileName
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(CamelModel):
    """Standard error response format."""

    error: str
    code: Optional[str] = None
