"""Pydantic schemas for API request/response validation.

All schemas use CamelCase for JSON field names (via alias_generator).
"""

from .base import CamelModel, MessageResponse, ErrorResponse
from .profiles import (
    ProjectSchema,
    ProfilePayload,
    ProfileResponse,
    ProfileCreated,
    ProjectSearchResult,
)

__all__ = [
    # Base
    "CamelModel",
    "MessageResponse",
    "ErrorResponse",
    # Profiles
    "ProjectSchema",
    "ProfilePayload",
    "ProfileResponse",
    "ProfileCreated",
    "ProjectSearchResult",
]
