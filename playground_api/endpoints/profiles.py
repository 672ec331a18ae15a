"""Profile CRUD endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Path, Query

from playground_api.middleware.error_handler import NotFoundError, ValidationAPIError
from playground_api.schemas.base import ErrorResponse, MessageResponse
from playground_api.schemas.profiles import (
    ProfileCreated,
    ProfilePayload,
    ProfileResponse,
)
from playground_api.services.profile_store import MAX_PROFILE_ID, ProfileStore, get_store

logger = structlog.get_logger()
router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)


def profile_id_path(profile_id: str = Path(..., description="Profile ID")) -> int:
    """Resolve the {profile_id} segment.

    Anything that is not a plain decimal id can never match a row, so it is a
    404 like any other missing profile.
    """
    if (
        not (profile_id.isascii() and profile_id.isdigit())
        or len(profile_id) > len(str(MAX_PROFILE_ID))
    ):
        raise NotFoundError("Profile", profile_id)
    return int(profile_id)


def _require_name_and_email(data: ProfilePayload) -> None:
    if not data.has_required_fields():
        raise ValidationAPIError("Name and email are required")


@router.get("", response_model=list[ProfileResponse])
def list_profiles(
    skill: Optional[str] = Query(None, description="Substring of the serialized skills list"),
    store: ProfileStore = Depends(get_store),
):
    """List all profiles, optionally filtered by skill."""
    profiles = store.list_profiles(skill=skill)
    return [ProfileResponse.model_validate(p) for p in profiles]


@router.get("/{profile_id}", response_model=ProfileResponse)
def get_profile(
    profile_id: int = Depends(profile_id_path),
    store: ProfileStore = Depends(get_store),
):
    """Get a profile by ID."""
    return ProfileResponse.model_validate(store.get_profile(profile_id))


@router.post("", response_model=ProfileCreated, status_code=201)
def create_profile(
    data: ProfilePayload,
    store: ProfileStore = Depends(get_store),
):
    """Create a new profile."""
    _require_name_and_email(data)
    profile_id = store.create_profile(data.to_fields())
    return ProfileCreated(id=profile_id, message="Profile created successfully")


@router.put("/{profile_id}", response_model=MessageResponse)
def update_profile(
    data: ProfilePayload,
    profile_id: int = Depends(profile_id_path),
    store: ProfileStore = Depends(get_store),
):
    """Replace a profile.

    Every mutable field is overwritten; omitted optional fields are cleared.
    """
    _require_name_and_email(data)
    store.update_profile(profile_id, data.to_fields())
    return MessageResponse(message="Profile updated successfully")


@router.delete("/{profile_id}", response_model=MessageResponse)
def delete_profile(
    profile_id: int = Depends(profile_id_path),
    store: ProfileStore = Depends(get_store),
):
    """Delete a profile (hard delete)."""
    store.delete_profile(profile_id)
    return MessageResponse(message="Profile deleted successfully")
