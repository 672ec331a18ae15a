"""Project search endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from playground_api.middleware.error_handler import ValidationAPIError
from playground_api.schemas.profiles import ProjectSearchResult
from playground_api.services.profile_store import ProfileStore, get_store

router = APIRouter()


@router.get("/projects", response_model=list[ProjectSearchResult])
def search_projects(
    q: Optional[str] = Query(None, description="Case-insensitive text to find in project titles and descriptions"),
    store: ProfileStore = Depends(get_store),
):
    """Search projects across all profiles."""
    if not q:
        raise ValidationAPIError('Query parameter "q" is required', field="q")

    return [ProjectSearchResult.model_validate(p) for p in store.search_projects(q)]
