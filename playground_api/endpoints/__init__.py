"""API endpoints for the API Playground."""

from fastapi import APIRouter

from .health import router as health_router
from .profiles import router as profiles_router
from .search import router as search_router

# Create main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(profiles_router, prefix="/profiles", tags=["Profiles"])
api_router.include_router(search_router, prefix="/search", tags=["Search"])

__all__ = ["api_router"]
