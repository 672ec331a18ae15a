"""
API Playground - FastAPI Application

Main entry point for the API server.
Run with: uvicorn playground_api.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playground_api.config.settings import settings
from playground_api.config.database import Database
from playground_api.endpoints import api_router
from playground_api.middleware.error_handler import setup_exception_handlers
from playground_api.middleware.logging import LoggingMiddleware, configure_logging
from playground_api.middleware.security import SecurityHeadersMiddleware
from playground_api.services.profile_store import ProfileStore

# Configure structured logging
configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
logger = structlog.get_logger()


def create_store() -> ProfileStore:
    """Build the store from settings."""
    return ProfileStore(Database(settings.DATABASE_URL), seed=settings.SEED_SAMPLE_DATA)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(
        "Starting API Playground",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
    )

    store: ProfileStore = app.state.store
    try:
        store.initialize()
    except Exception as e:
        logger.critical("Failed to initialize database", error=str(e))
        raise  # Prevent app from starting

    yield

    # Shutdown
    logger.info("Shutting down API Playground")
    store.close()


def create_app(store: Optional[ProfileStore] = None) -> FastAPI:
    """Create the FastAPI application around a profile store."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Profiles CRUD with skill filtering and project search",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.store = store or create_store()

    # Setup exception handlers
    setup_exception_handlers(app)

    # Middleware added last wraps outermost
    app.add_middleware(LoggingMiddleware)

    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_origin_regex=settings.CORS_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "message": f"{settings.APP_NAME} backend is running!",
            "endpoints": {
                "health": "/health",
                "profiles": "/profiles",
                "search": "/search/projects?q=query",
            },
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    logger.info("Server starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(
        "playground_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
