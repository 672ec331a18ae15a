"""
API Playground - Browser Client

Serves the page and the HTML fragments it swaps in. All data comes from the
backend API; this service keeps no profile state of its own.
Run with: uvicorn playground_web.main:app --port 8080
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse

from playground_web.api_client import APIRequestError, PlaygroundClient
from playground_web.config import settings
from playground_web.rendering import (
    render_clear,
    render_error,
    render_page,
    render_profile_form,
    render_profiles,
    render_projects,
    render_status,
)

# Configure stdlib logging level (required for structlog.stdlib.filter_by_level)
logging.basicConfig(
    format="%(message)s",
    stream=sys.stdout,
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if settings.LOG_FORMAT == "json" else structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

PROFILES_PANE = "profilesContainer"
PROJECTS_PANE = "projectsContainer"


def get_api(request: Request) -> PlaygroundClient:
    """Dependency that provides the backend client created at startup."""
    return request.app.state.api


def _fragment(*parts: str, reswap: Optional[str] = None) -> HTMLResponse:
    response = HTMLResponse("".join(parts))
    if reswap:
        # Out-of-band parts are still applied
        response.headers["HX-Reswap"] = reswap
    return response


def _status_only(message: str, kind: str = "error") -> HTMLResponse:
    return _fragment(render_status(message, kind), reswap="none")


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()] if value else []


async def _profile_parts(api: PlaygroundClient, skill: Optional[str] = None) -> list[str]:
    """Profiles pane plus a cleared projects pane, or an error message."""
    try:
        profiles = await api.list_profiles(skill)
    except APIRequestError as e:
        failure = "Failed to search profiles" if skill else "Failed to load profiles"
        return [
            render_error(failure),
            render_clear(PROJECTS_PANE),
            render_status(f"Error: {e.message}", "error"),
        ]

    parts = [render_profiles(profiles), render_clear(PROJECTS_PANE)]
    if skill:
        if profiles:
            parts.append(render_status(f"Found {len(profiles)} profile(s) with skill: {skill}"))
        else:
            parts.append(render_status(f"No profiles found with skill: {skill}", "error"))
    return parts


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open and close the backend client."""
    logger.info("Starting API Playground client", api_base_url=app.state.api.base_url)
    yield
    await app.state.api.close()
    logger.info("Shutting down API Playground client")


def create_app(api: Optional[PlaygroundClient] = None) -> FastAPI:
    """Create the client application around a backend client."""
    app = FastAPI(
        title="API Playground Client",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.api = api or PlaygroundClient(settings.API_BASE_URL, timeout=settings.API_TIMEOUT)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        return HTMLResponse(render_page(settings.API_BASE_URL))

    @app.get("/fragments/startup", response_class=HTMLResponse)
    async def startup_fragment(api: PlaygroundClient = Depends(get_api)):
        """Check backend health, then load every profile."""
        try:
            health = await api.health()
        except APIRequestError:
            return _fragment(
                render_error("Backend API is not available"),
                render_status("Failed to connect to API. Make sure the backend server is running.", "error"),
            )

        logger.info("API health", status=health.get("status") if isinstance(health, dict) else None)
        return _fragment(*await _profile_parts(api))

    @app.get("/fragments/profiles", response_class=HTMLResponse)
    async def profiles_fragment(
        skill: Optional[str] = None,
        api: PlaygroundClient = Depends(get_api),
    ):
        """All profiles, or those matching a skill when one is given."""
        if skill is not None:
            skill = skill.strip()
            if not skill:
                return _status_only("Please enter a skill to search for")
        return _fragment(*await _profile_parts(api, skill))

    @app.get("/fragments/projects", response_class=HTMLResponse)
    async def projects_fragment(
        q: Optional[str] = None,
        api: PlaygroundClient = Depends(get_api),
    ):
        """Project search results; clears the profiles pane."""
        query = (q or "").strip()
        if not query:
            return _status_only("Please enter a search term for projects")

        try:
            projects = await api.search_projects(query)
        except APIRequestError as e:
            return _fragment(
                render_error("Failed to search projects"),
                render_clear(PROFILES_PANE),
                render_status(f"Error: {e.message}", "error"),
            )

        if projects:
            status = render_status(f"Found {len(projects)} project(s) matching: {query}")
        else:
            status = render_status(f"No projects found matching: {query}", "error")
        return _fragment(render_projects(projects), render_clear(PROFILES_PANE), status)

    @app.post("/fragments/profiles", response_class=HTMLResponse)
    async def create_profile_fragment(
        name: str = Form(""),
        email: str = Form(""),
        education: str = Form(""),
        skills: str = Form(""),
        project_title: str = Form(""),
        project_description: str = Form(""),
        project_links: str = Form(""),
        api: PlaygroundClient = Depends(get_api),
    ):
        """Submit the add-profile form, then refresh the profile list."""
        name, email = name.strip(), email.strip()
        if not name or not email:
            return _status_only("Name and email are required")

        # A project needs both a title and a description
        projects = []
        title, description = project_title.strip(), project_description.strip()
        if title and description:
            projects.append({
                "title": title,
                "description": description,
                "links": _split_csv(project_links),
            })

        payload = {
            "name": name,
            "email": email,
            "education": education.strip() or None,
            "skills": _split_csv(skills),
            "projects": projects,
        }

        try:
            result = await api.create_profile(payload)
        except APIRequestError as e:
            return _status_only(f"Error: {e.message}")

        logger.info("Profile submitted", id=result.get("id") if isinstance(result, dict) else None)
        parts = await _profile_parts(api)
        parts.append(render_status("Profile created successfully!"))
        parts.append(render_profile_form(oob=True))
        return _fragment(*parts)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "playground_web.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
