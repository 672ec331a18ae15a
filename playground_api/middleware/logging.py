"""Structured logging setup and per-request access logs."""

import logging
import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = structlog.get_logger()

# Path and query parameters promoted to their own log fields
LOGGED_PATH_PARAMS = ("profile_id",)
LOGGED_QUERY_PARAMS = ("skill", "q")


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure structlog; ``fmt`` is "json" or "console"."""
    renderer = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def request_log_fields(request: Request) -> dict:
    """Fields describing which operation a request hit.

    Matched requests are keyed by route template, so every
    ``/profiles/{profile_id}`` call groups together. Unmatched requests keep
    their raw path.
    """
    route = request.scope.get("route")
    fields = {"method": request.method, "route": getattr(route, "path", None)}
    if route is None:
        fields["path"] = request.url.path

    for name in LOGGED_PATH_PARAMS:
        if name in request.path_params:
            fields[name] = request.path_params[name]
    for name in LOGGED_QUERY_PARAMS:
        if name in request.query_params:
            fields[name] = request.query_params[name]
    return fields


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per completed request and tags it with a request id."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        # Routing has run, so the matched route and path params are on the scope
        fields = request_log_fields(request)
        if response.status_code >= 500:
            log_method = logger.error
        elif response.status_code >= 400:
            log_method = logger.warning
        else:
            log_method = logger.info
        log_method(
            "Request completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
            **fields,
        )

        response.headers["X-Request-ID"] = request_id
        return response
