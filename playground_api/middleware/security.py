"""Security headers applied to every response."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from playground_api.config.settings import settings

# Docs pages load their assets from a CDN
DOCS_PATHS = ("/docs", "/redoc")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds the usual hardening headers to API responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        self._add_security_headers(request, response)
        return response

    def _add_security_headers(self, request: Request, response: Response) -> None:
        """Add security headers to response."""
        # HSTS - only in production
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains"

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cross-Origin-Resource-Policy"] = "cross-origin"

        if not request.url.path.startswith(DOCS_PATHS):
            response.headers["Content-Security-Policy"] = (
                "default-src 'none'; "
                "frame-ancestors 'none'; "
                "base-uri 'none'"
            )
