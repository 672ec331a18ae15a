"""Async HTTP client for the API Playground backend."""

from typing import Any, Optional

import httpx
import structlog

logger = structlog.get_logger()


class APIRequestError(Exception):
    """The backend rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class PlaygroundClient:
    """Thin wrapper around ``httpx.AsyncClient`` for the profiles API.

    Every method returns the decoded JSON body or raises ``APIRequestError``
    carrying the backend's error message.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("API unreachable", method=method, path=path, error=str(e))
            raise APIRequestError(f"Could not reach API: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_error:
            message = "API request failed"
            if isinstance(data, dict) and isinstance(data.get("error"), str):
                message = data["error"]
            logger.warning(
                "API request failed",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise APIRequestError(message, response.status_code)

        return data

    async def health(self) -> dict:
        return await self._request("GET", "/health")

    async def list_profiles(self, skill: Optional[str] = None) -> list[dict]:
        params = {"skill": skill} if skill else None
        return await self._request("GET", "/profiles", params=params)

    async def search_projects(self, query: str) -> list[dict]:
        return await self._request("GET", "/search/projects", params={"q": query})

    async def create_profile(self, payload: dict) -> dict:
        return await self._request("POST", "/profiles", json=payload)
