"""
Fixtures for the browser client tests.

The backend is replaced by an in-memory handler behind ``httpx.MockTransport``.
"""

import json
from collections.abc import Iterator
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from playground_web.api_client import PlaygroundClient
from playground_web.main import create_app

API_BASE_URL = "http://api.test"


class FakeBackend:
    """Minimal stand-in for the profiles API."""

    def __init__(self, profiles: Optional[list[dict]] = None):
        self.profiles = profiles or []
        self.requests: list[httpx.Request] = []
        self.down = False

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)

        path, method = request.url.path, request.method
        if path == "/health":
            return httpx.Response(200, json={"status": "OK", "message": "API is healthy"})
        if path == "/profiles" and method == "GET":
            skill = request.url.params.get("skill")
            profiles = [p for p in self.profiles if not skill or any(skill in s for s in p["skills"])]
            return httpx.Response(200, json=profiles)
        if path == "/profiles" and method == "POST":
            return self._create(json.loads(request.content))
        if path == "/search/projects":
            needle = request.url.params.get("q", "").lower()
            results = [
                {**project, "profileId": p["id"], "profileName": p["name"]}
                for p in self.profiles
                for project in p["projects"]
                if needle in project["title"].lower() or needle in project["description"].lower()
            ]
            return httpx.Response(200, json=results)
        return httpx.Response(404, json={"error": "Endpoint not found", "code": "NOT_FOUND"})

    def _create(self, body: dict) -> httpx.Response:
        if any(p["email"] == body["email"] for p in self.profiles):
            return httpx.Response(409, json={"error": "Email already exists", "code": "CONFLICT"})
        profile = {"id": len(self.profiles) + 1, **body}
        self.profiles.append(profile)
        return httpx.Response(201, json={"id": profile["id"], "message": "Profile created successfully"})

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend([
        {
            "id": 1,
            "name": "Jane Smith",
            "email": "jane.smith@example.com",
            "education": "Software Engineering, Stanford",
            "skills": ["Python", "Machine Learning"],
            "projects": [
                {
                    "title": "ML Prediction Model",
                    "description": "Machine learning model for stock price prediction",
                    "links": ["https://github.com/janesmith/ml-stocks"],
                },
            ],
        },
        {
            "id": 2,
            "name": "Mike Johnson",
            "email": "mike.johnson@example.com",
            "education": None,
            "skills": ["Java", "Docker"],
            "projects": [],
        },
    ])


@pytest.fixture
def web_client(backend) -> Iterator[tuple[TestClient, FakeBackend]]:
    """Browser client app wired to the fake backend."""
    api = PlaygroundClient(API_BASE_URL, transport=httpx.MockTransport(backend))
    with TestClient(create_app(api)) as test_client:
        yield test_client, backend
