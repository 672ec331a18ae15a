"""
Pytest fixtures for API Playground tests.

Every test gets its own SQLite file so stores never share rows.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from playground_api.config.database import Database
from playground_api.main import create_app
from playground_api.services.profile_store import ProfileStore


@pytest.fixture
def database(tmp_path) -> Iterator[Database]:
    """Fresh file-backed database for each test."""
    db = Database(f"sqlite:///{tmp_path / 'profiles.db'}", echo=False)
    yield db
    db.dispose()


@pytest.fixture
def store(database) -> ProfileStore:
    """Initialized store without sample data."""
    profile_store = ProfileStore(database, seed=False)
    profile_store.initialize()
    return profile_store


@pytest.fixture
def seeded_store(database) -> ProfileStore:
    """Initialized store holding the sample profiles."""
    profile_store = ProfileStore(database, seed=True)
    profile_store.initialize()
    return profile_store


@pytest.fixture
def client(database) -> Iterator[tuple[TestClient, ProfileStore]]:
    """API client over an empty table."""
    profile_store = ProfileStore(database, seed=False)
    with TestClient(create_app(profile_store)) as test_client:
        yield test_client, profile_store


@pytest.fixture
def seeded_client(database) -> Iterator[tuple[TestClient, ProfileStore]]:
    """API client over the sample profiles."""
    profile_store = ProfileStore(database, seed=True)
    with TestClient(create_app(profile_store)) as test_client:
        yield test_client, profile_store


@pytest.fixture
def profile_payload() -> dict:
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "education": "Mathematics, University of London",
        "skills": ["Mathematics", "TypeScript", "Analytical Engines"],
        "projects": [
            {
                "title": "Bernoulli Numbers",
                "description": "First published ML-adjacent algorithm for a machine",
                "links": ["https://example.org/notes", "not a url"],
            },
            {
                "title": "Poetical Science",
                "description": "Essays on imagination in computing",
                "links": [],
            },
        ],
    }
