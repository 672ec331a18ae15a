"""Services for the API Playground."""

from .profile_store import (
    ProfileStore,
    ProfileStoreError,
    ProfileNotFoundError,
    DuplicateEmailError,
    InvalidProfileError,
    get_store,
)
from .seed import SAMPLE_PROFILES, seed_sample_profiles

__all__ = [
    "ProfileStore",
    "ProfileStoreError",
    "ProfileNotFoundError",
    "DuplicateEmailError",
    "InvalidProfileError",
    "get_store",
    "SAMPLE_PROFILES",
    "seed_sample_profiles",
]
