"""SQLAlchemy ORM models for the API Playground.

All models are imported here to ensure they're registered with Base.metadata
before any database operations.
"""

# Import base first
from playground_api.config.database import Base

from .base import TimestampMixin, utcnow
from .profiles import Profile, dump_json_list, load_json_list

__all__ = [
    "Base",
    "TimestampMixin",
    "utcnow",
    "Profile",
    "dump_json_list",
    "load_json_list",
]
