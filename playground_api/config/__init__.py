"""Configuration module for the API Playground service."""

from .settings import settings, get_settings, Settings
from .database import Base, Database

__all__ = ["settings", "get_settings", "Settings", "Base", "Database"]
