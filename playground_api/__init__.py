"""API Playground backend: profiles CRUD, skill filtering and project search."""

__version__ = "1.0.0"
