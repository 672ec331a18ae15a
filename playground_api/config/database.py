"""Database configuration using SQLAlchemy.

The engine is owned by an explicitly constructed ``Database`` instance that is
opened at startup and disposed at shutdown. Nothing here connects at import time.
"""

from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from .settings import settings

# Base class for models
Base = declarative_base()


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        engine_kwargs = {
            "echo": settings.DEBUG if echo is None else echo,
            "pool_pre_ping": True,
        }
        if self.url.startswith("sqlite"):
            # Handlers run in FastAPI's thread pool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update(pool_size=5, max_overflow=10, pool_recycle=3600)

        self.engine: Engine = create_engine(self.url, **engine_kwargs)
        # Session factory
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a session that is always closed.

        Usage:
            with database.session() as db:
                db.query(Profile).all()
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def create_tables(self) -> None:
        """Create all tables registered on Base."""
        # Import all models to register them with Base
        from playground_api import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def check_connection(self) -> bool:
        """Check if database connection is working."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    def dispose(self) -> None:
        """Release all pooled connections."""
        self.engine.dispose()
