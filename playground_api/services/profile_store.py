"""Profile persistence.

``ProfileStore`` is constructed once at startup around a ``Database`` and handed
to the endpoints through ``app.state``. Every call opens and closes its own
session, so calls are independent of each other.

Skill filtering and the project search pre-filter are plain substring matches
over the JSON text columns. A skill filter of "Script" therefore matches both
"JavaScript" and "TypeScript".
"""

from typing import Any, Optional

import structlog
from fastapi import Request
from sqlalchemy import Text, func
from sqlalchemy.exc import IntegrityError

from playground_api.config.database import Database
from playground_api.models import Profile, dump_json_list, utcnow

logger = structlog.get_logger()


class ProfileStoreError(Exception):
    """Base exception for profile store errors."""


class ProfileNotFoundError(ProfileStoreError):
    """No profile has the requested id."""

    def __init__(self, profile_id: int):
        self.profile_id = profile_id
        super().__init__(f"Profile {profile_id} not found")


class DuplicateEmailError(ProfileStoreError):
    """Another profile already uses this email."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already exists: {email}")


class InvalidProfileError(ProfileStoreError):
    """Required profile fields are missing."""


# SQLite INTEGER primary keys are signed 64-bit and autoincrement starts at 1
MAX_PROFILE_ID = 2**63 - 1


def _is_storable_id(profile_id: int) -> bool:
    return 0 < profile_id <= MAX_PROFILE_ID


def _is_unique_violation(exc: IntegrityError) -> bool:
    return "unique" in str(exc.orig).lower()


def _matches_literally_in_json(query: str) -> bool:
    """Whether ``query`` appears unescaped when JSON-encoded.

    Quotes, backslashes and control characters are escaped by the encoder, and
    SQL lower() only folds ASCII, so the text pre-filter would miss such queries.
    """
    return query.isascii() and not any(c in '"\\' or ord(c) < 0x20 for c in query)


class ProfileStore:
    """CRUD and search over the profiles table."""

    def __init__(self, database: Database, seed: bool = True):
        self.database = database
        self.seed = seed

    def initialize(self) -> None:
        """Create the schema and seed an empty table.

        Errors propagate; the service must not start without its table.
        """
        self.database.create_tables()
        logger.info("Profiles table ready", url=self.database.engine.url.render_as_string())

        if self.seed:
            # Imported here to avoid a circular import with the seed module
            from playground_api.services.seed import seed_sample_profiles

            seed_sample_profiles(self)

    def close(self) -> None:
        self.database.dispose()
        logger.info("Database connections closed")

    def ping(self) -> bool:
        return self.database.check_connection()

    def count_profiles(self) -> int:
        with self.database.session() as db:
            return db.query(func.count(Profile.id)).scalar() or 0

    def list_profiles(self, skill: Optional[str] = None) -> list[Profile]:
        """All profiles, optionally narrowed by a case-sensitive skill substring."""
        with self.database.session() as db:
            query = db.query(Profile)
            if skill:
                query = query.filter(Profile.skills.contains(skill, autoescape=True))
            profiles = query.order_by(Profile.id).all()

        if not skill:
            return profiles
        # LIKE folds case on some engines; the raw text check does not
        return [p for p in profiles if skill in (p.skills or "")]

    def get_profile(self, profile_id: int) -> Profile:
        if not _is_storable_id(profile_id):
            raise ProfileNotFoundError(profile_id)
        with self.database.session() as db:
            profile = db.query(Profile).filter(Profile.id == profile_id).first()
            if not profile:
                raise ProfileNotFoundError(profile_id)
            return profile

    def create_profile(self, fields: dict[str, Any]) -> int:
        """Insert a profile and return its id."""
        self._validate(fields)
        now = utcnow()
        profile = Profile(
            name=fields["name"],
            email=fields["email"],
            education=fields.get("education"),
            skills=dump_json_list(fields.get("skills")),
            projects=dump_json_list(fields.get("projects")),
            created_at=now,
            updated_at=now,
        )

        with self.database.session() as db:
            db.add(profile)
            self._commit(db, fields["email"])
            logger.info("Profile created", id=profile.id)
            return profile.id

    def update_profile(self, profile_id: int, fields: dict[str, Any]) -> None:
        """Replace every mutable field of a profile."""
        self._validate(fields)
        if not _is_storable_id(profile_id):
            raise ProfileNotFoundError(profile_id)

        with self.database.session() as db:
            profile = db.query(Profile).filter(Profile.id == profile_id).first()
            if not profile:
                raise ProfileNotFoundError(profile_id)

            profile.name = fields["name"]
            profile.email = fields["email"]
            profile.education = fields.get("education")
            profile.skills = dump_json_list(fields.get("skills"))
            profile.projects = dump_json_list(fields.get("projects"))
            profile.updated_at = utcnow()

            self._commit(db, fields["email"])
            logger.info("Profile updated", id=profile_id)

    def delete_profile(self, profile_id: int) -> None:
        if not _is_storable_id(profile_id):
            raise ProfileNotFoundError(profile_id)
        with self.database.session() as db:
            deleted = db.query(Profile).filter(Profile.id == profile_id).delete()
            db.commit()

        if not deleted:
            raise ProfileNotFoundError(profile_id)
        logger.info("Profile deleted", id=profile_id)

    def search_projects(self, query: str) -> list[dict[str, Any]]:
        """Projects whose title or description contains ``query`` (any case).

        Returns flattened project dicts annotated with profile_id and profile_name.
        """
        needle = query.lower()

        with self.database.session() as db:
            rows = db.query(Profile)
            if _matches_literally_in_json(query):
                rows = rows.filter(func.lower(Profile.projects, type_=Text).contains(needle, autoescape=True))
            rows = rows.order_by(Profile.id).all()

        results = []
        for profile in rows:
            for project in profile.project_list:
                if not isinstance(project, dict):
                    continue
                title = str(project.get("title") or "")
                description = str(project.get("description") or "")
                if needle in title.lower() or needle in description.lower():
                    results.append({
                        **project,
                        "profile_id": profile.id,
                        "profile_name": profile.name,
                    })

        logger.debug("Project search", query=query, candidates=len(rows), matches=len(results))
        return results

    @staticmethod
    def _validate(fields: dict[str, Any]) -> None:
        if not fields.get("name") or not fields.get("email"):
            raise InvalidProfileError("Name and email are required")

    @staticmethod
    def _commit(db, email: str) -> None:
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            if _is_unique_violation(e):
                raise DuplicateEmailError(email) from e
            raise


def get_store(request: Request) -> ProfileStore:
    """
    Dependency that provides the store created at startup.

    Usage:
        @router.get("/profiles")
        def list_profiles(store: ProfileStore = Depends(get_store)):
            return store.list_profiles()
    """
    return request.app.state.store
