"""
rolegate.db.repositories.users

Storage for user profiles.

Responsibilities:
- Load a profile joined with its assigned role names.
- Insert the profile row created during registration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rolegate.db.models import LocationRecord, RoleAssignmentRecord, RoleRecord, UserRecord
from rolegate.errors import InfrastructureError
from rolegate.observability.logging import get_logger

log = get_logger(__name__)


class UserProfileRepo:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def fetch_with_roles(self, user_id: str) -> list[Mapping[str, Any]]:
        stmt = (
            select(
                UserRecord.id.label("id"),
                UserRecord.email.label("email"),
                UserRecord.name.label("name"),
                UserRecord.location_id.label("location_id"),
                LocationRecord.name.label("location_name"),
                LocationRecord.kind.label("location_kind"),
                LocationRecord.parent_id.label("location_parent_id"),
                RoleRecord.name.label("role_name"),
            )
            .outerjoin(LocationRecord, LocationRecord.id == UserRecord.location_id)
            .outerjoin(RoleAssignmentRecord, RoleAssignmentRecord.user_id == UserRecord.id)
            .outerjoin(RoleRecord, RoleRecord.id == RoleAssignmentRecord.role_id)
            .where(UserRecord.id == user_id)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            log.error("profile_fetch_failed", user_id=user_id, error=str(e))
            raise InfrastructureError(f"Failed to load user profile: {e}") from e

    async def insert(
        self,
        *,
        user_id: str,
        name: str,
        email: str,
        location_id: str | None,
    ) -> None:
        record = UserRecord(id=user_id, name=name, email=email, location_id=location_id)
        try:
            async with self._session_factory() as session:
                session.add(record)
                await session.commit()
        except SQLAlchemyError as e:
            log.error("profile_insert_failed", user_id=user_id, error=str(e))
            raise InfrastructureError(f"Failed to store user profile: {e}") from e
        log.info("profile_inserted", user_id=user_id)
