"""
rolegate.db.repositories.roles

Storage adapter for roles (cargos).

Responsibilities:
- CRUD on the `cargo` table, returning domain `Role` values.
- Translate constraint violations into domain conditions:
  - unique name        -> DuplicateNameError
  - referenced on delete -> ResourceInUseError
  - update matched nothing -> RoleNotFoundError
- Wrap every other storage failure in InfrastructureError.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rolegate.db.integrity import ConstraintViolation, classify
from rolegate.db.mappers import role_from_record
from rolegate.db.models import RoleRecord
from rolegate.domain.models import Role, RoleDraft
from rolegate.errors import (
    DuplicateNameError,
    InfrastructureError,
    ResourceInUseError,
    RoleNotFoundError,
)
from rolegate.observability.logging import get_logger

log = get_logger(__name__)


class RoleRepo:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_all(self) -> list[Role]:
        # Ordering follows the storage collation for `nome`.
        stmt = select(RoleRecord).order_by(RoleRecord.name.asc())
        try:
            async with self._session_factory() as session:
                records = (await session.execute(stmt)).scalars().all()
        except SQLAlchemyError as e:
            log.error("roles_list_failed", error=str(e))
            raise InfrastructureError(f"Failed to load roles: {e}") from e
        return [role_from_record(r) for r in records]

    async def create(self, draft: RoleDraft) -> Role:
        record = RoleRecord(name=draft.name, can_send_push=draft.can_send_administrative_push)
        try:
            async with self._session_factory() as session:
                session.add(record)
                await session.commit()
        except IntegrityError as e:
            raise self._translate_write(e, action="create") from e
        except SQLAlchemyError as e:
            log.error("role_create_failed", error=str(e))
            raise InfrastructureError(f"Failed to create role: {e}") from e

        log.info("role_created", role_id=record.id)
        return role_from_record(record)

    async def update(self, role: Role) -> Role:
        try:
            async with self._session_factory() as session:
                record = await session.get(RoleRecord, role.id, with_for_update=True)
                if record is None:
                    log.warning("role_update_missed", role_id=role.id)
                    raise RoleNotFoundError()
                record.name = role.name
                record.can_send_push = role.can_send_administrative_push
                await session.commit()
        except IntegrityError as e:
            raise self._translate_write(e, action="update") from e
        except SQLAlchemyError as e:
            log.error("role_update_failed", role_id=role.id, error=str(e))
            raise InfrastructureError(f"Failed to update role: {e}") from e

        log.info("role_updated", role_id=record.id)
        return role_from_record(record)

    async def delete(self, role_id: str) -> None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(delete(RoleRecord).where(RoleRecord.id == role_id))
                await session.commit()
        except IntegrityError as e:
            if classify(e) is ConstraintViolation.foreign_key:
                log.warning("role_delete_in_use", role_id=role_id)
                raise ResourceInUseError() from e
            log.error("role_delete_failed", role_id=role_id, error=str(e))
            raise InfrastructureError(f"Failed to delete role: {e}") from e
        except SQLAlchemyError as e:
            log.error("role_delete_failed", role_id=role_id, error=str(e))
            raise InfrastructureError(f"Failed to delete role: {e}") from e

        # Deleting an unknown id is not an error; the row is gone either way.
        log.info("role_deleted", role_id=role_id, rowcount=result.rowcount)

    @staticmethod
    def _translate_write(e: IntegrityError, *, action: str) -> Exception:
        if classify(e) is ConstraintViolation.unique:
            log.warning("role_name_duplicate", action=action)
            return DuplicateNameError()
        log.error("role_write_failed", action=action, error=str(e))
        return InfrastructureError(f"Failed to {action} role: {e}")


# --- Module Notes -----------------------------------------------------------
# Uniqueness and referential integrity are enforced by the database; this
# adapter only translates the violations it reports.
