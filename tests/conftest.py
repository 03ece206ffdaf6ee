"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide a per-test SQLite database with the schema created.
- Seed helpers for users, roles and assignments.
- Recording stubs for the role repository, profile store and identity gateway.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable, Mapping, Sequence
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from rolegate.db.init_db import init_db
from rolegate.db.models import (
    LocationRecord,
    RoleAssignmentRecord,
    RoleRecord,
    UserRecord,
)
from rolegate.db.session import create_engine, create_sessionmaker
from rolegate.domain.models import LocationKind, Role, RoleDraft, User
from rolegate.domain.ports import GatewayError
from rolegate.errors import InfrastructureError
from rolegate.settings import Settings

ADMIN = User(
    id="admin-1",
    email="admin@x.org",
    name="Admin",
    primary_location_id=None,
    is_admin=True,
    roles=frozenset({"Administrador do Sistema"}),
)
MEMBER = User(
    id="member-1",
    email="member@x.org",
    name="Member",
    primary_location_id=None,
    is_admin=False,
    roles=frozenset({"Diácono"}),
)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'rolegate.db'}",
        identity_url="http://identity.test",
        identity_api_key="anon-key",
    )


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(engine)


async def seed_roles(
    session_factory: async_sessionmaker[AsyncSession], names: Iterable[str]
) -> dict[str, str]:
    records = {name: RoleRecord(name=name) for name in names}
    async with session_factory() as session:
        session.add_all(records.values())
        await session.commit()
    return {name: r.id for name, r in records.items()}


async def seed_user(
    session_factory: async_sessionmaker[AsyncSession],
    *,
    user_id: str,
    name: str = "Maria",
    email: str = "maria@x.org",
    role_ids: Iterable[str] = (),
    location_name: str | None = None,
) -> None:
    async with session_factory() as session:
        location_id = None
        if location_name is not None:
            location = LocationRecord(name=location_name, kind=LocationKind.congregation)
            session.add(location)
            await session.flush()
            location_id = location.id
        session.add(UserRecord(id=user_id, name=name, email=email, location_id=location_id))
        await session.flush()
        session.add_all(RoleAssignmentRecord(user_id=user_id, role_id=r) for r in role_ids)
        await session.commit()


class RecordingRoleRepo:
    """
    In-memory role repository that records every call it receives.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.roles: list[Role] = [Role(id="r1", name="Ancião")]
        self.created = Role(id="r-new", name="Diácono")
        self.updated = Role(id="r1", name="Ancião Renamed")

    async def list_all(self) -> list[Role]:
        self.calls.append(("list_all", None))
        return self.roles

    async def create(self, draft: RoleDraft) -> Role:
        self.calls.append(("create", draft))
        return self.created

    async def update(self, role: Role) -> Role:
        self.calls.append(("update", role))
        return self.updated

    async def delete(self, role_id: str) -> None:
        self.calls.append(("delete", role_id))


class RecordingProfileStore:
    def __init__(
        self,
        rows: Sequence[Mapping[str, Any]] = (),
        *,
        fail_fetch: bool = False,
        fail_insert: bool = False,
    ) -> None:
        self.rows = list(rows)
        self.fail_fetch = fail_fetch
        self.fail_insert = fail_insert
        self.fetched: list[str] = []
        self.inserted: list[dict[str, Any]] = []

    async def fetch_with_roles(self, user_id: str) -> list[Mapping[str, Any]]:
        self.fetched.append(user_id)
        if self.fail_fetch:
            raise InfrastructureError("connection reset")
        return self.rows

    async def insert(self, **kwargs: Any) -> None:
        if self.fail_insert:
            raise InfrastructureError("insert failed")
        self.inserted.append(kwargs)


class FakeGateway:
    def __init__(
        self,
        *,
        identity_id: str = "U1",
        error: GatewayError | None = None,
        logout_error: GatewayError | None = None,
    ) -> None:
        self.identity_id = identity_id
        self.error = error
        self.logout_error = logout_error
        self.session: str | None = None
        self.calls: list[str] = []

    async def verify_credentials(self, email: str, password: str) -> str:
        self.calls.append("verify_credentials")
        if self.error is not None:
            raise self.error
        self.session = self.identity_id
        return self.identity_id

    async def create_identity(self, email: str, password: str) -> str:
        self.calls.append("create_identity")
        if self.error is not None:
            raise self.error
        return self.identity_id

    async def current_session(self) -> str | None:
        self.calls.append("current_session")
        return self.session

    async def end_session(self) -> None:
        self.calls.append("end_session")
        self.session = None
        if self.logout_error is not None:
            raise self.logout_error


@pytest.fixture
def role_repo() -> RecordingRoleRepo:
    return RecordingRoleRepo()


@pytest.fixture
def admin() -> User:
    return ADMIN


@pytest.fixture
def member() -> User:
    return MEMBER
