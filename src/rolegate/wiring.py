"""
rolegate.wiring

Composition root.

Responsibilities:
- Construct adapters and use cases explicitly from settings.
- Own the lifetime of shared infrastructure (DB engine, HTTP client).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rolegate.auth.gateway import GoTrueGateway
from rolegate.auth.resolver import AuthorizationResolver
from rolegate.auth.service import GatewayAuthService
from rolegate.db.init_db import init_db
from rolegate.db.repositories.roles import RoleRepo
from rolegate.db.repositories.users import UserProfileRepo
from rolegate.db.session import create_engine, create_sessionmaker
from rolegate.observability.logging import configure_logging, get_logger
from rolegate.settings import Settings
from rolegate.use_cases.auth import LoginUser, RegisterUser
from rolegate.use_cases.roles import CreateRole, DeleteRole, ListRoles, UpdateRole

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Services:
    auth: GatewayAuthService
    login_user: LoginUser
    register_user: RegisterUser
    list_roles: ListRoles
    create_role: CreateRole
    update_role: UpdateRole
    delete_role: DeleteRole


def build_services(
    *,
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
    http: httpx.AsyncClient,
) -> Services:
    profiles = UserProfileRepo(session_factory)
    roles = RoleRepo(session_factory)
    resolver = AuthorizationResolver(profiles=profiles, admin_role_name=settings.admin_role_name)
    auth = GatewayAuthService(
        gateway=GoTrueGateway(settings=settings, http=http),
        resolver=resolver,
        profiles=profiles,
        default_location_id=settings.default_location_id,
    )
    return Services(
        auth=auth,
        login_user=LoginUser(auth=auth),
        register_user=RegisterUser(auth=auth),
        list_roles=ListRoles(roles=roles),
        create_role=CreateRole(roles=roles),
        update_role=UpdateRole(roles=roles),
        delete_role=DeleteRole(roles=roles),
    )


@asynccontextmanager
async def open_services(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[Services]:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    engine = create_engine(settings)
    if settings.env in ("dev", "test"):
        await init_db(engine)
    log.info("startup", env=settings.env)

    try:
        async with httpx.AsyncClient(
            base_url=settings.identity_url,
            timeout=settings.identity_timeout_seconds,
            transport=transport,
        ) as http:
            yield build_services(
                settings=settings,
                session_factory=create_sessionmaker(engine),
                http=http,
            )
    finally:
        await engine.dispose()
        log.info("shutdown")


# --- Module Notes -----------------------------------------------------------
# `transport` lets tests and embedders route gateway calls without a network.
