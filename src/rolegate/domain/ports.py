"""
rolegate.domain.ports

Contracts between the use cases and their adapters.

Responsibilities:
- Describe the Identity Gateway consumed by the authentication adapter.
- Describe the role repository and the user-profile store.
- Describe the authentication service consumed by the login/register use cases.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rolegate.domain.models import Role, RoleDraft, User


@dataclass(eq=False, slots=True)
class GatewayError(Exception):
    """
    Failure reported by the identity gateway.

    `status_code` is None when the gateway could not be reached at all.
    """

    message: str
    status_code: int | None = None
    error_code: str | None = None

    def __str__(self) -> str:
        return self.message


class IdentityGateway(Protocol):
    async def verify_credentials(self, email: str, password: str) -> str: ...

    async def create_identity(self, email: str, password: str) -> str: ...

    async def current_session(self) -> str | None: ...

    async def end_session(self) -> None: ...


class RoleRepository(Protocol):
    async def list_all(self) -> list[Role]: ...

    async def create(self, draft: RoleDraft) -> Role: ...

    async def update(self, role: Role) -> Role: ...

    async def delete(self, role_id: str) -> None: ...


class UserProfileStore(Protocol):
    async def fetch_with_roles(self, user_id: str) -> Sequence[Mapping[str, Any]]: ...

    async def insert(
        self,
        *,
        user_id: str,
        name: str,
        email: str,
        location_id: str | None,
    ) -> None: ...


class AuthService(Protocol):
    async def login(self, email: str, password: str) -> User: ...

    async def register(self, name: str, email: str, password: str) -> User: ...

    async def get_logged_user(self) -> User | None: ...

    async def logout(self) -> None: ...
