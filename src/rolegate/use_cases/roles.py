"""
rolegate.use_cases.roles

Administrator-only role (cargo) management.

Responsibilities:
- Reject non-admin callers before any repository call.
- Validate required fields (id, name) after the authorization check.
- Delegate to the role repository and return its result unchanged.
"""

from __future__ import annotations

from rolegate.domain.authorization import require_admin
from rolegate.domain.models import Role, RoleDraft, User
from rolegate.domain.ports import RoleRepository
from rolegate.errors import InvalidArgumentError
from rolegate.observability.context import operation_scope


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ListRoles:
    def __init__(self, *, roles: RoleRepository) -> None:
        self._roles = roles

    async def execute(self, caller: User) -> list[Role]:
        require_admin(caller, "You are not allowed to view the role list.")
        with operation_scope("list_roles", actor_id=caller.id):
            return await self._roles.list_all()


class CreateRole:
    def __init__(self, *, roles: RoleRepository) -> None:
        self._roles = roles

    async def execute(self, caller: User, draft: RoleDraft) -> Role:
        require_admin(caller, "You are not allowed to create roles.")
        if _is_blank(draft.name):
            raise InvalidArgumentError("Role name is required.")
        with operation_scope("create_role", actor_id=caller.id):
            return await self._roles.create(draft)


class UpdateRole:
    def __init__(self, *, roles: RoleRepository) -> None:
        self._roles = roles

    async def execute(self, caller: User, role: Role) -> Role:
        require_admin(caller, "You are not allowed to update roles.")
        if _is_blank(role.id):
            raise InvalidArgumentError("Role id is required for an update.")
        if _is_blank(role.name):
            raise InvalidArgumentError("Role name is required.")
        with operation_scope("update_role", actor_id=caller.id):
            return await self._roles.update(role)


class DeleteRole:
    def __init__(self, *, roles: RoleRepository) -> None:
        self._roles = roles

    async def execute(self, caller: User, role_id: str) -> None:
        require_admin(caller, "You are not allowed to delete roles.")
        if _is_blank(role_id):
            raise InvalidArgumentError("Role id is required for a deletion.")
        with operation_scope("delete_role", actor_id=caller.id):
            await self._roles.delete(role_id)


# --- Module Notes -----------------------------------------------------------
# Repository failures (DuplicateNameError, ResourceInUseError, RoleNotFoundError,
# InfrastructureError) pass through untouched.
