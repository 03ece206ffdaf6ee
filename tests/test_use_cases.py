"""
tests.test_use_cases

Authorization-gated use cases.

Responsibilities:
- Non-admin callers are rejected before any repository call.
- Admin callers get exactly what the repository returns.
- Required fields are checked after the guard; repository failures pass through.
"""

from __future__ import annotations

import pytest

from conftest import RecordingRoleRepo, seed_roles, seed_user
from rolegate.db.repositories.roles import RoleRepo
from rolegate.domain.models import Role, RoleDraft
from rolegate.errors import (
    DuplicateNameError,
    InvalidArgumentError,
    ResourceInUseError,
    RoleNotFoundError,
    UserNotAuthorizedError,
)
from rolegate.use_cases.auth import LoginUser, RegisterUser
from rolegate.use_cases.roles import CreateRole, DeleteRole, ListRoles, UpdateRole

ROLE = Role(id="r1", name="Ancião")


def _invocations(repo: RecordingRoleRepo):
    return [
        lambda caller: ListRoles(roles=repo).execute(caller),
        lambda caller: CreateRole(roles=repo).execute(caller, RoleDraft(name="Diácono")),
        lambda caller: UpdateRole(roles=repo).execute(caller, ROLE),
        lambda caller: DeleteRole(roles=repo).execute(caller, "r1"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("index", range(4))
async def test_non_admin_is_rejected_without_repository_calls(index, member, role_repo) -> None:
    with pytest.raises(UserNotAuthorizedError):
        await _invocations(role_repo)[index](member)
    assert role_repo.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("index", range(4))
async def test_missing_caller_is_rejected(index, role_repo) -> None:
    with pytest.raises(UserNotAuthorizedError):
        await _invocations(role_repo)[index](None)
    assert role_repo.calls == []


@pytest.mark.asyncio
async def test_guard_messages_name_the_operation(member, role_repo) -> None:
    with pytest.raises(UserNotAuthorizedError, match="delete"):
        await DeleteRole(roles=role_repo).execute(member, "role-123")
    with pytest.raises(UserNotAuthorizedError, match="view"):
        await ListRoles(roles=role_repo).execute(member)


@pytest.mark.asyncio
async def test_admin_results_pass_through_unchanged(admin, role_repo) -> None:
    draft = RoleDraft(name="Diácono", can_send_administrative_push=False)

    assert await ListRoles(roles=role_repo).execute(admin) is role_repo.roles
    assert await CreateRole(roles=role_repo).execute(admin, draft) is role_repo.created
    assert await UpdateRole(roles=role_repo).execute(admin, ROLE) is role_repo.updated
    assert await DeleteRole(roles=role_repo).execute(admin, "r1") is None

    assert role_repo.calls == [
        ("list_all", None),
        ("create", draft),
        ("update", ROLE),
        ("delete", "r1"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("role_id", ["", "   "])
async def test_update_and_delete_require_an_id(role_id, admin, role_repo) -> None:
    with pytest.raises(InvalidArgumentError):
        await UpdateRole(roles=role_repo).execute(admin, Role(id=role_id, name="Ancião"))
    with pytest.raises(InvalidArgumentError):
        await DeleteRole(roles=role_repo).execute(admin, role_id)
    assert role_repo.calls == []


@pytest.mark.asyncio
async def test_create_and_update_require_a_name(admin, role_repo) -> None:
    with pytest.raises(InvalidArgumentError):
        await CreateRole(roles=role_repo).execute(admin, RoleDraft(name=" "))
    with pytest.raises(InvalidArgumentError):
        await UpdateRole(roles=role_repo).execute(admin, Role(id="r1", name=""))
    assert role_repo.calls == []


@pytest.mark.asyncio
async def test_authorization_is_checked_before_validation(member, role_repo) -> None:
    with pytest.raises(UserNotAuthorizedError):
        await DeleteRole(roles=role_repo).execute(member, "")


@pytest.mark.asyncio
async def test_create_duplicate_name_propagates(admin, session_factory) -> None:
    await seed_roles(session_factory, ["Diácono"])
    create = CreateRole(roles=RoleRepo(session_factory))

    with pytest.raises(DuplicateNameError):
        await create.execute(admin, RoleDraft(name="Diácono", can_send_administrative_push=False))


@pytest.mark.asyncio
async def test_delete_assigned_role_propagates(admin, session_factory) -> None:
    ids = await seed_roles(session_factory, ["Diácono"])
    await seed_user(session_factory, user_id="U5", role_ids=ids.values())

    with pytest.raises(ResourceInUseError):
        await DeleteRole(roles=RoleRepo(session_factory)).execute(admin, ids["Diácono"])


@pytest.mark.asyncio
async def test_update_missing_role_propagates(admin, session_factory) -> None:
    with pytest.raises(RoleNotFoundError):
        await UpdateRole(roles=RoleRepo(session_factory)).execute(admin, Role(id="nope", name="X"))


@pytest.mark.asyncio
async def test_create_then_list_round_trip(admin, session_factory) -> None:
    repo = RoleRepo(session_factory)
    await seed_roles(session_factory, ["Diácono"])

    created = await CreateRole(roles=repo).execute(admin, RoleDraft(name="Ancião"))
    roles = await ListRoles(roles=repo).execute(admin)

    assert roles.count(created) == 1
    assert [r.name for r in roles] == ["Ancião", "Diácono"]


class _RecordingAuth:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    async def login(self, email, password):
        self.calls.append(("login", email))
        return "user"

    async def register(self, name, email, password):
        self.calls.append(("register", email))
        return "user"


@pytest.mark.asyncio
@pytest.mark.parametrize(("email", "password"), [("", "secret"), ("a@x.org", ""), ("  ", "x")])
async def test_login_requires_credentials(email, password) -> None:
    auth = _RecordingAuth()

    with pytest.raises(InvalidArgumentError):
        await LoginUser(auth=auth).execute(email, password)
    assert auth.calls == []


@pytest.mark.asyncio
async def test_login_delegates() -> None:
    auth = _RecordingAuth()

    assert await LoginUser(auth=auth).execute("a@x.org", "secret") == "user"
    assert auth.calls == [("login", "a@x.org")]


@pytest.mark.asyncio
async def test_register_requires_name() -> None:
    auth = _RecordingAuth()

    with pytest.raises(InvalidArgumentError, match="Name"):
        await RegisterUser(auth=auth).execute("", "a@x.org", "secret")
    assert auth.calls == []
    assert await RegisterUser(auth=auth).execute("Ana", "a@x.org", "secret") == "user"
