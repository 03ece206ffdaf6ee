"""
rolegate.auth.resolver

Authorization resolver.

Responsibilities:
- Turn an identity id into a fully populated `User`.
- Derive `roles` and `is_admin` from the user's role assignments.
- Fail with `UserNotFoundError` when the profile cannot be loaded.
"""

from __future__ import annotations

from rolegate.db.mappers import profile_from_rows
from rolegate.domain.authorization import has_admin_role
from rolegate.domain.models import User
from rolegate.domain.ports import UserProfileStore
from rolegate.errors import InfrastructureError, UserNotFoundError
from rolegate.observability.logging import get_logger

log = get_logger(__name__)


class AuthorizationResolver:
    def __init__(self, *, profiles: UserProfileStore, admin_role_name: str) -> None:
        self._profiles = profiles
        self._admin_role_name = admin_role_name

    async def resolve(self, identity_id: str | None) -> User | None:
        """
        Load the user for `identity_id`.

        An absent id means "nobody is signed in" and yields None. A regular
        (non-admin) user is a normal result; rejecting non-admins is the job
        of `rolegate.domain.authorization.require_admin`.
        """

        if not identity_id:
            return None

        try:
            rows = await self._profiles.fetch_with_roles(identity_id)
        except InfrastructureError as e:
            raise UserNotFoundError() from e
        if not rows:
            log.warning("profile_missing", identity_id=identity_id)
            raise UserNotFoundError()

        profile = profile_from_rows(rows)
        is_admin = has_admin_role(profile.role_names, admin_role_name=self._admin_role_name)
        log.info("user_resolved", identity_id=identity_id, is_admin=is_admin)
        return User(
            id=profile.id,
            email=profile.email,
            name=profile.name,
            primary_location_id=profile.location.id if profile.location else None,
            is_admin=is_admin,
            roles=frozenset(profile.role_names),
            location=profile.location,
        )
