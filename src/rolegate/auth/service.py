"""
rolegate.auth.service

Authentication adapter over the identity gateway.

Responsibilities:
- login/register/get_logged_user/logout against the gateway.
- Translate gateway failures into domain errors.
- Delegate profile and role loading to the authorization resolver.
"""

from __future__ import annotations

import re

from rolegate.auth.resolver import AuthorizationResolver
from rolegate.domain.models import User
from rolegate.domain.ports import GatewayError, IdentityGateway, UserProfileStore
from rolegate.errors import (
    AuthenticationFailedError,
    InfrastructureError,
    InvalidCredentialsError,
    RegistrationIncompleteError,
    UserNotFoundError,
)
from rolegate.observability.logging import get_logger

log = get_logger(__name__)

INVALID_CREDENTIAL_CODES = frozenset({"invalid_credentials", "invalid_grant"})
_INVALID_CREDENTIALS_MESSAGE = re.compile(
    r"invalid (login )?credentials|invalid (email or )?password", re.IGNORECASE
)


def is_invalid_credentials(error: GatewayError) -> bool:
    if error.status_code == 401:
        return True
    if error.error_code is not None and error.error_code.lower() in INVALID_CREDENTIAL_CODES:
        return True
    return bool(_INVALID_CREDENTIALS_MESSAGE.search(error.message))


class GatewayAuthService:
    def __init__(
        self,
        *,
        gateway: IdentityGateway,
        resolver: AuthorizationResolver,
        profiles: UserProfileStore,
        default_location_id: str | None = None,
    ) -> None:
        self._gateway = gateway
        self._resolver = resolver
        self._profiles = profiles
        self._default_location_id = default_location_id

    async def login(self, email: str, password: str) -> User:
        try:
            identity_id = await self._gateway.verify_credentials(email, password)
        except GatewayError as e:
            if is_invalid_credentials(e):
                log.info("login_rejected", status_code=e.status_code, error_code=e.error_code)
                raise InvalidCredentialsError() from e
            log.error("login_failed", status_code=e.status_code, error=e.message)
            raise AuthenticationFailedError(f"Login failed: {e.message}") from e

        user = await self._resolver.resolve(identity_id)
        if user is None:
            # The gateway accepted the credentials but issued no identity.
            raise UserNotFoundError()
        return user

    async def register(self, name: str, email: str, password: str) -> User:
        try:
            identity_id = await self._gateway.create_identity(email, password)
        except GatewayError as e:
            log.error("register_failed", status_code=e.status_code, error=e.message)
            raise AuthenticationFailedError(f"Registration failed: {e.message}") from e

        try:
            await self._profiles.insert(
                user_id=identity_id,
                name=name,
                email=email,
                location_id=self._default_location_id,
            )
        except InfrastructureError as e:
            # No compensation here: the caller decides whether to remove the identity.
            log.error("register_incomplete", identity_id=identity_id, error=e.message)
            raise RegistrationIncompleteError(identity_id) from e

        return User(
            id=identity_id,
            email=email,
            name=name,
            primary_location_id=self._default_location_id,
            is_admin=False,
            roles=frozenset(),
        )

    async def get_logged_user(self) -> User | None:
        try:
            identity_id = await self._gateway.current_session()
        except GatewayError as e:
            log.error("session_lookup_failed", status_code=e.status_code, error=e.message)
            raise AuthenticationFailedError(f"Session lookup failed: {e.message}") from e
        return await self._resolver.resolve(identity_id)

    async def logout(self) -> None:
        try:
            await self._gateway.end_session()
        except GatewayError as e:
            log.error("logout_failed", status_code=e.status_code, error=e.message)
            raise InfrastructureError(f"Logout failed: {e.message}") from e


# --- Module Notes -----------------------------------------------------------
# A verified identity without a profile row surfaces as UserNotFoundError from
# the resolver; login does not turn it into "no user".
