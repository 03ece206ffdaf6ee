"""
rolegate.use_cases.auth

Login and registration use cases.
"""

from __future__ import annotations

from rolegate.domain.models import User
from rolegate.domain.ports import AuthService
from rolegate.errors import InvalidArgumentError
from rolegate.observability.context import operation_scope


def _require(value: str, message: str) -> None:
    if not value or not value.strip():
        raise InvalidArgumentError(message)


class LoginUser:
    def __init__(self, *, auth: AuthService) -> None:
        self._auth = auth

    async def execute(self, email: str, password: str) -> User:
        _require(email, "Email is required.")
        _require(password, "Password is required.")
        with operation_scope("login_user"):
            return await self._auth.login(email, password)


class RegisterUser:
    def __init__(self, *, auth: AuthService) -> None:
        self._auth = auth

    async def execute(self, name: str, email: str, password: str) -> User:
        _require(name, "Name is required.")
        _require(email, "Email is required.")
        _require(password, "Password is required.")
        with operation_scope("register_user"):
            return await self._auth.register(name, email, password)
