"""
rolegate.domain.authorization

Authorization rules.

Responsibilities:
- Normalize role names for comparison (NFC, trim, case-fold).
- Derive the admin flag from a set of role names.
- Guard operations that require an administrator.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from rolegate.domain.models import User
from rolegate.errors import UserNotAuthorizedError


def normalize_role_name(name: str) -> str:
    # Case folding can decompose some characters, so recompose afterwards.
    folded = unicodedata.normalize("NFC", name).strip().casefold()
    return unicodedata.normalize("NFC", folded)


def normalized_role_set(names: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_role_name(n) for n in names)


def has_admin_role(names: Iterable[str], *, admin_role_name: str) -> bool:
    return normalize_role_name(admin_role_name) in normalized_role_set(names)


def require_admin(caller: User | None, message: str | None = None) -> User:
    """
    Reject callers that are not administrators.

    Performs no I/O; use cases call it before touching any repository.
    """

    if caller is None or not caller.is_admin:
        raise UserNotAuthorizedError(message)
    return caller


# --- Module Notes -----------------------------------------------------------
# Resolving a user never raises for a non-admin; only `require_admin` turns
# "not admin" into a rejection.
