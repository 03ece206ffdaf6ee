"""
rolegate.domain.models

Domain value types.

Responsibilities:
- Define the authenticated `User` produced by the resolver.
- Define `Role` (cargo) and the payload used to create one.
- Define the `Location` hierarchy node referenced by users.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class LocationKind(enum.StrEnum):
    # Values are stored in the database; treat as a stable contract.
    regional = "Regional"
    sector = "Setor"
    congregation = "Congregacao"


@dataclass(frozen=True, slots=True)
class Location:
    id: str
    name: str
    kind: LocationKind
    parent_id: str | None = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True, slots=True)
class User:
    """
    Application user built fresh on every login/session restore.

    `is_admin` and `roles` are derived from role assignments at load time and
    are never stored on the user record.
    """

    id: str
    email: str
    name: str
    primary_location_id: str | None
    is_admin: bool = False
    roles: frozenset[str] = field(default_factory=frozenset)
    location: Location | None = None

    @property
    def location_name(self) -> str | None:
        return self.location.name if self.location else None


@dataclass(frozen=True, slots=True)
class RoleDraft:
    # A role before storage has assigned its id.
    name: str
    can_send_administrative_push: bool = False


@dataclass(frozen=True, slots=True)
class Role:
    id: str
    name: str
    can_send_administrative_push: bool = False
    # UI-only selection marker; never persisted and ignored by equality.
    selected: bool = field(default=False, compare=False)


# --- Module Notes -----------------------------------------------------------
# Frozen dataclasses keep the caller's User immutable for the whole session;
# a new login produces a new value instead of mutating the old one.
