"""
rolegate.db.mappers

Explicit mapping from storage rows to domain values.

Responsibilities:
- Validate every field read from storage instead of trusting row shapes.
- Raise `RowShapeError` naming the offending field on mismatch.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from rolegate.db.models import RoleRecord
from rolegate.domain.models import Location, LocationKind, Role
from rolegate.errors import RowShapeError


@dataclass(frozen=True, slots=True)
class ProfileRecord:
    # A user row plus the names of its assigned roles, before authorization.
    id: str
    email: str
    name: str
    location: Location | None
    role_names: tuple[str, ...]


def _require_str(source: str, field: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise RowShapeError(f"{source}.{field}: expected non-empty string, got {value!r}")
    return value


def _optional_str(source: str, field: str, value: Any) -> str | None:
    if value is None:
        return None
    return _require_str(source, field, value)


def _require_bool(source: str, field: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise RowShapeError(f"{source}.{field}: expected bool, got {value!r}")
    return value


def role_from_record(record: RoleRecord) -> Role:
    return Role(
        id=_require_str("cargo", "id", record.id),
        name=_require_str("cargo", "nome", record.name),
        can_send_administrative_push=_require_bool(
            "cargo", "pode_enviar_push", record.can_send_push
        ),
    )


def location_from_row(row: Mapping[str, Any]) -> Location | None:
    """
    Build the user's location from the `location_*` columns of a profile row.

    A user without `localizacao_id` has no location.
    """

    location_id = _optional_str("usuario", "localizacao_id", row["location_id"])
    if location_id is None:
        return None
    raw_kind = row.get("location_kind")
    try:
        kind = LocationKind(raw_kind)
    except ValueError as e:
        raise RowShapeError(f"localizacao.tipo: unknown kind {raw_kind!r}") from e
    return Location(
        id=location_id,
        name=_require_str("localizacao", "nome", row.get("location_name")),
        kind=kind,
        parent_id=_optional_str("localizacao", "parent_id", row.get("location_parent_id")),
    )


def profile_from_rows(rows: Sequence[Mapping[str, Any]]) -> ProfileRecord:
    """
    Fold the rows of a user-with-roles outer join into one record.

    Every row repeats the user columns; `role_name` is None for a user with no
    assignments. Row order does not affect the result.
    """

    if not rows:
        raise RowShapeError("usuario: expected at least one row")

    first = rows[0]
    try:
        user_id = _require_str("usuario", "id", first["id"])
        email = _require_str("usuario", "email", first["email"])
        name = _require_str("usuario", "nome", first["name"])
        location = location_from_row(first)
    except KeyError as e:
        raise RowShapeError(f"usuario: missing column {e.args[0]!r}") from e

    role_names: list[str] = []
    for row in rows:
        if row.get("id") != user_id:
            raise RowShapeError(f"usuario: join returned rows for {row.get('id')!r}")
        role_name = _optional_str("cargo", "nome", row.get("role_name"))
        if role_name is not None and role_name not in role_names:
            role_names.append(role_name)

    return ProfileRecord(
        id=user_id,
        email=email,
        name=name,
        location=location,
        role_names=tuple(sorted(role_names)),
    )
