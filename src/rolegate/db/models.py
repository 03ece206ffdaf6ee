"""
rolegate.db.models

Persistence schema.

Responsibilities:
- Map the deployed tables (`localizacao`, `usuario`, `cargo`, `usuario_cargo`).
- Declare the constraints the adapters rely on:
  - unique `cargo.nome`
  - `usuario_cargo.cargo_id` restricts deletion of referenced roles
"""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Enum, ForeignKey, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolegate.db.base import Base
from rolegate.domain.models import LocationKind


def _new_id() -> str:
    return str(uuid.uuid4())


class LocationRecord(Base):
    __tablename__ = "localizacao"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column("nome", String(256), nullable=False, unique=True)
    kind: Mapped[LocationKind] = mapped_column(
        "tipo",
        Enum(LocationKind, name="tipo_localizacao", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    parent_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("localizacao.id"), nullable=True, index=True
    )


class UserRecord(Base):
    __tablename__ = "usuario"

    # Same id as the identity issued by the gateway.
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column("nome", String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    location_id: Mapped[str | None] = mapped_column(
        "localizacao_id", String(36), ForeignKey("localizacao.id"), nullable=True
    )
    device_token: Mapped[str | None] = mapped_column(String(512), nullable=True)

    assignments: Mapped[list[RoleAssignmentRecord]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class RoleRecord(Base):
    __tablename__ = "cargo"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column("nome", String(128), nullable=False, unique=True)
    can_send_push: Mapped[bool] = mapped_column(
        "pode_enviar_push", Boolean, nullable=False, default=False, server_default=false()
    )


class RoleAssignmentRecord(Base):
    __tablename__ = "usuario_cargo"

    user_id: Mapped[str] = mapped_column(
        "usuario_id", String(36), ForeignKey("usuario.id", ondelete="CASCADE"), primary_key=True
    )
    role_id: Mapped[str] = mapped_column(
        "cargo_id",
        String(36),
        ForeignKey("cargo.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    )

    user: Mapped[UserRecord] = relationship(back_populates="assignments")


# --- Module Notes -----------------------------------------------------------
# Role assignments are read-only for the core; they are only written by seed
# scripts, migrations and tests.
