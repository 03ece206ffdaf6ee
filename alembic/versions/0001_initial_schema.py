"""initial schema: localizacao, usuario, cargo, usuario_cargo

Revision ID: 0001
Revises:
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Constraint names follow rolegate.db.base.NAMING_CONVENTION.
    op.create_table(
        "localizacao",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("nome", sa.String(256), nullable=False),
        sa.Column(
            "tipo",
            sa.Enum("Regional", "Setor", "Congregacao", name="tipo_localizacao"),
            nullable=False,
        ),
        sa.Column("parent_id", sa.String(36), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_localizacao"),
        sa.UniqueConstraint("nome", name="uq_localizacao_nome"),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["localizacao.id"], name="fk_localizacao_parent_id_localizacao"
        ),
    )
    op.create_index("ix_localizacao_parent_id", "localizacao", ["parent_id"])

    op.create_table(
        "usuario",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("nome", sa.String(256), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("localizacao_id", sa.String(36), nullable=True),
        sa.Column("device_token", sa.String(512), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_usuario"),
        sa.ForeignKeyConstraint(
            ["localizacao_id"],
            ["localizacao.id"],
            name="fk_usuario_localizacao_id_localizacao",
        ),
    )
    op.create_index("ix_usuario_email", "usuario", ["email"])

    op.create_table(
        "cargo",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("nome", sa.String(128), nullable=False),
        sa.Column("pode_enviar_push", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name="pk_cargo"),
        sa.UniqueConstraint("nome", name="uq_cargo_nome"),
    )

    op.create_table(
        "usuario_cargo",
        sa.Column("usuario_id", sa.String(36), nullable=False),
        sa.Column("cargo_id", sa.String(36), nullable=False),
        sa.PrimaryKeyConstraint("usuario_id", "cargo_id", name="pk_usuario_cargo"),
        sa.ForeignKeyConstraint(
            ["usuario_id"],
            ["usuario.id"],
            name="fk_usuario_cargo_usuario_id_usuario",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["cargo_id"],
            ["cargo.id"],
            name="fk_usuario_cargo_cargo_id_cargo",
            ondelete="RESTRICT",
        ),
    )
    op.create_index("ix_usuario_cargo_cargo_id", "usuario_cargo", ["cargo_id"])


def downgrade() -> None:
    op.drop_index("ix_usuario_cargo_cargo_id", table_name="usuario_cargo")
    op.drop_table("usuario_cargo")
    op.drop_table("cargo")
    op.drop_index("ix_usuario_email", table_name="usuario")
    op.drop_table("usuario")
    op.drop_index("ix_localizacao_parent_id", table_name="localizacao")
    op.drop_table("localizacao")
    sa.Enum(name="tipo_localizacao").drop(op.get_bind(), checkfirst=True)
