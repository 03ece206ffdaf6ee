"""
rolegate.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (gateway API key, token secret).
- Offer a cached settings instance for the composition root.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROLEGATE_", case_sensitive=False)

    # dev/test create tables on startup; prod relies on Alembic.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "rolegate"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./rolegate.db"

    # Identity gateway (GoTrue-compatible REST API)
    identity_url: str = "http://localhost:54321"
    identity_api_key: str = Field(default="", repr=False)
    identity_jwt_secret: str | None = Field(default=None, repr=False)
    identity_jwt_alg: str = "HS256"
    identity_jwt_audience: str = "authenticated"
    identity_timeout_seconds: float = 10.0

    # Authorization
    admin_role_name: str = "administrador do sistema"
    default_location_id: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `admin_role_name` is compared after normalization, so its casing and
# surrounding whitespace in the environment do not matter.
