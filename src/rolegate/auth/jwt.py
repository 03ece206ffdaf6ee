"""
rolegate.auth.jwt

Access-token validation helpers.

Responsibilities:
- Decode gateway-issued access tokens with strict claim requirements (sub/exp).
- Verify signature and audience when the gateway secret is configured.
- Report expiry separately from other validation failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import jwt
from jwt import ExpiredSignatureError, InvalidTokenError


@dataclass(frozen=True, slots=True)
class JwtConfig:
    alg: str
    audience: str
    # None disables signature verification (the token is our own session token).
    secret: str | None = None


class JwtValidationError(Exception):
    pass


class JwtExpiredError(JwtValidationError):
    pass


def decode_access_token(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    try:
        if cfg.secret is None:
            return jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": True, "require": ["exp", "sub"]},
            )
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            audience=cfg.audience,
            options={"require": ["exp", "sub"]},
        )
    except ExpiredSignatureError as e:
        raise JwtExpiredError(str(e)) from e
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Token issuing belongs to the gateway; this package only reads tokens.
