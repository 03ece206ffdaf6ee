"""
rolegate.auth.gateway

HTTP client for the identity gateway (GoTrue / Supabase Auth REST API).

Responsibilities:
- Verify credentials and keep the issued session (access + refresh token).
- Create identities for registration.
- Report the current session's identity id, refreshing an expired token once.
- End the session.
- Surface every failure as `GatewayError` with status and error code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from rolegate.auth.jwt import JwtConfig, JwtExpiredError, JwtValidationError, decode_access_token
from rolegate.domain.ports import GatewayError
from rolegate.observability.logging import get_logger
from rolegate.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GatewaySession:
    identity_id: str
    access_token: str
    refresh_token: str | None = None


class GoTrueGateway:
    """
    Gateway client bound to one end-user session.

    Create one instance per signed-in client; the session it holds is the
    gateway's state, not shared core state.
    """

    def __init__(self, *, settings: Settings, http: httpx.AsyncClient) -> None:
        self._http = http
        self._api_key = settings.identity_api_key
        self._jwt = JwtConfig(
            alg=settings.identity_jwt_alg,
            audience=settings.identity_jwt_audience,
            secret=settings.identity_jwt_secret,
        )
        self._session: GatewaySession | None = None

    @property
    def session(self) -> GatewaySession | None:
        return self._session

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self._api_key}
        headers["Authorization"] = f"Bearer {access_token or self._api_key}"
        return headers

    async def _post(
        self,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
        access_token: str | None = None,
    ) -> httpx.Response:
        try:
            r = await self._http.post(
                path, json=json, params=params, headers=self._headers(access_token)
            )
        except httpx.HTTPError as e:
            raise GatewayError(message=f"Identity gateway unreachable: {e}") from e
        if r.is_error:
            raise _error_from_response(r)
        return r

    async def verify_credentials(self, email: str, password: str) -> str:
        r = await self._post(
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        self._session = _session_from_body(_json_body(r))
        log.info("gateway_signed_in", identity_id=self._session.identity_id)
        return self._session.identity_id

    async def create_identity(self, email: str, password: str) -> str:
        r = await self._post("/auth/v1/signup", json={"email": email, "password": password})
        body = _json_body(r)
        if body.get("access_token"):
            # Autoconfirm is on: signup also signs the identity in.
            self._session = _session_from_body(body)
            identity_id = self._session.identity_id
        else:
            identity_id = _identity_id(body.get("user") or body)
        log.info("gateway_identity_created", identity_id=identity_id)
        return identity_id

    async def current_session(self) -> str | None:
        if self._session is None:
            return None
        try:
            claims = decode_access_token(cfg=self._jwt, token=self._session.access_token)
        except JwtExpiredError:
            return await self._refresh()
        except JwtValidationError as e:
            log.warning("gateway_session_invalid", error=str(e))
            self._session = None
            return None
        return str(claims["sub"])

    async def _refresh(self) -> str | None:
        session = self._session
        if session is None or not session.refresh_token:
            self._session = None
            return None
        try:
            r = await self._post(
                "/auth/v1/token",
                params={"grant_type": "refresh_token"},
                json={"refresh_token": session.refresh_token},
            )
        except GatewayError as e:
            if e.status_code is not None and 400 <= e.status_code < 500:
                log.info("gateway_refresh_rejected", status_code=e.status_code)
                self._session = None
                return None
            raise
        self._session = _session_from_body(_json_body(r))
        log.info("gateway_session_refreshed", identity_id=self._session.identity_id)
        return self._session.identity_id

    async def end_session(self) -> None:
        session = self._session
        if session is None:
            return
        # The local session is dropped even when the gateway call fails.
        self._session = None
        await self._post("/auth/v1/logout", access_token=session.access_token)
        log.info("gateway_signed_out", identity_id=session.identity_id)


def _identity_id(user: Any) -> str:
    if not isinstance(user, dict) or not isinstance(user.get("id"), str) or not user["id"]:
        raise GatewayError(message="Identity gateway response has no user id")
    return user["id"]


def _json_body(r: httpx.Response) -> dict[str, Any]:
    try:
        body = r.json()
    except ValueError as e:
        raise GatewayError(
            message="Identity gateway returned a non-JSON body", status_code=r.status_code
        ) from e
    if not isinstance(body, dict):
        raise GatewayError(
            message="Identity gateway returned an unexpected body", status_code=r.status_code
        )
    return body


def _session_from_body(body: dict[str, Any]) -> GatewaySession:
    access_token = body.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        raise GatewayError(message="Identity gateway response has no access token")

    return GatewaySession(
        identity_id=_identity_id(body.get("user")),
        access_token=access_token,
        refresh_token=body.get("refresh_token"),
    )


def _error_from_response(r: httpx.Response) -> GatewayError:
    try:
        body = r.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    # GoTrue has used both {error, error_description} and {error_code, msg} shapes.
    error_code = body.get("error_code") or body.get("error")
    message = (
        body.get("msg")
        or body.get("error_description")
        or body.get("message")
        or r.reason_phrase
        or f"HTTP {r.status_code}"
    )
    return GatewayError(
        message=str(message),
        status_code=r.status_code,
        error_code=str(error_code) if error_code is not None else None,
    )


# --- Module Notes -----------------------------------------------------------
# Session persistence across process restarts is the embedding client's job;
# this class only keeps the session in memory.
