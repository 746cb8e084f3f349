"""
Auth entry points — login, logout and token checks.

These work before any token exists, so login bypasses the gateway's
session invalidation: a wrong password is not a lost session.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from moto_admin.logging_utils import get_logger
from moto_admin.models.envelope import UNEXPECTED_RESPONSE, ApiResponse
from moto_admin.models.user import LoginResult
from moto_admin.storage import SessionStore
from moto_admin.transport.http import HttpClient, error_message

LOGIN_PATH = "/auth/login-admin"
LOGIN_FAILED = "Login failed"
# Cheapest authenticated endpoint; doubles as the token check.
VALIDATION_PATH = "/admin/dashboard"

logger = get_logger(__name__)


class Auth:
    def __init__(self, http: HttpClient, store: SessionStore):
        self._http = http
        self._store = store

    async def login(self, email: str, password: str) -> ApiResponse[LoginResult]:
        resp = await self._http.post(
            LOGIN_PATH, {"email": email, "password": password},
            authenticated=False, fallback_error=LOGIN_FAILED,
        )
        if not resp.ok:
            logger.warning("login_failed", email=email, status=resp.status)
            return ApiResponse(error=resp.error, status=resp.status)

        data: Any = resp.data
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            logger.warning("login_missing_token", email=email)
            return ApiResponse(error=error_message(data, LOGIN_FAILED), status=resp.status)

        try:
            result = LoginResult.model_validate(data)
        except ValidationError as e:
            logger.warning("login_unexpected_response", email=email, errors=e.error_count())
            return ApiResponse(error=UNEXPECTED_RESPONSE, status=resp.status)
        self._store.save(result.token, result.user.model_dump() if result.user else None)
        logger.info("login_succeeded", email=email)
        return ApiResponse(data=result, status=resp.status)

    def logout(self) -> None:
        self._store.clear()

    def is_authenticated(self) -> bool:
        """Local check only; a stored token may still be rejected by the server."""
        return bool(self._store.token)

    async def validate_token(self) -> bool:
        if not self._store.token:
            return False
        resp = await self._http.get(VALIDATION_PATH)
        # 401/403 already cleared the store inside the gateway. Network
        # failures count as "not confirmed".
        return resp.ok
