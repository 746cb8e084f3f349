"""
Request gateway — every call to the admin REST API goes through HttpClient.request.

The gateway attaches the bearer token, picks JSON or multipart encoding,
and turns every outcome into an ApiResponse. It never raises at its caller.
A 401/403 clears the stored session and broadcasts AUTH_INVALID_TOKEN.
"""

from __future__ import annotations

import json
import mimetypes
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, Field

from moto_admin.config import DEFAULT_BASE_URL
from moto_admin.logging_utils import get_logger
from moto_admin.models.envelope import UNEXPECTED_RESPONSE, ApiResponse
from moto_admin.signals import AUTH_INVALID_TOKEN, SignalBus
from moto_admin.storage import SessionStore

USER_AGENT = "moto-admin/0.1.0"
DEFAULT_ERROR = "Request failed"
NETWORK_ERROR = "Network error occurred"
ENCODING_ERROR = "Request body could not be encoded"
INVALIDATING_STATUSES = frozenset({401, 403})

logger = get_logger(__name__)

_UNPARSEABLE = object()


class FileUpload(BaseModel):
    field: str
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, field: str, path: Union[str, Path], content_type: Optional[str] = None) -> "FileUpload":
        p = Path(path)
        guessed, _ = mimetypes.guess_type(p.name)
        return cls(
            field=field,
            filename=p.name,
            content=p.read_bytes(),
            content_type=content_type or guessed or "application/octet-stream",
        )


class MultipartBody(BaseModel):
    """Form fields plus file attachments, sent as multipart/form-data."""

    fields: dict[str, Any] = Field(default_factory=dict)
    files: list[FileUpload] = Field(default_factory=list)

    def parts(self) -> list[tuple[str, tuple[Optional[str], Any, Optional[str]]]]:
        # Plain fields are sent as filename-less parts so the body stays
        # multipart even when no file is attached.
        out: list[tuple[str, tuple[Optional[str], Any, Optional[str]]]] = []
        for name, value in self.fields.items():
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            for v in values:
                out.append((name, (None, _form_value(v), None)))
        for f in self.files:
            out.append((f.field, (f.filename, f.content, f.content_type)))
        return out


Body = Union[None, MultipartBody, dict[str, Any], list[Any]]


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def build_headers(token: Optional[str], body: Body, extra: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Per-request headers. Caller-supplied headers win."""
    headers: dict[str, str] = {}
    if not isinstance(body, MultipartBody):
        headers["Content-Type"] = "application/json"
    if token:
        headers["Authorization"] = f"Bearer {token}"
    if extra:
        headers.update(extra)
    return headers


def clean_params(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, str]]:
    """Drop unset query values; render the rest the way the API expects."""
    if not params:
        return None
    return {k: _form_value(v) for k, v in params.items() if v is not None and v != ""}


def error_message(payload: Any, fallback: str = DEFAULT_ERROR) -> str:
    if isinstance(payload, dict):
        msg = payload.get("error") or payload.get("message")
        if msg:
            return str(msg)
    return fallback


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return {}
    try:
        payload = resp.json()
    except ValueError:
        return _UNPARSEABLE
    # A JSON null body carries no more than an empty one.
    return {} if payload is None else payload


class HttpClient:
    def __init__(
        self,
        store: SessionStore,
        signals: SignalBus,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._store = store
        self._signals = signals
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Body = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
        authenticated: bool = True,
        fallback_error: str = DEFAULT_ERROR,
    ) -> ApiResponse[Any]:
        token = self._store.token if authenticated else None
        kwargs: dict[str, Any] = {"headers": build_headers(token, body, headers)}
        try:
            if isinstance(body, MultipartBody):
                kwargs["files"] = body.parts()
            elif body is not None:
                kwargs["content"] = json.dumps(body).encode()
        except (TypeError, ValueError) as e:
            logger.warning("api_body_not_serializable", method=method, path=path, error=str(e))
            return ApiResponse.failure(ENCODING_ERROR)
        query = clean_params(params)
        if query:
            kwargs["params"] = query

        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning("api_network_error", method=method, path=path, error=repr(e))
            return ApiResponse.failure(NETWORK_ERROR)

        payload = _parse_body(resp)
        logger.debug("api_response", method=method, path=path, status=resp.status_code)

        if not resp.is_success:
            if authenticated and resp.status_code in INVALIDATING_STATUSES:
                self._invalidate(resp.status_code)
            return ApiResponse.failure(error_message(payload, fallback_error), status=resp.status_code)

        if payload is _UNPARSEABLE:
            return ApiResponse.failure(UNEXPECTED_RESPONSE, status=resp.status_code)
        return ApiResponse.success(payload, status=resp.status_code)

    def _invalidate(self, status: int) -> None:
        self._store.clear()
        logger.warning("session_invalidated", status=status)
        self._signals.emit(AUTH_INVALID_TOKEN, status=status)

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None, authenticated: bool = True) -> ApiResponse[Any]:
        return await self.request(path, "GET", params=params, authenticated=authenticated)

    async def post(
        self, path: str, body: Body = None, authenticated: bool = True, fallback_error: str = DEFAULT_ERROR,
    ) -> ApiResponse[Any]:
        return await self.request(
            path, "POST", body=body, authenticated=authenticated, fallback_error=fallback_error,
        )

    async def put(self, path: str, body: Body = None) -> ApiResponse[Any]:
        return await self.request(path, "PUT", body=body)

    async def delete(self, path: str) -> ApiResponse[Any]:
        return await self.request(path, "DELETE")

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
