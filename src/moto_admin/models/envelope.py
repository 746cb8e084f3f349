"""
Response envelope returned by every gateway call.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, model_validator

from moto_admin.errors import AuthError, MotoAdminError, ResponseShapeError

T = TypeVar("T")
U = TypeVar("U")

UNEXPECTED_RESPONSE = "Unexpected response from server"


class ApiResponse(BaseModel, Generic[T]):
    """Exactly one of `data` / `error` is set."""

    data: Optional[T] = None
    error: Optional[str] = None
    status: Optional[int] = None

    model_config = {"arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def _exactly_one(self) -> "ApiResponse[T]":
        if (self.data is None) == (self.error is None):
            raise ValueError("ApiResponse needs exactly one of data or error")
        return self

    @classmethod
    def success(cls, data: Any, status: Optional[int] = None) -> "ApiResponse[Any]":
        return ApiResponse(data=data, status=status)

    @classmethod
    def failure(cls, error: str, status: Optional[int] = None) -> "ApiResponse[Any]":
        return ApiResponse(error=error, status=status)

    @property
    def ok(self) -> bool:
        return self.error is None

    def map(self, adapter: Callable[[T], U]) -> "ApiResponse[U]":
        """Adapt a success payload; shape errors become error envelopes."""
        if self.error is not None:
            return ApiResponse(error=self.error, status=self.status)
        try:
            return ApiResponse(data=adapter(self.data), status=self.status)  # type: ignore[arg-type]
        except ResponseShapeError as e:
            return ApiResponse(error=str(e) or UNEXPECTED_RESPONSE, status=self.status)

    def unwrap(self) -> T:
        """Return the payload or raise. 401/403 raise AuthError."""
        if self.error is None:
            return self.data  # type: ignore[return-value]
        details = {"status": self.status} if self.status is not None else None
        if self.status in (401, 403):
            raise AuthError(self.error, code="session_invalid")
        raise MotoAdminError("request_failed", self.error, details)
