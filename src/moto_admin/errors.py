"""
moto-admin error types.

The request gateway never raises these at its callers; they are used where
raising is the right call (adapters, configuration, the CLI).
"""

from typing import Any, Optional


class MotoAdminError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class AuthError(MotoAdminError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class ResponseShapeError(MotoAdminError):
    """A success payload did not have the shape its adapter expects."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("response_shape", message, details)


class ConfigError(MotoAdminError):
    def __init__(self, message: str):
        super().__init__("config_error", message)
