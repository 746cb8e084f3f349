"""
moto-admin — back-office console for a motorcycle parts and merchandise store.

REST client for the store's admin API, a session guard for protected pages
and a terminal table for paginated listings.
"""

from moto_admin.client import MotoAdmin, AsyncMotoAdmin
from moto_admin.auth import Auth
from moto_admin.guard import AuthState, SessionGuard
from moto_admin.listing import Listing
from moto_admin.table import Column, DataTable
from moto_admin.errors import MotoAdminError, AuthError, ResponseShapeError, ConfigError
from moto_admin.signals import AUTH_INVALID_TOKEN, STORAGE_CHANGED

__version__ = "0.1.0"
__all__ = [
    "MotoAdmin",
    "AsyncMotoAdmin",
    "Auth",
    "AuthState",
    "SessionGuard",
    "Listing",
    "Column",
    "DataTable",
    "MotoAdminError",
    "AuthError",
    "ResponseShapeError",
    "ConfigError",
    "AUTH_INVALID_TOKEN",
    "STORAGE_CHANGED",
]
