"""
Users REST API — customer accounts and membership.
"""

from __future__ import annotations

from typing import Any, Optional

from moto_admin.models.adapters import acknowledged, detail, page_of
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page
from moto_admin.models.record import RecordId
from moto_admin.models.user import User, UserDetail, membership_payload
from moto_admin.transport.http import HttpClient


class UsersAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
        membership_type: Optional[str] = None,
        email_verified: Optional[bool] = None,
    ) -> ApiResponse[Page[User]]:
        resp = await self._http.get("/admin/users", params={
            "page": page,
            "limit": limit,
            "search": search,
            "membership_type": membership_type,
            "email_verified": email_verified,
        })
        return resp.map(page_of(User, "users"))

    async def get(self, user_id: RecordId) -> ApiResponse[UserDetail]:
        """User profile with their orders, order items and payments."""
        resp = await self._http.get(f"/admin/users/{user_id}")
        return resp.map(detail(UserDetail, "user"))

    async def update_membership(
        self, user_id: RecordId, membership_type: str, membership_points: Optional[int] = None,
    ) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.put(
            f"/admin/users/{user_id}/membership",
            membership_payload(membership_type, membership_points),
        )
        return resp.map(acknowledged)
