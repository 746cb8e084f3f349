"""
Feedback and ambassador-application REST APIs.
"""

from __future__ import annotations

from typing import Any, Optional

from moto_admin.models.adapters import acknowledged, page_of
from moto_admin.models.engagement import Ambassador, Feedback
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page
from moto_admin.models.record import RecordId
from moto_admin.transport.http import HttpClient


class FeedbackAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, page: int = 1, limit: int = 20, feedback_type: Optional[str] = None,
    ) -> ApiResponse[Page[Feedback]]:
        resp = await self._http.get("/admin/feedback", params={
            "page": page, "limit": limit, "feedback_type": feedback_type,
        })
        return resp.map(page_of(Feedback, "feedback"))

    async def update(self, feedback_id: RecordId, **fields: Any) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.put(f"/admin/feedback/{feedback_id}", fields)
        return resp.map(acknowledged)


class AmbassadorsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, page: int = 1, limit: int = 20, status: Optional[str] = None,
    ) -> ApiResponse[Page[Ambassador]]:
        resp = await self._http.get("/admin/ambassadors", params={
            "page": page, "limit": limit, "status": status,
        })
        return resp.map(page_of(Ambassador, "ambassadors"))

    async def update_status(
        self, ambassador_id: RecordId, status: str, admin_notes: Optional[str] = None,
    ) -> ApiResponse[dict[str, Any]]:
        body: dict[str, Any] = {"status": status}
        if admin_notes:
            body["admin_notes"] = admin_notes
        resp = await self._http.put(f"/admin/ambassadors/{ambassador_id}/status", body)
        return resp.map(acknowledged)
