"""
Orders REST API.
"""

from __future__ import annotations

from typing import Any, Optional

from moto_admin.models.adapters import acknowledged, detail, page_of
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.order import Order, OrderDetail
from moto_admin.models.pagination import Page
from moto_admin.models.record import RecordId
from moto_admin.transport.http import HttpClient


class OrdersAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        page: int = 1,
        limit: int = 20,
        status: Optional[str] = None,
        payment_status: Optional[str] = None,
        user_id: Optional[RecordId] = None,
    ) -> ApiResponse[Page[Order]]:
        resp = await self._http.get("/admin/orders", params={
            "page": page,
            "limit": limit,
            "status": status,
            "payment_status": payment_status,
            "user_id": user_id,
        })
        return resp.map(page_of(Order, "orders"))

    async def get(self, order_id: RecordId) -> ApiResponse[OrderDetail]:
        """Order with line items, payments and shipping address."""
        resp = await self._http.get(f"/admin/orders/{order_id}")
        return resp.map(detail(OrderDetail, "order"))

    async def update_status(
        self, order_id: RecordId, status: str, tracking_number: Optional[str] = None,
    ) -> ApiResponse[dict[str, Any]]:
        body: dict[str, Any] = {"status": status}
        if tracking_number:
            body["tracking_number"] = tracking_number
        resp = await self._http.put(f"/admin/orders/{order_id}/status", body)
        return resp.map(acknowledged)
