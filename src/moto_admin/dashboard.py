"""
Dashboard REST API.
"""

from moto_admin.models.adapters import entity
from moto_admin.models.dashboard import Dashboard
from moto_admin.models.envelope import ApiResponse
from moto_admin.transport.http import HttpClient


class DashboardAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def statistics(self) -> ApiResponse[Dashboard]:
        """Aggregate counts plus the most recent orders."""
        resp = await self._http.get("/admin/dashboard")
        return resp.map(entity(Dashboard, "dashboard"))
