"""
Partners REST API. Writes are always multipart; the logo is optional.
"""

from __future__ import annotations

from typing import Any, Optional

from moto_admin.models.adapters import acknowledged, created, page_of
from moto_admin.models.catalog import Partner
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page
from moto_admin.models.record import RecordId
from moto_admin.transport.http import FileUpload, HttpClient, MultipartBody


def partner_form(
    fields: dict[str, Any], logo: Optional[FileUpload] = None, existing_logo_url: Optional[str] = None,
) -> MultipartBody:
    form = {k: v for k, v in fields.items() if v not in (None, "")}
    # Editing without a new file keeps the current logo.
    if logo is None and existing_logo_url:
        form["logo_url"] = existing_logo_url
    return MultipartBody(fields=form, files=[logo] if logo else [])


class PartnersAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> ApiResponse[Page[Partner]]:
        resp = await self._http.get("/admin/partners")
        return resp.map(page_of(Partner, "partners"))

    async def create(
        self, name: str, logo: Optional[FileUpload] = None, is_active: bool = True, **fields: Any,
    ) -> ApiResponse[Partner]:
        body = partner_form({"name": name, "is_active": is_active, **fields}, logo)
        resp = await self._http.post("/admin/partners", body)
        return resp.map(created(Partner, "partner"))

    async def update(
        self,
        partner_id: RecordId,
        logo: Optional[FileUpload] = None,
        existing_logo_url: Optional[str] = None,
        **fields: Any,
    ) -> ApiResponse[dict[str, Any]]:
        body = partner_form(fields, logo, existing_logo_url)
        resp = await self._http.put(f"/admin/partners/{partner_id}", body)
        return resp.map(acknowledged)

    async def delete(self, partner_id: RecordId) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.delete(f"/admin/partners/{partner_id}")
        return resp.map(acknowledged)
