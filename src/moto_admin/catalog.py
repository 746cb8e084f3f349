"""
Catalogue taxonomy REST APIs — brands, manufacturers, categories and vehicle models.

Reads go to the public /products endpoints, writes to /admin. Brands and
manufacturers accept an optional logo file; with one attached the body is
sent as multipart, otherwise as JSON.
"""

from __future__ import annotations

from typing import Any, Optional, Type
from urllib.parse import quote

from pydantic import BaseModel

from moto_admin.models.adapters import acknowledged, created, page_of
from moto_admin.models.catalog import Brand, Category, Manufacturer, VehicleModel
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page
from moto_admin.models.record import RecordId
from moto_admin.transport.http import Body, FileUpload, HttpClient, MultipartBody


def form_or_json(fields: dict[str, Any], upload: Optional[FileUpload]) -> Body:
    fields = {k: v for k, v in fields.items() if v is not None}
    if upload is None:
        return fields
    return MultipartBody(fields=fields, files=[upload])


class _TaxonomyAPI:
    model: Type[BaseModel]
    public_path: str
    admin_path: str
    plural: str
    singular: str

    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> ApiResponse[Page[Any]]:
        resp = await self._http.get(self.public_path)
        return resp.map(page_of(self.model, self.plural))

    async def create(self, name: str, upload: Optional[FileUpload] = None, **fields: Any) -> ApiResponse[Any]:
        resp = await self._http.post(self.admin_path, form_or_json({"name": name, **fields}, upload))
        return resp.map(created(self.model, self.singular))

    async def update(self, item_id: RecordId, upload: Optional[FileUpload] = None, **fields: Any) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.put(f"{self.admin_path}/{item_id}", form_or_json(fields, upload))
        return resp.map(acknowledged)

    async def delete(self, item_id: RecordId) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.delete(f"{self.admin_path}/{item_id}")
        return resp.map(acknowledged)


class BrandsAPI(_TaxonomyAPI):
    model = Brand
    public_path = "/products/brands"
    admin_path = "/admin/brands"
    plural = "brands"
    singular = "brand"


class ManufacturersAPI(_TaxonomyAPI):
    model = Manufacturer
    public_path = "/products/manufacturers"
    admin_path = "/admin/manufacturers"
    plural = "manufacturers"
    singular = "manufacturer"


class CategoriesAPI(_TaxonomyAPI):
    model = Category
    public_path = "/products/categories"
    admin_path = "/admin/categories"
    plural = "categories"
    singular = "category"


class ModelsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def by_make(self, make_name: str) -> ApiResponse[Page[VehicleModel]]:
        """Vehicle models for one make, used for part compatibility."""
        resp = await self._http.get(f"/products/models/make-name/{quote(make_name, safe='')}")
        return resp.map(page_of(VehicleModel, "models"))
