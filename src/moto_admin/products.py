"""
Products, parts and merchandise REST APIs.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from moto_admin.catalog import BrandsAPI, CategoriesAPI
from moto_admin.logging_utils import get_logger
from moto_admin.models.adapters import acknowledged, created, entity, page_of
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page
from moto_admin.models.product import Merchandise, Part, Product
from moto_admin.models.record import RecordId
from moto_admin.transport.http import Body, FileUpload, HttpClient, MultipartBody

logger = get_logger(__name__)


class ProductsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self,
        page: int = 1,
        limit: int = 20,
        type: Optional[str] = None,
        search: Optional[str] = None,
        brand_id: Optional[RecordId] = None,
        category_id: Optional[RecordId] = None,
    ) -> ApiResponse[Page[Product]]:
        """Parts and merchandise in one list."""
        resp = await self._http.get("/admin/products", params={
            "page": page,
            "limit": limit,
            "type": type,
            "search": search,
            "brand_id": brand_id,
            "category_id": category_id,
        })
        return resp.map(page_of(Product, "products"))


def _part_body(fields: dict[str, Any], images: Sequence[FileUpload]) -> Body:
    fields = {k: v for k, v in fields.items() if v is not None and v != []}
    if not images:
        return fields
    return MultipartBody(fields=fields, files=list(images))


class PartsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def create(self, fields: dict[str, Any], images: Sequence[FileUpload] = ()) -> ApiResponse[Part]:
        resp = await self._http.post("/admin/parts", _part_body(fields, images))
        return resp.map(created(Part, "part"))

    async def get(self, part_id: RecordId) -> ApiResponse[Part]:
        resp = await self._http.get(f"/admin/parts/{part_id}")
        return resp.map(entity(Part, "part"))

    async def update(
        self, part_id: RecordId, fields: dict[str, Any], images: Sequence[FileUpload] = (),
    ) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.put(f"/admin/parts/{part_id}", _part_body(fields, images))
        return resp.map(acknowledged)

    async def delete(self, part_id: RecordId) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.delete(f"/admin/parts/{part_id}")
        return resp.map(acknowledged)


class MerchandiseAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def create(self, fields: dict[str, Any]) -> ApiResponse[Merchandise]:
        resp = await self._http.post("/admin/merchandise", fields)
        return resp.map(created(Merchandise, "merchandise"))

    async def get(self, item_id: RecordId) -> ApiResponse[Merchandise]:
        resp = await self._http.get(f"/admin/merchandise/{item_id}")
        return resp.map(entity(Merchandise, "merchandise"))

    async def update(self, item_id: RecordId, fields: dict[str, Any]) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.put(f"/admin/merchandise/{item_id}", fields)
        return resp.map(acknowledged)

    async def delete(self, item_id: RecordId) -> ApiResponse[dict[str, Any]]:
        resp = await self._http.delete(f"/admin/merchandise/{item_id}")
        return resp.map(acknowledged)


async def create_part_with_catalog(
    parts: PartsAPI,
    brands: BrandsAPI,
    categories: CategoriesAPI,
    fields: dict[str, Any],
    new_brand: Optional[str] = None,
    new_category: Optional[str] = None,
    images: Sequence[FileUpload] = (),
) -> ApiResponse[Part]:
    """Create a part, first creating its brand and/or category when named.

    Stops at the first failed step; a part is never created against a
    brand or category the server did not confirm.
    """
    fields = dict(fields)
    if new_brand:
        brand = await brands.create(new_brand)
        if not brand.ok:
            logger.warning("part_brand_create_failed", brand=new_brand, error=brand.error)
            return ApiResponse(error=brand.error, status=brand.status)
        fields["brand_id"] = brand.data.id  # type: ignore[union-attr]
    if new_category:
        category = await categories.create(new_category)
        if not category.ok:
            logger.warning("part_category_create_failed", category=new_category, error=category.error)
            return ApiResponse(error=category.error, status=category.status)
        fields["category_id"] = category.data.id  # type: ignore[union-attr]

    if not fields.get("brand_id") or not fields.get("category_id"):
        return ApiResponse(error="Please select brand and category")
    return await parts.create(fields, images)
