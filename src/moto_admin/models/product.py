"""
Product catalogue records: the combined product list, parts and merchandise.
"""

from typing import Optional

from pydantic import Field

from moto_admin.models.record import Record, RecordId

PRODUCT_TYPES = ("part", "merchandise")


class Product(Record):
    name: Optional[str] = None
    type: Optional[str] = "part"
    price: Optional[float] = None
    merch_price: Optional[float] = None
    quantity: Optional[int] = None
    is_active: Optional[bool] = True
    brand_name: Optional[str] = None
    category_name: Optional[str] = None

    @property
    def display_price(self) -> Optional[float]:
        return self.price if self.type == "part" else self.merch_price


class Part(Record):
    brand_id: Optional[RecordId] = None
    category_id: Optional[RecordId] = None
    name: Optional[str] = None
    description: Optional[str] = None
    original_price: Optional[float] = None
    selling_price: Optional[float] = None
    quantity: Optional[int] = None
    weight: Optional[float] = None
    images: list[str] = Field(default_factory=list)
    color_options: list[str] = Field(default_factory=list)
    compatibility: list[str] = Field(default_factory=list)
    is_active: Optional[bool] = None


class Merchandise(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    sizes: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    is_active: Optional[bool] = None
