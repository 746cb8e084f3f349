"""
Catalogue taxonomy: brands, manufacturers, categories, vehicle models and partners.
"""

from typing import Optional

from moto_admin.models.record import Record, RecordId


class Brand(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    created_at: Optional[str] = None


class Manufacturer(Brand):
    pass


class Category(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[RecordId] = None
    image_url: Optional[str] = None
    created_at: Optional[str] = None


class VehicleModel(Record):
    name: Optional[str] = None
    make_name: Optional[str] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None


class Partner(Record):
    name: Optional[str] = None
    description: Optional[str] = None
    about_page: Optional[str] = None
    website_url: Optional[str] = None
    contact_email: Optional[str] = None
    logo_url: Optional[str] = None
    is_active: Optional[bool] = True
    created_at: Optional[str] = None
