"""
Pagination metadata and the paginated collection every list page consumes.
"""

from __future__ import annotations

import math
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class Pagination(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    total: int = Field(default=0, ge=0)
    pages: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _derive_pages(self) -> "Pagination":
        if self.pages is None:
            self.pages = math.ceil(self.total / self.limit)
        if self.pages > 0 and self.page > self.pages:
            self.page = self.pages
        return self

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < (self.pages or 0)


class Page(BaseModel, Generic[T]):
    """Records in server order plus optional pagination metadata."""

    items: list[T] = []
    pagination: Optional[Pagination] = None
