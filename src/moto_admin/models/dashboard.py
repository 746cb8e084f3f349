"""
Dashboard aggregates.
"""

from typing import Optional

from pydantic import BaseModel, Field

from moto_admin.models.order import Order


class Statistics(BaseModel):
    total_users: Optional[int] = 0
    total_orders: Optional[int] = 0
    total_revenue: Optional[float] = 0.0
    total_products: Optional[int] = 0


class Dashboard(BaseModel):
    statistics: Statistics = Field(default_factory=Statistics)
    recent_orders: list[Order] = Field(default_factory=list)
