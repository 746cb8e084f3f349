"""
Admin profile, customer accounts and the user detail view.
"""

from typing import Any, Optional

from pydantic import Field

from moto_admin.models.order import Order, OrderItem, Payment
from moto_admin.models.record import Record


class AdminUser(Record):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    is_admin: Optional[int] = None


class LoginResult(Record):
    message: Optional[str] = None
    token: str
    user: Optional[AdminUser] = None


class User(Record):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    membership_type: Optional[str] = None
    membership_points: Optional[int] = None
    email_verified: Optional[bool] = None
    order_count: Optional[int] = None
    total_spent: Optional[float] = None
    created_at: Optional[str] = None


class UserDetail(Record):
    user: User
    orders: list[Order] = Field(default_factory=list)
    order_items: list[OrderItem] = Field(default_factory=list, alias="orderItems")
    payments: list[Payment] = Field(default_factory=list)

    @property
    def total_spent(self) -> float:
        return sum(o.total_amount or 0.0 for o in self.orders)

    @property
    def total_orders(self) -> int:
        return len(self.orders)


MEMBERSHIP_TYPES = ("basic", "silver", "gold", "platinum")


def membership_payload(membership_type: str, membership_points: Optional[int] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"membership_type": membership_type}
    if membership_points is not None:
        body["membership_points"] = membership_points
    return body
