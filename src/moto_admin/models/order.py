"""
Order models — list rows, line items, payments and the order detail view.
"""

from typing import Optional

from pydantic import Field

from moto_admin.models.record import Record, RecordId

ORDER_STATUSES = ("pending", "paid", "shipped", "delivered", "cancelled")


class Order(Record):
    order_number: Optional[str] = None
    user_id: Optional[RecordId] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    total_amount: Optional[float] = None
    status: Optional[str] = "pending"
    payment_status: Optional[str] = None
    tracking_number: Optional[str] = None
    created_at: Optional[str] = None


class OrderItem(Record):
    order_id: Optional[RecordId] = None
    product_id: Optional[RecordId] = None
    product_name: Optional[str] = None
    quantity: Optional[int] = 0
    price: Optional[float] = 0.0


class Payment(Record):
    order_id: Optional[RecordId] = None
    amount: Optional[float] = None
    method: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


class ShippingAddress(Record):
    full_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None


class OrderDetail(Record):
    order: Order
    order_items: list[OrderItem] = Field(default_factory=list, alias="orderItems")
    payments: list[Payment] = Field(default_factory=list)
    shipping_address: Optional[ShippingAddress] = Field(default=None, alias="shippingAddress")

    @property
    def total_quantity(self) -> int:
        return sum(i.quantity or 0 for i in self.order_items)

    @property
    def computed_total(self) -> float:
        return sum((i.price or 0.0) * (i.quantity or 0) for i in self.order_items)
