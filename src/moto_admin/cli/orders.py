"""CLI: moto-admin orders list|show|status"""

from typing import Optional

import click
from rich.table import Table

from moto_admin.cli.common import (
    badge, console, date, echo_json, make_client, money, notify_success, protected_page, run,
    show_listing, unwrap,
)
from moto_admin.listing import Listing
from moto_admin.models.order import ORDER_STATUSES, OrderDetail
from moto_admin.table import Column, DataTable

STATUS_STYLES = {"delivered": "green", "cancelled": "red", "shipped": "blue"}
PAYMENT_STYLES = {"paid": "green"}

ORDER_COLUMNS = [
    Column("order_number", "Order #"),
    Column("full_name", "Customer"),
    Column("email", "Email", hide_on_tablet=True),
    Column("total_amount", "Amount", render=money),
    Column("status", "Status", render=badge(STATUS_STYLES)),
    Column("payment_status", "Payment", render=badge(PAYMENT_STYLES)),
    Column("created_at", "Date", render=date, hide_on_mobile=True),
]

ITEM_COLUMNS = [
    Column("product_name", "Product"),
    Column("quantity", "Qty"),
    Column("price", "Price", render=money),
    Column("line_total", "Total", render=lambda _v, item: money((item.price or 0.0) * (item.quantity or 0))),
]

PAYMENT_COLUMNS = [
    Column("amount", "Amount", render=money),
    Column("method", "Method"),
    Column("status", "Status", render=badge({"completed": "green"})),
    Column("created_at", "Date", render=date),
]


def print_order(detail: OrderDetail, compact_width: int = 80, medium_width: int = 120) -> None:
    order = detail.order
    info = Table(title=f"Order {order.order_number or order.id}", show_header=False)
    info.add_column("Field", style="bold")
    info.add_column("Value")
    info.add_row("Customer", f"{order.full_name or '-'} <{order.email or '-'}>")
    info.add_row("Status", badge(STATUS_STYLES)(order.status))
    info.add_row("Payment", badge(PAYMENT_STYLES)(order.payment_status))
    info.add_row("Tracking", order.tracking_number or "-")
    info.add_row("Total", money(order.total_amount))
    info.add_row("Items", f"{detail.total_quantity} ({money(detail.computed_total)} computed)")
    addr = detail.shipping_address
    if addr:
        lines = [addr.full_name, addr.address_line1, addr.address_line2,
                 " ".join(p for p in (addr.city, addr.state, addr.postal_code) if p), addr.country]
        info.add_row("Ship to", "\n".join(line for line in lines if line))
    console.print(info)
    DataTable(ITEM_COLUMNS, detail.order_items, empty_message="No items", title="Items",
              compact_width=compact_width, medium_width=medium_width).render(console)
    DataTable(PAYMENT_COLUMNS, detail.payments, empty_message="No payments", title="Payments",
              compact_width=compact_width, medium_width=medium_width).render(console)


@click.group()
def orders():
    """Customer orders."""


@orders.command("list")
@click.option("--status", type=click.Choice(ORDER_STATUSES), default=None)
@click.option("--payment-status", default=None)
@click.option("--user-id", default=None)
@click.option("--page", default=1, type=int)
@click.option("--browse", is_flag=True, help="Page through results interactively")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def orders_list(ctx, status, payment_status, user_id, page, browse, json_output):
    """List orders."""

    async def _list():
        async with protected_page(make_client(ctx), "/orders") as client:
            listing = Listing(client.orders.list, client.settings.page_size,
                              status=status, payment_status=payment_status, user_id=user_id)
            listing.page = page

            async def open_order(order):
                resp = await client.orders.get(order.id)
                print_order(unwrap(resp), client.settings.compact_width, client.settings.medium_width)

            await show_listing(client, listing, ORDER_COLUMNS, "Orders", "/orders",
                               json_output=json_output, browse=browse, on_select=open_order)

    run(_list())


@orders.command("show")
@click.argument("order_id")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def orders_show(ctx, order_id, json_output):
    """Show an order with items, payments and shipping address."""

    async def _show():
        async with protected_page(make_client(ctx), f"/orders/{order_id}") as client:
            with console.status("Loading order..."):
                detail = unwrap(await client.orders.get(order_id))
            if json_output:
                echo_json(detail)
            else:
                print_order(detail, client.settings.compact_width, client.settings.medium_width)

    run(_show())


@orders.command("status")
@click.argument("order_id")
@click.argument("status", type=click.Choice(ORDER_STATUSES))
@click.option("--tracking-number", default=None)
@click.pass_context
def orders_status(ctx, order_id: str, status: str, tracking_number: Optional[str]):
    """Update an order's status."""

    async def _update():
        async with protected_page(make_client(ctx), f"/orders/{order_id}") as client:
            with console.status("Updating order..."):
                unwrap(await client.orders.update_status(order_id, status, tracking_number))
            notify_success(f"Order {order_id} is now {status}")

    run(_update())
