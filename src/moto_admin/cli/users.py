"""CLI: moto-admin users list|show|membership"""

from typing import Optional

import click
from rich.table import Table

from moto_admin.cli.common import (
    badge, console, date, echo_json, make_client, money, notify_success, protected_page, run,
    show_listing, unwrap,
)
from moto_admin.cli.orders import PAYMENT_COLUMNS, PAYMENT_STYLES, STATUS_STYLES
from moto_admin.listing import Listing
from moto_admin.models.user import MEMBERSHIP_TYPES, UserDetail
from moto_admin.table import Column, DataTable

USER_COLUMNS = [
    Column("full_name", "Name"),
    Column("email", "Email"),
    Column("membership_type", "Membership", render=badge({}, default="cyan")),
    Column("order_count", "Orders", hide_on_tablet=True),
    Column("total_spent", "Total Spent", render=money),
    Column("created_at", "Joined", render=date, hide_on_mobile=True, hide_on_tablet=True),
]

USER_ORDER_COLUMNS = [
    Column("order_number", "Order #"),
    Column("total_amount", "Amount", render=money),
    Column("status", "Status", render=badge(STATUS_STYLES)),
    Column("payment_status", "Payment", render=badge(PAYMENT_STYLES)),
    Column("created_at", "Date", render=date),
]


def print_user(detail: UserDetail, compact_width: int = 80, medium_width: int = 120) -> None:
    user = detail.user
    info = Table(title=user.full_name or user.email or f"User {user.id}", show_header=False)
    info.add_column("Field", style="bold")
    info.add_column("Value")
    info.add_row("Email", user.email or "-")
    info.add_row("Phone", user.phone or "-")
    info.add_row("Membership", f"{user.membership_type or '-'} ({user.membership_points or 0} pts)")
    info.add_row("Orders", str(detail.total_orders))
    info.add_row("Total spent", money(detail.total_spent))
    info.add_row("Joined", date(user.created_at))
    console.print(info)
    DataTable(USER_ORDER_COLUMNS, detail.orders, empty_message="No orders", title="Orders",
              compact_width=compact_width, medium_width=medium_width).render(console)
    DataTable(PAYMENT_COLUMNS, detail.payments, empty_message="No payments", title="Payments",
              compact_width=compact_width, medium_width=medium_width).render(console)


@click.group()
def users():
    """Customer accounts."""


@users.command("list")
@click.option("--search", default=None)
@click.option("--membership-type", type=click.Choice(MEMBERSHIP_TYPES), default=None)
@click.option("--email-verified/--email-unverified", default=None)
@click.option("--page", default=1, type=int)
@click.option("--browse", is_flag=True, help="Page through results interactively")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def users_list(ctx, search, membership_type, email_verified, page, browse, json_output):
    """List users."""

    async def _list():
        async with protected_page(make_client(ctx), "/users") as client:
            listing = Listing(client.users.list, client.settings.page_size, search=search,
                              membership_type=membership_type, email_verified=email_verified)
            listing.page = page

            async def open_user(user):
                resp = await client.users.get(user.id)
                print_user(unwrap(resp), client.settings.compact_width, client.settings.medium_width)

            await show_listing(client, listing, USER_COLUMNS, "Users", "/users",
                               json_output=json_output, browse=browse, on_select=open_user)

    run(_list())


@users.command("show")
@click.argument("user_id")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def users_show(ctx, user_id, json_output):
    """Show a user with their orders and payments."""

    async def _show():
        async with protected_page(make_client(ctx), f"/users/{user_id}") as client:
            with console.status("Loading user..."):
                detail = unwrap(await client.users.get(user_id))
            if json_output:
                echo_json(detail)
            else:
                print_user(detail, client.settings.compact_width, client.settings.medium_width)

    run(_show())


@users.command("membership")
@click.argument("user_id")
@click.argument("membership_type", type=click.Choice(MEMBERSHIP_TYPES))
@click.option("--points", type=int, default=None)
@click.pass_context
def users_membership(ctx, user_id: str, membership_type: str, points: Optional[int]):
    """Change a user's membership tier."""

    async def _update():
        async with protected_page(make_client(ctx), f"/users/{user_id}") as client:
            with console.status("Updating membership..."):
                unwrap(await client.users.update_membership(user_id, membership_type, points))
            notify_success(f"User {user_id} membership set to {membership_type}")

    run(_update())
