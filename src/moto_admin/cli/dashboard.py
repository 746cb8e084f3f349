"""CLI: moto-admin dashboard"""

import click
from rich.table import Table

from moto_admin.cli.common import (
    badge, console, date, echo_json, make_client, money, protected_page, run, unwrap,
)
from moto_admin.cli.orders import STATUS_STYLES
from moto_admin.table import Column, DataTable

RECENT_ORDER_COLUMNS = [
    Column("order_number", "Order #"),
    Column("full_name", "Customer"),
    Column("total_amount", "Amount", render=money),
    Column("status", "Status", render=badge(STATUS_STYLES)),
    Column("created_at", "Date", render=date, hide_on_tablet=True),
]


@click.command("dashboard")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def dashboard_cmd(ctx: click.Context, json_output: bool):
    """Business metrics and recent orders."""

    async def _dashboard():
        async with protected_page(make_client(ctx), "/") as client:
            with console.status("Loading dashboard..."):
                resp = await client.dashboard.statistics()
            data = unwrap(resp)
            if json_output:
                echo_json(data)
                return
            stats = data.statistics
            summary = Table(title="Dashboard", show_header=False)
            summary.add_column("Metric", style="bold")
            summary.add_column("Value", justify="right")
            summary.add_row("Total users", str(stats.total_users or 0))
            summary.add_row("Total orders", str(stats.total_orders or 0))
            summary.add_row("Revenue", money(stats.total_revenue))
            summary.add_row("Products", str(stats.total_products or 0))
            console.print(summary)
            DataTable(
                RECENT_ORDER_COLUMNS,
                data.recent_orders,
                empty_message="No recent orders",
                title="Recent orders",
                compact_width=client.settings.compact_width,
                medium_width=client.settings.medium_width,
            ).render(console)

    run(_dashboard())
