"""CLI: moto-admin feedback list|update, moto-admin ambassadors list|status"""

import click

from moto_admin.cli.common import (
    badge, date, make_client, notify_success, protected_page, run, show_listing, unwrap,
)
from moto_admin.listing import Listing
from moto_admin.models.engagement import AMBASSADOR_STATUSES
from moto_admin.table import Column

AMBASSADOR_STYLES = {"approved": "green", "rejected": "red"}

FEEDBACK_COLUMNS = [
    Column("full_name", "From"),
    Column("email", "Email", hide_on_tablet=True),
    Column("feedback_type", "Type", render=badge({}, default="cyan")),
    Column("message", "Message", render=lambda v, _r: (v or "")[:60]),
    Column("status", "Status", render=badge({"resolved": "green"})),
    Column("created_at", "Date", render=date, hide_on_mobile=True),
]

AMBASSADOR_COLUMNS = [
    Column("full_name", "Name"),
    Column("email", "Email"),
    Column("phone", "Phone", hide_on_mobile=True, hide_on_tablet=True),
    Column("status", "Status", render=badge(AMBASSADOR_STYLES)),
    Column("created_at", "Applied", render=date, hide_on_mobile=True),
]


@click.group()
def feedback():
    """Customer feedback."""


@feedback.command("list")
@click.option("--type", "feedback_type", default=None)
@click.option("--page", default=1, type=int)
@click.option("--browse", is_flag=True, help="Page through results interactively")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def feedback_list(ctx, feedback_type, page, browse, json_output):
    """List feedback."""

    async def _list():
        async with protected_page(make_client(ctx), "/feedback") as client:
            listing = Listing(client.feedback.list, client.settings.page_size, feedback_type=feedback_type)
            listing.page = page
            await show_listing(client, listing, FEEDBACK_COLUMNS, "Feedback", "/feedback",
                               json_output=json_output, browse=browse, empty_message="No feedback yet")

    run(_list())


@feedback.command("update")
@click.argument("feedback_id")
@click.option("--status", default=None)
@click.option("--admin-notes", default=None)
@click.pass_context
def feedback_update(ctx, feedback_id, status, admin_notes):
    """Update feedback status or notes."""
    fields = {k: v for k, v in {"status": status, "admin_notes": admin_notes}.items() if v is not None}
    if not fields:
        raise click.UsageError("Nothing to update: pass --status and/or --admin-notes")

    async def _update():
        async with protected_page(make_client(ctx), "/feedback") as client:
            unwrap(await client.feedback.update(feedback_id, **fields))
            notify_success(f"Feedback {feedback_id} updated")

    run(_update())


@click.group()
def ambassadors():
    """Ambassador applications."""


@ambassadors.command("list")
@click.option("--status", type=click.Choice(AMBASSADOR_STATUSES), default=None)
@click.option("--page", default=1, type=int)
@click.option("--browse", is_flag=True, help="Page through results interactively")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def ambassadors_list(ctx, status, page, browse, json_output):
    """List ambassador applications."""

    async def _list():
        async with protected_page(make_client(ctx), "/ambassadors") as client:
            listing = Listing(client.ambassadors.list, client.settings.page_size, status=status)
            listing.page = page
            await show_listing(client, listing, AMBASSADOR_COLUMNS, "Ambassadors", "/ambassadors",
                               json_output=json_output, browse=browse, empty_message="No applications yet")

    run(_list())


@ambassadors.command("status")
@click.argument("ambassador_id")
@click.argument("status", type=click.Choice(AMBASSADOR_STATUSES))
@click.option("--notes", "admin_notes", default=None)
@click.pass_context
def ambassadors_status(ctx, ambassador_id, status, admin_notes):
    """Approve or reject an application."""

    async def _update():
        async with protected_page(make_client(ctx), "/ambassadors") as client:
            unwrap(await client.ambassadors.update_status(ambassador_id, status, admin_notes))
            notify_success(f"Application {ambassador_id} {status}")

    run(_update())
