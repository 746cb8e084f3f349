"""CLI: moto-admin partners list|create|update|delete"""

from typing import Any, Optional

import click

from moto_admin.cli.common import (
    active, make_client, notify_success, protected_page, run, show_listing, unwrap,
)
from moto_admin.listing import Listing
from moto_admin.table import Column
from moto_admin.transport.http import FileUpload

PARTNER_COLUMNS = [
    Column("name", "Name"),
    Column("website_url", "Website", hide_on_tablet=True),
    Column("contact_email", "Contact", hide_on_mobile=True),
    Column("is_active", "Status", render=active),
]


def _logo(path: Optional[str]) -> Optional[FileUpload]:
    return FileUpload.from_path("logo", path) if path else None


@click.group()
def partners():
    """Partner businesses shown on the storefront."""


@partners.command("list")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def partners_list(ctx, json_output):
    """List partners."""

    async def _list():
        async with protected_page(make_client(ctx), "/partners") as client:
            listing = Listing(lambda **_: client.partners.list())
            await show_listing(client, listing, PARTNER_COLUMNS, "Partners", "/partners",
                               json_output=json_output, empty_message="No partners yet")

    run(_list())


@partners.command("create")
@click.argument("name")
@click.option("--description", default=None)
@click.option("--about-page", default=None)
@click.option("--website-url", default=None)
@click.option("--contact-email", default=None)
@click.option("--logo", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--active/--inactive", "is_active", default=True)
@click.pass_context
def partners_create(ctx, name: str, logo: Optional[str], is_active: bool, **fields: Any):
    """Create a partner."""

    async def _create():
        async with protected_page(make_client(ctx), "/partners") as client:
            partner = unwrap(await client.partners.create(name, _logo(logo), is_active, **fields))
            notify_success(f"Partner created (id {partner.id})")

    run(_create())


@partners.command("update")
@click.argument("partner_id")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--about-page", default=None)
@click.option("--website-url", default=None)
@click.option("--contact-email", default=None)
@click.option("--logo", type=click.Path(exists=True, dir_okay=False), default=None)
@click.option("--logo-url", "existing_logo_url", default=None, help="Keep this logo when no file is given")
@click.option("--active/--inactive", "is_active", default=None)
@click.pass_context
def partners_update(ctx, partner_id: str, logo: Optional[str], existing_logo_url: Optional[str], **fields: Any):
    """Update a partner."""

    async def _update():
        async with protected_page(make_client(ctx), "/partners") as client:
            unwrap(await client.partners.update(partner_id, _logo(logo), existing_logo_url, **fields))
            notify_success(f"Partner {partner_id} updated")

    run(_update())


@partners.command("delete")
@click.argument("partner_id")
@click.confirmation_option(prompt="Delete this partner?")
@click.pass_context
def partners_delete(ctx, partner_id):
    """Delete a partner."""

    async def _delete():
        async with protected_page(make_client(ctx), "/partners") as client:
            unwrap(await client.partners.delete(partner_id))
            notify_success(f"Partner {partner_id} deleted")

    run(_delete())
