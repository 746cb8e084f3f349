"""CLI: moto-admin brands|manufacturers|categories ..., moto-admin models <make>"""

from typing import Any, Optional

import click

from moto_admin.cli.common import (
    console, date, echo_json, make_client, notify_success, protected_page, run, show_listing, unwrap,
)
from moto_admin.listing import Listing
from moto_admin.table import Column, DataTable
from moto_admin.transport.http import FileUpload

TAXONOMY_COLUMNS = [
    Column("id", "ID"),
    Column("name", "Name"),
    Column("description", "Description", hide_on_mobile=True, hide_on_tablet=True),
    Column("created_at", "Created", render=date, hide_on_mobile=True),
]

MODEL_COLUMNS = [
    Column("name", "Model"),
    Column("make_name", "Make"),
    Column("year_from", "From"),
    Column("year_to", "To"),
]


def taxonomy_group(name: str, label: str, api_attr: str, path: str, with_logo: bool) -> click.Group:
    """Build the list/create/update/delete group for one taxonomy resource."""
    singular = label[:-3] + "y" if label.endswith("ies") else label[:-1]

    def logo_option(f: Any) -> Any:
        if not with_logo:
            return f
        return click.option("--logo", type=click.Path(exists=True, dir_okay=False), default=None)(f)

    def upload(logo: Optional[str]) -> Optional[FileUpload]:
        return FileUpload.from_path("logo", logo) if logo else None

    @click.group(name=name, help=f"{label}.")
    def group():
        pass

    @group.command("list", help=f"List {name}.")
    @click.option("--json-output", "--json", is_flag=True)
    @click.pass_context
    def list_cmd(ctx, json_output):
        async def _list():
            async with protected_page(make_client(ctx), path) as client:
                api = getattr(client, api_attr)
                listing = Listing(lambda **_: api.list())
                await show_listing(client, listing, TAXONOMY_COLUMNS, label, path,
                                   json_output=json_output, empty_message=f"No {name} yet")

        run(_list())

    @group.command("create", help=f"Create a {singular.lower()}.")
    @click.argument("item_name", metavar="NAME")
    @click.option("--description", default=None)
    @logo_option
    @click.pass_context
    def create_cmd(ctx, item_name, description, logo=None):
        async def _create():
            async with protected_page(make_client(ctx), path) as client:
                api = getattr(client, api_attr)
                item = unwrap(await api.create(item_name, upload(logo), description=description))
                notify_success(f"{singular} created (id {item.id})")

        run(_create())

    @group.command("update", help=f"Update a {singular.lower()}.")
    @click.argument("item_id")
    @click.option("--name", "item_name", default=None)
    @click.option("--description", default=None)
    @logo_option
    @click.pass_context
    def update_cmd(ctx, item_id, item_name, description, logo=None):
        async def _update():
            async with protected_page(make_client(ctx), path) as client:
                api = getattr(client, api_attr)
                unwrap(await api.update(item_id, upload(logo), name=item_name, description=description))
                notify_success(f"{singular} {item_id} updated")

        run(_update())

    @group.command("delete", help=f"Delete a {singular.lower()}.")
    @click.argument("item_id")
    @click.confirmation_option(prompt=f"Delete this {singular.lower()}?")
    @click.pass_context
    def delete_cmd(ctx, item_id):
        async def _delete():
            async with protected_page(make_client(ctx), path) as client:
                unwrap(await getattr(client, api_attr).delete(item_id))
                notify_success(f"{singular} {item_id} deleted")

        run(_delete())

    return group


brands = taxonomy_group("brands", "Brands", "brands", "/brands", with_logo=True)
manufacturers = taxonomy_group("manufacturers", "Manufacturers", "manufacturers", "/manufacturers", with_logo=True)
categories = taxonomy_group("categories", "Categories", "categories", "/categories", with_logo=False)


@click.command("models")
@click.argument("make")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def models_cmd(ctx, make, json_output):
    """Vehicle models for a make."""

    async def _models():
        async with protected_page(make_client(ctx), "/products") as client:
            page = unwrap(await client.models.by_make(make))
            if json_output:
                echo_json(page.items)
                return
            DataTable(MODEL_COLUMNS, page.items, title=f"{make} models",
                      empty_message=f"No models for {make}",
                      compact_width=client.settings.compact_width,
                      medium_width=client.settings.medium_width).render(console)

    run(_models())
