"""CLI: moto-admin products list, parts ..., merchandise ..."""

from typing import Any

import click
from rich.table import Table

from moto_admin.cli.common import (
    active, badge, console, echo_json, make_client, money, notify_success, protected_page, run,
    show_listing, unwrap,
)
from moto_admin.listing import Listing
from moto_admin.models.product import PRODUCT_TYPES
from moto_admin.table import Column
from moto_admin.transport.http import FileUpload

PRODUCT_COLUMNS = [
    Column("name", "Name"),
    Column("type", "Type", render=badge({"part": "blue", "merchandise": "magenta"})),
    Column("display_price", "Price", render=lambda _v, p: money(p.display_price)),
    Column("quantity", "Stock"),
    Column("brand_name", "Brand", hide_on_mobile=True, hide_on_tablet=True),
    Column("category_name", "Category", hide_on_tablet=True),
    Column("is_active", "Status", render=active),
]


def print_record(title: str, record: Any) -> None:
    info = Table(title=title, show_header=False)
    info.add_column("Field", style="bold")
    info.add_column("Value")
    for key, value in record.model_dump(exclude_none=True).items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "-"
        info.add_row(key, str(value))
    console.print(info)


def _fields(**values: Any) -> dict[str, Any]:
    return {k: list(v) if isinstance(v, tuple) else v for k, v in values.items() if v not in (None, ())}


def _images(paths: tuple[str, ...]) -> list[FileUpload]:
    return [FileUpload.from_path("images", p) for p in paths]


@click.group()
def products():
    """Combined product list (parts and merchandise)."""


@products.command("list")
@click.option("--type", "product_type", type=click.Choice(PRODUCT_TYPES), default=None)
@click.option("--search", default=None)
@click.option("--brand-id", default=None)
@click.option("--category-id", default=None)
@click.option("--page", default=1, type=int)
@click.option("--browse", is_flag=True, help="Page through results interactively")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def products_list(ctx, product_type, search, brand_id, category_id, page, browse, json_output):
    """List products."""

    async def _list():
        async with protected_page(make_client(ctx), "/products") as client:
            listing = Listing(client.products.list, client.settings.page_size, type=product_type,
                              search=search, brand_id=brand_id, category_id=category_id)
            listing.page = page

            async def open_product(product):
                if product.type == "part":
                    print_record(product.name or f"Product {product.id}", unwrap(await client.parts.get(product.id)))
                else:
                    print_record(product.name or f"Product {product.id}", unwrap(await client.merchandise.get(product.id)))

            await show_listing(client, listing, PRODUCT_COLUMNS, "Products", "/products",
                               json_output=json_output, browse=browse, on_select=open_product,
                               empty_message="No products found")

    run(_list())


def part_options(required: bool):
    def decorate(f):
        for opt in reversed([
            click.option("--name", required=required),
            click.option("--description", default=None),
            click.option("--original-price", type=float, default=None),
            click.option("--selling-price", type=float, required=required),
            click.option("--quantity", type=int, default=None),
            click.option("--weight", type=float, default=None),
            click.option("--brand-id", default=None),
            click.option("--category-id", default=None),
            click.option("--color", "color_options", multiple=True),
            click.option("--fits", "compatibility", multiple=True, help="Compatible vehicle model"),
            click.option("--image", "images", multiple=True, type=click.Path(exists=True, dir_okay=False)),
        ]):
            f = opt(f)
        return f
    return decorate


@click.group()
def parts():
    """Motorcycle parts."""


@parts.command("create")
@part_options(required=True)
@click.option("--new-brand", default=None, help="Create this brand first and use it")
@click.option("--new-category", default=None, help="Create this category first and use it")
@click.pass_context
def parts_create(ctx, images, new_brand, new_category, **values):
    """Create a part."""

    async def _create():
        async with protected_page(make_client(ctx), "/products/parts/new") as client:
            with console.status("Creating part..."):
                part = unwrap(await client.create_part(
                    _fields(**values), new_brand=new_brand, new_category=new_category,
                    images=_images(images),
                ))
            notify_success(f"Part created (id {part.id})")

    run(_create())


@parts.command("show")
@click.argument("part_id")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def parts_show(ctx, part_id, json_output):
    """Show a part."""

    async def _show():
        async with protected_page(make_client(ctx), f"/products/parts/{part_id}") as client:
            part = unwrap(await client.parts.get(part_id))
            if json_output:
                echo_json(part)
            else:
                print_record(part.name or f"Part {part_id}", part)

    run(_show())


@parts.command("update")
@click.argument("part_id")
@part_options(required=False)
@click.option("--active/--inactive", "is_active", default=None)
@click.pass_context
def parts_update(ctx, part_id, images, **values):
    """Update a part. Only the given fields change."""

    async def _update():
        async with protected_page(make_client(ctx), f"/products/parts/{part_id}") as client:
            with console.status("Saving part..."):
                unwrap(await client.parts.update(part_id, _fields(**values), _images(images)))
            notify_success(f"Part {part_id} updated")

    run(_update())


@parts.command("delete")
@click.argument("part_id")
@click.confirmation_option(prompt="Delete this part?")
@click.pass_context
def parts_delete(ctx, part_id):
    """Delete a part."""

    async def _delete():
        async with protected_page(make_client(ctx), "/products") as client:
            unwrap(await client.parts.delete(part_id))
            notify_success(f"Part {part_id} deleted")

    run(_delete())


@click.group()
def merchandise():
    """Store merchandise."""


@merchandise.command("create")
@click.option("--name", required=True)
@click.option("--price", type=float, required=True)
@click.option("--description", default=None)
@click.option("--quantity", type=int, default=None)
@click.option("--size", "sizes", multiple=True)
@click.pass_context
def merchandise_create(ctx, **values):
    """Create a merchandise item."""

    async def _create():
        async with protected_page(make_client(ctx), "/products/merchandise/new") as client:
            item = unwrap(await client.merchandise.create(_fields(**values)))
            notify_success(f"Merchandise created (id {item.id})")

    run(_create())


@merchandise.command("show")
@click.argument("item_id")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def merchandise_show(ctx, item_id, json_output):
    """Show a merchandise item."""

    async def _show():
        async with protected_page(make_client(ctx), f"/products/merchandise/{item_id}") as client:
            item = unwrap(await client.merchandise.get(item_id))
            if json_output:
                echo_json(item)
            else:
                print_record(item.name or f"Merchandise {item_id}", item)

    run(_show())


@merchandise.command("update")
@click.argument("item_id")
@click.option("--name", default=None)
@click.option("--price", type=float, default=None)
@click.option("--description", default=None)
@click.option("--quantity", type=int, default=None)
@click.option("--size", "sizes", multiple=True)
@click.option("--active/--inactive", "is_active", default=None)
@click.pass_context
def merchandise_update(ctx, item_id, **values):
    """Update a merchandise item."""

    async def _update():
        async with protected_page(make_client(ctx), f"/products/merchandise/{item_id}") as client:
            unwrap(await client.merchandise.update(item_id, _fields(**values)))
            notify_success(f"Merchandise {item_id} updated")

    run(_update())


@merchandise.command("delete")
@click.argument("item_id")
@click.confirmation_option(prompt="Delete this item?")
@click.pass_context
def merchandise_delete(ctx, item_id):
    """Delete a merchandise item."""

    async def _delete():
        async with protected_page(make_client(ctx), "/products") as client:
            unwrap(await client.merchandise.delete(item_id))
            notify_success(f"Merchandise {item_id} deleted")

    run(_delete())
