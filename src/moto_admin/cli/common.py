"""Shared helpers for CLI pages: client construction, guard, notifications, list rendering."""

import asyncio
import json
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Callable, Optional, Sequence

import click
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from moto_admin.client import AsyncMotoAdmin
from moto_admin.config import get_settings
from moto_admin.guard import DecisionKind, RouteDecision
from moto_admin.listing import Listing
from moto_admin.models.envelope import ApiResponse
from moto_admin.table import Column

console = Console()
err_console = Console(stderr=True)


def make_client(ctx: Optional[click.Context] = None) -> AsyncMotoAdmin:
    settings = get_settings()
    obj = (ctx.find_root().obj if ctx else None) or {}
    if obj.get("base_url"):
        settings = settings.model_copy(update={"api_base_url": obj["base_url"].rstrip("/")})
    return AsyncMotoAdmin(settings=settings)


def run(coro: Any) -> Any:
    return asyncio.run(coro)


def notify_error(message: str) -> None:
    err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False)


def notify_success(message: str) -> None:
    err_console.print(f"[green]✓[/green] {escape(message)}", highlight=False)


def fail(message: Optional[str]) -> None:
    notify_error(message or "Request failed")
    raise SystemExit(1)


def unwrap(resp: ApiResponse[Any]) -> Any:
    """Return the payload, or report the error and stop."""
    if not resp.ok:
        fail(resp.error)
    return resp.data


def _redirect_notice(decision: RouteDecision) -> None:
    notify_error(f"Session expired or missing. Run `moto-admin auth login` ({decision.location}).")


@asynccontextmanager
async def protected_page(client: AsyncMotoAdmin, path: str) -> AsyncIterator[AsyncMotoAdmin]:
    """Run a page under the session guard; redirect to login when the session is gone."""
    with console.status("Checking session..."):
        await client.guard.mount()
    decision = client.guard.decide(path)
    if decision.kind is not DecisionKind.RENDER:
        await client.close()
        _redirect_notice(decision)
        raise SystemExit(1)

    redirected = False
    try:
        yield client
    finally:
        # A 401/403 during the page flips the guard; act on it now.
        decision = client.guard.decide(path)
        if decision.kind is DecisionKind.REDIRECT:
            _redirect_notice(decision)
            redirected = True
        await client.close()
    if redirected:
        raise SystemExit(1)


def echo_json(data: Any) -> None:
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [d.model_dump(mode="json", by_alias=True) if isinstance(d, BaseModel) else d for d in data]
    click.echo(json.dumps(data, indent=2, default=str))


# Column renderers

def money(value: Any, _record: Any = None) -> str:
    try:
        return f"${float(value):.2f}"
    except (TypeError, ValueError):
        return "-"


def date(value: Any, _record: Any = None) -> str:
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return str(value)


def badge(styles: dict[str, str], default: str = "yellow") -> Callable[[Any, Any], Text]:
    def render(value: Any, _record: Any = None) -> Text:
        return Text(str(value or "-"), style=styles.get(str(value), default))
    return render


def active(value: Any, _record: Any = None) -> Text:
    return Text("Active", style="green") if value else Text("Inactive", style="dim")


async def show_listing(
    client: AsyncMotoAdmin,
    listing: Listing,
    columns: Sequence[Column],
    title: str,
    path: str,
    json_output: bool = False,
    browse: bool = False,
    on_select: Optional[Callable[[Any], Any]] = None,
    empty_message: str = "No data available",
) -> None:
    """Render a listing; with browse=True, page through it interactively."""
    settings = client.settings
    await listing.load()
    if browse:
        client.watcher.start()
    try:
        while True:
            if listing.error:
                notify_error(listing.error)
            if json_output:
                echo_json({
                    "items": [i.model_dump(mode="json", by_alias=True) for i in listing.items],
                    "pagination": listing.pagination.model_dump() if listing.pagination else None,
                })
                return
            selected: list[Any] = []
            table = listing.table(
                columns,
                title=title,
                empty_message=empty_message,
                on_row_click=selected.append if on_select else None,
                compact_width=settings.compact_width,
                medium_width=settings.medium_width,
            )
            table.render(console)
            if not browse or client.guard.decide(path).kind is not DecisionKind.RENDER:
                return

            hint = "[n]ext, [p]revious, row number to open, [q]uit" if on_select else "[n]ext, [p]revious, [q]uit"
            choice = (await asyncio.to_thread(click.prompt, hint, default="q", show_default=False)).strip().lower()
            controls = table.controls
            if choice == "n" and controls is not None:
                controls.next()
            elif choice == "p" and controls is not None:
                controls.previous()
            elif choice.isdigit() and on_select is not None:
                if table.click(int(choice) - 1) and selected:
                    await on_select(selected[0])
                continue
            elif choice == "q":
                return
            await listing.settle()
    finally:
        listing.close()
        await client.watcher.stop()
