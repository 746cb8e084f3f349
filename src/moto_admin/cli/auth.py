"""CLI: moto-admin auth login|status|logout|validate"""

from typing import Optional

import click

from moto_admin.cli.common import console, fail, make_client, notify_success, run


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--email", default=None)
@click.option("--password", default=None)
@click.pass_context
def auth_login(ctx: click.Context, email: Optional[str], password: Optional[str]):
    """Log in with an admin account."""

    async def _login():
        client = make_client(ctx)
        try:
            addr = email or click.prompt("Email")
            secret = password or click.prompt("Password", hide_input=True)
            with console.status("Signing in..."):
                resp = await client.auth.login(addr, secret)
            if not resp.ok:
                fail(resp.error)
            user = resp.data.user
            name = (user.full_name or user.email or addr) if user else addr
            notify_success(f"Logged in as {name}")
            console.print(f"[dim]Session saved to {client.store.path}[/dim]")
        finally:
            await client.close()

    run(_login())


@auth.command("status")
@click.pass_context
def auth_status(ctx: click.Context):
    """Show the locally stored session (does not contact the server)."""
    client = make_client(ctx)
    if client.auth.is_authenticated():
        user = client.store.user or {}
        console.print(f"[green]Logged in[/green] as {user.get('full_name') or user.get('email', 'unknown')}")
    else:
        console.print("[yellow]Not logged in. Run `moto-admin auth login`.[/yellow]")
    console.print(f"[dim]API: {client.http.base_url}[/dim]")


@auth.command("validate")
@click.pass_context
def auth_validate(ctx: click.Context):
    """Ask the server whether the stored token is still valid."""

    async def _validate():
        client = make_client(ctx)
        try:
            with console.status("Validating session..."):
                valid = await client.auth.validate_token()
        finally:
            await client.close()
        if not valid:
            fail("Session is not valid. Run `moto-admin auth login`.")
        notify_success("Session is valid")

    run(_validate())


@auth.command("logout")
@click.pass_context
def auth_logout(ctx: click.Context):
    """Clear saved credentials."""
    make_client(ctx).auth.logout()
    notify_success("Logged out.")
