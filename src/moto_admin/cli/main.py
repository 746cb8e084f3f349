"""
moto-admin CLI — `moto-admin` command.

Commands:
  moto-admin auth login|status|logout|validate
  moto-admin dashboard
  moto-admin users list|show|membership
  moto-admin orders list|show|status
  moto-admin products list
  moto-admin parts create|show|update|delete
  moto-admin merchandise create|show|update|delete
  moto-admin brands|manufacturers|categories list|create|update|delete
  moto-admin models <make>
  moto-admin feedback list|update
  moto-admin ambassadors list|status
  moto-admin partners list|create|update|delete
"""

from typing import Optional

import click

from moto_admin import __version__
from moto_admin.cli.auth import auth
from moto_admin.cli.catalog import brands, categories, manufacturers, models_cmd
from moto_admin.cli.dashboard import dashboard_cmd
from moto_admin.cli.engagement import ambassadors, feedback
from moto_admin.cli.orders import orders
from moto_admin.cli.partners import partners
from moto_admin.cli.products import merchandise, parts, products
from moto_admin.cli.users import users
from moto_admin.config import get_settings
from moto_admin.errors import ConfigError
from moto_admin.logging_utils import configure_logging


@click.group()
@click.version_option(__version__)
@click.option("--base-url", default=None, help="Admin API base URL (overrides MOTO_ADMIN_API_BASE_URL)")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, base_url: Optional[str], verbose: bool):
    """moto-admin — back-office console for the parts and merchandise store."""
    try:
        settings = get_settings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_json)
    ctx.obj = {"base_url": base_url}


main.add_command(auth)
main.add_command(dashboard_cmd)
main.add_command(users)
main.add_command(orders)
main.add_command(products)
main.add_command(parts)
main.add_command(merchandise)
main.add_command(brands)
main.add_command(manufacturers)
main.add_command(categories)
main.add_command(models_cmd)
main.add_command(feedback)
main.add_command(ambassadors)
main.add_command(partners)


if __name__ == "__main__":
    main()
