# cpqsync/cli/check_sku.py
import asyncio
import json
import logging
import click

from cpqsync.core.exceptions import AuthenticationError
from cpqsync.core.logging_config import configure_logging
from cpqsync.services.xait.auth import XaitAuthManager
from cpqsync.services.xait.client import XaitClient

logger = logging.getLogger(__name__)

async def lookup(sku):
    token = await XaitAuthManager().authenticate()
    return await XaitClient().find_part_by_sku(sku, token)

@click.command()
@click.argument('sku')
def check_sku(sku):
    """Look a single SKU up on XaitCPQ without creating anything"""
    configure_logging()

    sku = sku.strip()
    if not sku:
        raise click.BadParameter("SKU must not be blank", param_hint="SKU")

    try:
        part = asyncio.run(lookup(sku))
    except AuthenticationError as e:
        click.echo(f"Login failed: {e.detail}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps({"sku": sku, "found": part is not None, "part": part}, indent=2, default=str))

if __name__ == '__main__':
    check_sku()
