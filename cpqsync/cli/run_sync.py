# cpqsync/cli/run_sync.py
import asyncio
import logging
import click
from datetime import datetime

from cpqsync.core.enums import SyncRunStatus
from cpqsync.core.logging_config import configure_logging
from cpqsync.services.sync_service import CatalogSyncService

logger = logging.getLogger(__name__)

@click.command()
@click.option('--update-existing', is_flag=True, help='Update parts that already exist on XaitCPQ instead of skipping them')
def run_sync(update_existing):
    """Run one Shopify → XaitCPQ sync and print the counters"""
    configure_logging()

    start_time = datetime.now()
    logger.info(f"Starting sync at {start_time}")

    service = CatalogSyncService(update_existing=True if update_existing else None)
    report = asyncio.run(service.run_sync())

    logger.info(f"Completed sync in {datetime.now() - start_time}")
    click.echo(f"Status: {report.status.value}")
    click.echo(f"Products: {report.products}  Variants: {report.variants}")
    click.echo(f"Created: {report.created}  Existing: {report.existing}  Updated: {report.updated}")
    click.echo(f"Duplicates: {report.duplicates}  Without SKU: {report.skipped_blank}  Failed writes: {report.failed_writes}")
    if report.error:
        click.echo(f"Error: {report.error}")

    if report.status == SyncRunStatus.FAILED:
        raise SystemExit(1)

if __name__ == '__main__':
    run_sync()
