# cpqsync/services/sync_service.py
"""
Shopify → XaitCPQ catalog sync.

One run logs in to XaitCPQ, reads a page of Shopify products, and creates a
XaitCPQ part for every variant SKU that does not exist yet. Variants are
processed sequentially in Shopify's listing order; the first occurrence of a
SKU within a run wins and later duplicates are dropped.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Set

from cpqsync.core.config import get_settings
from cpqsync.core.enums import SyncRunStatus
from cpqsync.core.exceptions import PartWriteError, PlatformServiceError
from cpqsync.schemas.shopify import ShopifyProduct, ShopifyVariant
from cpqsync.schemas.sync import SyncReport
from cpqsync.schemas.xait import XaitPart
from cpqsync.services.shopify.client import ShopifyRestClient
from cpqsync.services.sku_utils import normalize_sku, sku_key
from cpqsync.services.xait.auth import XaitAuthManager
from cpqsync.services.xait.client import XaitClient

logger = logging.getLogger(__name__)

# Field names XaitCPQ has used for a part's primary key
PART_ID_FIELDS = ("Id", "id", "PartId", "PartID")


def build_part(product: ShopifyProduct, part_number: str) -> XaitPart:
    return XaitPart(
        PartNumber=part_number,
        Name=product.title,
        Description=product.body_html or "",
        Active=True,
        Saleable=True,
    )


def _part_id(part: Dict[str, Any]) -> Optional[Any]:
    for field in PART_ID_FIELDS:
        if part.get(field) not in (None, ""):
            return part[field]
    return None


class CatalogSyncService:
    """
    Runs the one-way product sync.

    ``is_running`` guards against overlapping runs: a run started while
    another is in flight returns immediately with a skipped report.
    """

    def __init__(
        self,
        shopify_client: Optional[ShopifyRestClient] = None,
        xait_client: Optional[XaitClient] = None,
        auth_manager: Optional[XaitAuthManager] = None,
        update_existing: Optional[bool] = None,
    ):
        settings = get_settings()
        self.shopify_client = shopify_client or ShopifyRestClient()
        self.xait_client = xait_client or XaitClient()
        self.auth_manager = auth_manager or XaitAuthManager()
        self.update_existing = (
            settings.XAIT_UPDATE_EXISTING if update_existing is None else update_existing
        )
        self.is_running = False
        self.last_report: Optional[SyncReport] = None

    async def run_sync(self) -> SyncReport:
        # Must stay ahead of the first await
        if self.is_running:
            logger.warning("Sync already in progress; skipping this invocation.")
            return SyncReport(status=SyncRunStatus.SKIPPED)
        self.is_running = True

        report = SyncReport(started_at=datetime.now(timezone.utc))
        logger.info("Starting sync...")
        try:
            token = await self.auth_manager.authenticate()
            products = await self.shopify_client.get_products()
            report.products = len(products)

            processed: Set[str] = set()
            for product in products:
                for variant in product.variants:
                    report.variants += 1
                    await self._sync_variant(product, variant, token, processed, report)

            report.status = SyncRunStatus.COMPLETED
            logger.info(
                f"Sync complete: {report.created} created, {report.existing} existing, "
                f"{report.updated} updated, {report.duplicates} duplicates, "
                f"{report.skipped_blank} without SKU, {report.failed_writes} failed"
            )
        except PlatformServiceError as e:
            report.status = SyncRunStatus.FAILED
            report.error = getattr(e, "detail", None) or str(e)
            logger.error(f"Sync process failed: {report.error}")
        except Exception as e:
            report.status = SyncRunStatus.FAILED
            report.error = str(e)
            logger.exception(f"Sync process failed: {str(e)}")
        finally:
            report.finished_at = datetime.now(timezone.utc)
            self.last_report = report
            self.is_running = False

        return report

    async def _sync_variant(
        self, product: ShopifyProduct, variant: ShopifyVariant, token: str, processed: Set[str], report: SyncReport
    ) -> None:
        sku = normalize_sku(variant.sku, variant.id)
        if not sku:
            logger.warning(f"Variant {variant.id} for product {product.id} has no SKU; skipping.")
            report.skipped_blank += 1
            return

        key = sku_key(sku)
        if key in processed:
            logger.info(f"Skipping duplicate SKU in current run: {sku}")
            report.duplicates += 1
            return
        processed.add(key)

        part = build_part(product, sku)
        existing = await self.xait_client.find_part_by_sku(sku, token)

        if existing is not None:
            report.existing += 1
            if self.update_existing:
                await self._update_existing(existing, part, token, report)
            else:
                logger.info(f"Part exists, skipping add: {sku}")
            return

        try:
            await self.xait_client.add_part(part, token)
            report.created += 1
        except PartWriteError as e:
            report.failed_writes += 1
            logger.error(f"Failed to add part: {sku} {e.detail}")

    async def _update_existing(self, existing: Dict[str, Any], part: XaitPart, token: str, report: SyncReport) -> None:
        part_id = _part_id(existing)
        if part_id is None:
            logger.warning(f"Existing part {part.part_number} has no id; cannot update.")
            return
        try:
            await self.xait_client.update_part(part_id, part, token)
            report.updated += 1
        except PartWriteError as e:
            report.failed_writes += 1
            logger.error(f"Failed to update part: {part.part_number} {e.detail}")
