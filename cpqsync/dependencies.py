from functools import lru_cache

from cpqsync.services.sync_service import CatalogSyncService


@lru_cache()
def get_sync_service() -> CatalogSyncService:
    """Process-wide sync service, shared by the scheduler and the HTTP routes."""
    return CatalogSyncService()
