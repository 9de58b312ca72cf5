# cpqsync/routes/sync.py

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from cpqsync.dependencies import get_sync_service
from cpqsync.schemas.sync import SkuCheckResponse
from cpqsync.scheduler import get_scheduler_status
from cpqsync.services.sync_service import CatalogSyncService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["sync"])


@router.get("/sync-now", response_class=PlainTextResponse)
async def sync_now(service: CatalogSyncService = Depends(get_sync_service)):
    """Run one sync inline and reply once it has finished."""
    report = await service.run_sync()
    logger.info(f"Manual sync finished with status: {report.status.value}")
    return "Manual sync complete!"


@router.get("/check-sku")
async def check_sku(sku: str = "", service: CatalogSyncService = Depends(get_sync_service)):
    """Debug lookup of a single SKU on XaitCPQ; never creates anything."""
    sku = sku.strip()
    if not sku:
        return JSONResponse(status_code=400, content={"error": "Missing ?sku= parameter"})

    try:
        token = await service.auth_manager.authenticate()
        part = await service.xait_client.find_part_by_sku(sku, token)
        return SkuCheckResponse(sku=sku, found=part is not None, part=part)
    except Exception as e:
        logger.error(f"SKU check failed for {sku}: {str(e)}")
        return JSONResponse(status_code=500, content={"error": getattr(e, "detail", None) or str(e)})


@router.get("/api/sync/status")
async def sync_status(service: CatalogSyncService = Depends(get_sync_service)):
    last_report = service.last_report
    return {
        "running": service.is_running,
        "last_report": last_report.model_dump(mode="json") if last_report else None,
        "scheduler": get_scheduler_status(),
    }
