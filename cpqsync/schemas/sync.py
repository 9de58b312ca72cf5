"""
Schemas for sync run reporting and the debug lookup endpoint.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel

from cpqsync.core.enums import SyncRunStatus


class SyncReport(BaseModel):
    status: SyncRunStatus = SyncRunStatus.COMPLETED
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    products: int = 0
    variants: int = 0
    created: int = 0
    existing: int = 0
    updated: int = 0
    skipped_blank: int = 0
    duplicates: int = 0
    failed_writes: int = 0
    error: Optional[Any] = None


class SkuCheckResponse(BaseModel):
    sku: str
    found: bool
    part: Optional[Dict[str, Any]] = None
