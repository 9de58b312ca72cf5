"""
Shared enums and constants used across the application.
"""

from enum import Enum, IntEnum


class SyncRunStatus(str, Enum):
    """Outcome of a single catalog sync run"""
    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


class ListFilterOperator(IntEnum):
    """Operator codes accepted by the XaitCPQ data list endpoint"""
    EQUALS = 0
    CONTAINS = 2
