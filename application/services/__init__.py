"""
Application services for the Uplift sync core.
"""

from application.services.sync_repository import (
    FetchResult,
    Listener,
    ReconciliationReport,
    SyncEvent,
    SyncRepository,
)

__all__ = [
    "FetchResult",
    "Listener",
    "ReconciliationReport",
    "SyncEvent",
    "SyncRepository",
]
