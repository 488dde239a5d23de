"""
RemoteStore used when cloud sync is disabled or not configured.

Every call fails with RemoteUnavailable, so the SyncRepository runs on
local data only.
"""
from typing import List

from application.exceptions import RemoteUnavailable
from domain.models import Entity, EntityKind


class DisabledRemoteStore:
    """RemoteStore that is never reachable."""

    def __init__(self, reason: str = "remote sync is disabled"):
        self.reason = reason

    async def fetch_all(self, kind: EntityKind) -> List[Entity]:
        raise RemoteUnavailable(self.reason)

    async def save(self, entity: Entity, *, retry: bool = True) -> None:
        raise RemoteUnavailable(self.reason)

    async def delete(self, kind: EntityKind, entity_id: str) -> None:
        raise RemoteUnavailable(self.reason)
