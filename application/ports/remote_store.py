"""
Remote Store Interface (Port).

This module defines the interface for the off-device store. The remote
store is slow, sometimes unreachable and eventually consistent, so every
method is a coroutine and any call may fail.
"""
from typing import List, Protocol

from domain.models import Entity, EntityKind


class RemoteStore(Protocol):
    """
    Abstract interface for the remote collection of workouts and templates.

    Implementations raise `RemoteUnavailable` / `RemoteOperationFailed`
    (from `application.exceptions`) but callers must treat any exception
    as "call did not succeed". Timeouts are the implementation's concern.
    """

    async def fetch_all(self, kind: EntityKind) -> List[Entity]:
        """
        Fetch every remote record of one kind.

        Args:
            kind: Which collection to read

        Returns:
            All records of that kind
        """
        ...

    async def save(self, entity: Entity, *, retry: bool = True) -> None:
        """
        Upsert a record keyed by its id.

        Args:
            entity: WorkoutRecord or TemplateRecord to persist
            retry: When False, make a single attempt even for transient
                failures (background reconciliation never retries)
        """
        ...

    async def delete(self, kind: EntityKind, entity_id: str) -> None:
        """
        Delete a record by id.

        Args:
            kind: Which collection the record belongs to
            entity_id: Record UUID
        """
        ...
