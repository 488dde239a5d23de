"""
Supabase implementation of RemoteStore.

The Supabase client is synchronous; each query runs in a worker thread
so it never blocks the event loop. Transient transport failures are
retried with exponential backoff and surface as RemoteUnavailable;
anything else surfaces as RemoteOperationFailed.
"""
import asyncio
import logging
from typing import Any, Callable, List, Optional

from supabase import Client

from application.exceptions import RemoteOperationFailed, RemoteUnavailable
from domain.models import Entity, EntityKind
from infrastructure.remote.records import entity_to_row, row_to_entity
from infrastructure.remote.retry import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_WAIT_SECONDS,
    DEFAULT_MIN_WAIT_SECONDS,
    is_transient_error,
    retry_unavailable,
)

logger = logging.getLogger(__name__)


class SupabaseRemoteStore:
    """
    Supabase implementation of RemoteStore protocol.

    All Supabase query logic for synced records is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(
        self,
        client: Client,
        *,
        workouts_table: str = "workout_sessions",
        templates_table: str = "workout_templates",
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
        max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    ):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            workouts_table: Table holding workout rows
            templates_table: Table holding template rows
            max_attempts: Attempts per call for transient failures
            min_wait_seconds: Minimum backoff between attempts
            max_wait_seconds: Maximum backoff between attempts
        """
        self._client = client
        self._tables = {
            EntityKind.WORKOUT: workouts_table,
            EntityKind.TEMPLATE: templates_table,
        }
        self._max_attempts = max_attempts
        self._min_wait_seconds = min_wait_seconds
        self._max_wait_seconds = max_wait_seconds

    async def fetch_all(self, kind: EntityKind) -> List[Entity]:
        """Fetch all rows of one kind, dropping rows that fail to decode."""
        table = self._tables[kind]

        def query():
            q = self._client.table(table).select("*")
            if kind is EntityKind.WORKOUT:
                q = q.order("date", desc=True)
            else:
                q = q.order("name")
            return q.execute()

        result = await self._execute(f"fetch {table}", query)
        rows = result.data if result.data else []

        records = []
        for row in rows:
            record = row_to_entity(kind, row)
            if record is not None:
                records.append(record)

        logger.info(f"Fetched {len(records)} {kind.value}s from Supabase ({len(rows)} rows)")
        return records

    async def save(self, entity: Entity, *, retry: bool = True) -> None:
        """Upsert a record keyed by id. With retry=False only one attempt is made."""
        table = self._tables[EntityKind.of(entity)]
        row = entity_to_row(entity)

        await self._execute(
            f"upsert {table}/{entity.id}",
            lambda: self._client.table(table).upsert(row, on_conflict="id").execute(),
            max_attempts=None if retry else 1,
        )
        logger.info(f"Saved {entity.id} to {table}")

    async def delete(self, kind: EntityKind, entity_id: str) -> None:
        """Delete a record by id."""
        table = self._tables[kind]

        result = await self._execute(
            f"delete {table}/{entity_id}",
            lambda: self._client.table(table).delete().eq("id", entity_id).execute(),
        )
        deleted_count = len(result.data) if result.data else 0
        if deleted_count == 0:
            logger.warning(f"No row with id {entity_id} in {table} (0 rows deleted)")
        else:
            logger.info(f"Deleted {entity_id} from {table}")

    async def _execute(
        self,
        description: str,
        call: Callable[[], Any],
        max_attempts: Optional[int] = None,
    ) -> Any:
        async def attempt():
            try:
                return await asyncio.to_thread(call)
            except Exception as e:
                if is_transient_error(e):
                    raise RemoteUnavailable(f"Supabase {description} unavailable: {e}") from e
                error_msg = str(e)
                if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
                    logger.error("RLS/Permissions error: check the Supabase key has access to the sync tables")
                raise RemoteOperationFailed(f"Supabase {description} failed: {e}") from e

        return await retry_unavailable(
            attempt,
            max_attempts=max_attempts or self._max_attempts,
            min_wait_seconds=self._min_wait_seconds,
            max_wait_seconds=self._max_wait_seconds,
        )
