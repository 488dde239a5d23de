"""
SyncRepository: single read/write facade over the local and remote stores.

Read path: local snapshot, then remote (failure degrades to local-only),
merge, return, then reconcile one-sided records in the background.
Write path: local first (authoritative, errors propagate), then remote
in the background (best-effort, errors logged and swallowed).

Background work is represented by asyncio tasks so callers can ignore
it while tests and shutdown code can await it (see `FetchResult` and
`drain()`).
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Set

from application.exceptions import (
    DeleteFailure,
    LocalStorageFailure,
    PartialReconciliationFailure,
    SaveFailure,
)
from application.ports import LocalStore, RemoteStore
from domain.models import Entity, EntityKind, TemplateRecord, WorkoutRecord
from domain.services import MergeEngine

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationReport:
    """Outcome of one background reconciliation pass."""

    kind: EntityKind
    uploaded: List[str] = field(default_factory=list)
    downloaded: List[str] = field(default_factory=list)
    failures: List[PartialReconciliationFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures


@dataclass
class FetchResult:
    """
    Merged records plus a handle on the reconciliation they triggered.

    Attributes:
        kind: Entity kind that was fetched
        records: Merged collection, in the kind's display order
        reconciliation: Task resolving to a ReconciliationReport
        remote_available: False when the remote fetch failed and the
            merge ran against an empty remote collection;
            reconciliation is skipped in that case
    """

    kind: EntityKind
    records: List[Entity]
    reconciliation: "asyncio.Task[ReconciliationReport]"
    remote_available: bool = True


@dataclass(frozen=True)
class SyncEvent:
    """Notification sent to subscribers after merged data changes."""

    kind: EntityKind
    action: str  # "fetched", "saved" or "deleted"
    records: Optional[List[Entity]] = None
    entity_id: Optional[str] = None


Listener = Callable[[SyncEvent], None]


class SyncRepository:
    """
    Coordinates LocalStore, RemoteStore and MergeEngine.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> repo = SyncRepository(local_store=local, remote_store=remote)
        >>> workouts = await repo.fetch_workouts()
        >>> await repo.save(workout)
        >>> await repo.drain()  # optional: wait for background sync
    """

    def __init__(
        self,
        local_store: LocalStore,
        remote_store: RemoteStore,
        merge_engine: Optional[MergeEngine] = None,
    ) -> None:
        """
        Initialize the repository with its collaborators.

        Args:
            local_store: On-device store (authoritative for writes)
            remote_store: Off-device store (best-effort)
            merge_engine: Merge policy implementation (default MergeEngine())
        """
        self._local = local_store
        self._remote = remote_store
        self._merge_engine = merge_engine or MergeEngine()
        self._background_tasks: Set[asyncio.Task] = set()
        self._listeners: List[Listener] = []

    # =========================================================================
    # Read Path
    # =========================================================================

    async def fetch_workouts(self) -> List[WorkoutRecord]:
        """Fetch merged workouts, most recent first."""
        result = await self.fetch(EntityKind.WORKOUT)
        return result.records

    async def fetch_templates(self) -> List[TemplateRecord]:
        """Fetch merged templates, ordered by name."""
        result = await self.fetch(EntityKind.TEMPLATE)
        return result.records

    async def fetch(self, kind: EntityKind) -> FetchResult:
        """
        Fetch and merge one entity kind, scheduling background reconciliation.

        Args:
            kind: Entity kind to fetch

        Returns:
            FetchResult with the merged records and the reconciliation task

        Raises:
            LocalStorageFailure: If the local store cannot be read
        """
        # Local snapshot is taken before the remote read begins
        local = self._read_local(kind)

        remote_available = True
        try:
            remote = list(await self._remote.fetch_all(kind))
        except Exception as e:
            logger.warning(f"Remote fetch of {kind.value}s failed, using local data only: {e}")
            remote = []
            remote_available = False

        merged = self._merge_engine.merge(kind, local, remote)

        reconciliation = self._spawn(
            self._reconcile(kind, local, remote, remote_available=remote_available),
            name=f"reconcile-{kind.value}",
        )

        self._notify(SyncEvent(kind=kind, action="fetched", records=list(merged)))

        return FetchResult(
            kind=kind,
            records=merged,
            reconciliation=reconciliation,
            remote_available=remote_available,
        )

    def _read_local(self, kind: EntityKind) -> List[Entity]:
        try:
            return list(self._local.fetch_all(kind))
        except Exception as e:
            logger.error(f"Local fetch of {kind.value}s failed: {e}")
            raise LocalStorageFailure(
                f"Failed to read {kind.value}s from local store: {e}", kind=kind
            ) from e

    # =========================================================================
    # Write Path
    # =========================================================================

    async def save(self, entity: Entity) -> None:
        """
        Save a workout or template.

        The local write completes before this returns; the remote write
        runs in the background and its failure is only logged.

        Raises:
            SaveFailure: If the local write fails
        """
        kind = EntityKind.of(entity)
        try:
            self._local.save(entity)
        except Exception as e:
            logger.error(f"Failed to save {kind.value} {entity.id} locally: {e}")
            cause = LocalStorageFailure(str(e), kind=kind)
            raise SaveFailure(kind, entity.id, cause) from e

        self._spawn(self._remote_save(kind, entity), name=f"remote-save-{entity.id}")
        self._notify(SyncEvent(kind=kind, action="saved", entity_id=entity.id))

    async def delete(self, entity: Entity) -> None:
        """
        Delete a workout or template.

        Raises:
            DeleteFailure: If the local delete fails
        """
        kind = EntityKind.of(entity)
        try:
            self._local.delete(kind, entity.id)
        except Exception as e:
            logger.error(f"Failed to delete {kind.value} {entity.id} locally: {e}")
            cause = LocalStorageFailure(str(e), kind=kind)
            raise DeleteFailure(kind, entity.id, cause) from e

        # If this fails the record still exists remotely and a later fetch
        # downloads it again. Accepted: there is no tombstone.
        self._spawn(self._remote_delete(kind, entity.id), name=f"remote-delete-{entity.id}")
        self._notify(SyncEvent(kind=kind, action="deleted", entity_id=entity.id))

    async def _remote_save(self, kind: EntityKind, entity: Entity) -> bool:
        try:
            await self._remote.save(entity)
            logger.debug(f"Saved {kind.value} {entity.id} to remote")
            return True
        except Exception as e:
            logger.warning(f"Remote save of {kind.value} {entity.id} failed (pending next sync): {e}")
            return False

    async def _remote_delete(self, kind: EntityKind, entity_id: str) -> bool:
        try:
            await self._remote.delete(kind, entity_id)
            logger.debug(f"Deleted {kind.value} {entity_id} from remote")
            return True
        except Exception as e:
            logger.warning(f"Remote delete of {kind.value} {entity_id} failed: {e}")
            return False

    # =========================================================================
    # Background Reconciliation
    # =========================================================================

    async def _reconcile(
        self,
        kind: EntityKind,
        local: Sequence[Entity],
        remote: Sequence[Entity],
        *,
        remote_available: bool = True,
    ) -> ReconciliationReport:
        report = ReconciliationReport(kind=kind)
        if not remote_available:
            # A failed fetch says nothing about which records are missing remotely
            logger.info(f"Skipping {kind.value} reconciliation, remote snapshot unavailable")
            return report

        one_sided = self._merge_engine.find_one_sided(local, remote)
        if one_sided.is_empty:
            return report

        await asyncio.gather(
            self._upload(kind, one_sided.to_upload, report),
            self._download(kind, one_sided.to_download, report),
        )

        if report.failures:
            logger.warning(
                f"Reconciliation of {kind.value}s finished with {len(report.failures)} failure(s)"
            )
        else:
            logger.info(
                f"Reconciled {kind.value}s: {len(report.uploaded)} uploaded, "
                f"{len(report.downloaded)} downloaded"
            )
        return report

    async def _upload(
        self,
        kind: EntityKind,
        entities: Sequence[Entity],
        report: ReconciliationReport,
    ) -> None:
        for entity in entities:
            try:
                await self._remote.save(entity, retry=False)
                report.uploaded.append(entity.id)
            except Exception as e:
                logger.warning(f"Upload of {kind.value} {entity.id} failed, skipping: {e}")
                report.failures.append(
                    PartialReconciliationFailure(kind, entity.id, "upload", str(e))
                )

    async def _download(
        self,
        kind: EntityKind,
        entities: Sequence[Entity],
        report: ReconciliationReport,
    ) -> None:
        for entity in entities:
            try:
                self._local.save(entity)
                report.downloaded.append(entity.id)
            except Exception as e:
                logger.warning(f"Download of {kind.value} {entity.id} failed, skipping: {e}")
                report.failures.append(
                    PartialReconciliationFailure(kind, entity.id, "download", str(e))
                )

    # =========================================================================
    # Task Tracking
    # =========================================================================

    def _spawn(self, coro: Awaitable[Any], *, name: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        # Strong reference until done, otherwise the loop may drop the task
        self._background_tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._background_tasks.discard(task)
        if task.cancelled():
            logger.debug(f"Background task {task.get_name()} was cancelled")
        elif task.exception() is not None:
            logger.error(f"Background task {task.get_name()} crashed: {task.exception()}")

    @property
    def pending_tasks(self) -> int:
        """Number of background tasks still running."""
        return len(self._background_tasks)

    async def drain(self) -> List[Any]:
        """
        Wait for all outstanding background work, including tasks spawned
        while draining.

        Returns:
            Results of the awaited tasks (exceptions are returned, not raised)
        """
        results: List[Any] = []
        while self._background_tasks:
            batch = list(self._background_tasks)
            results.extend(await asyncio.gather(*batch, return_exceptions=True))
            # done callbacks run on the next loop iteration
            for task in batch:
                self._background_tasks.discard(task)
        return results

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener notified after merged data changes.

        Args:
            listener: Callable receiving a SyncEvent

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: SyncEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Sync listener failed for {event.kind.value} {event.action}: {e}")
