"""
Application-layer exceptions for the sync core.

These exceptions are used across application and infrastructure layers.
Only local storage failures ever cross the SyncRepository boundary;
remote failures are absorbed and reconciled later.
"""

from dataclasses import dataclass
from typing import Optional

from domain.models import EntityKind


class SyncError(Exception):
    """Base class for every error raised by the sync core."""

    pass


class StorageError(Exception):
    """Raised by LocalStore adapters when a read or write fails."""

    pass


class LocalStorageFailure(SyncError):
    """The local store could not complete an operation.

    Fatal to the operation in progress; surfaced to the caller and never
    retried automatically.
    """

    def __init__(self, message: str, kind: Optional[EntityKind] = None):
        super().__init__(message)
        self.message = message
        self.kind = kind


class _WriteFailure(SyncError):
    """A save/delete did not succeed because the local write failed."""

    operation = "write"

    def __init__(self, kind: EntityKind, entity_id: str, cause: LocalStorageFailure):
        super().__init__(f"Failed to {self.operation} {kind.value} {entity_id}: {cause.message}")
        self.kind = kind
        self.entity_id = entity_id
        self.cause = cause


class SaveFailure(_WriteFailure):
    """save() failed; wraps the underlying LocalStorageFailure."""

    operation = "save"


class DeleteFailure(_WriteFailure):
    """delete() failed; wraps the underlying LocalStorageFailure."""

    operation = "delete"


class RemoteStoreError(SyncError):
    """Base class for errors raised by RemoteStore adapters."""

    pass


class RemoteUnavailable(RemoteStoreError):
    """The remote store could not be reached (network, timeout, disabled)."""

    pass


class RemoteOperationFailed(RemoteStoreError):
    """The remote store was reached but rejected or failed the operation."""

    pass


@dataclass(frozen=True)
class PartialReconciliationFailure:
    """
    One entity that failed to propagate during background reconciliation.

    Recorded, logged and skipped; never raised. A later fetch retries it
    implicitly.
    """

    kind: EntityKind
    entity_id: str
    direction: str  # "upload" or "download"
    error: str
