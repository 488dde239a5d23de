"""
Local Store Interface (Port).

This module defines the interface for the on-device store. It is
assumed always available and fast, so the interface is synchronous.
Implementations may use a JSON file, in-memory storage, or other
embedded backends.
"""
from typing import List, Protocol

from domain.models import Entity, EntityKind


class LocalStore(Protocol):
    """
    Abstract interface for the durable on-device collection of workouts
    and templates.

    All methods raise `application.exceptions.StorageError` on failure.
    """

    def fetch_all(self, kind: EntityKind) -> List[Entity]:
        """
        Fetch every stored record of one kind.

        Args:
            kind: Which collection to read

        Returns:
            All records of that kind
        """
        ...

    def save(self, entity: Entity) -> None:
        """
        Insert or update a record, keyed by its id.

        Args:
            entity: WorkoutRecord or TemplateRecord to persist
        """
        ...

    def delete(self, kind: EntityKind, entity_id: str) -> None:
        """
        Delete a record by id. Deleting a missing id is not an error.

        Args:
            kind: Which collection the record belongs to
            entity_id: Record UUID
        """
        ...
