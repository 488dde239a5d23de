"""
In-memory implementation of LocalStore.

Useful when no local store path is configured and as the default
backing for JsonFileLocalStore's cache.
"""
import logging
from typing import Dict, List

from domain.models import Entity, EntityKind

logger = logging.getLogger(__name__)


def sort_for_display(kind: EntityKind, records: List[Entity]) -> List[Entity]:
    """Workouts newest first, templates by name."""
    if kind is EntityKind.WORKOUT:
        return sorted(records, key=lambda w: w.modified_at, reverse=True)
    return sorted(records, key=lambda t: t.name)


class InMemoryLocalStore:
    """
    Dict-backed LocalStore.

    Records are frozen pydantic models, so they are stored and returned
    without copying.
    """

    def __init__(self) -> None:
        self._records: Dict[EntityKind, Dict[str, Entity]] = {
            kind: {} for kind in EntityKind
        }

    def fetch_all(self, kind: EntityKind) -> List[Entity]:
        return sort_for_display(kind, list(self._records[kind].values()))

    def save(self, entity: Entity) -> None:
        kind = EntityKind.of(entity)
        self._records[kind][entity.id] = entity
        logger.debug(f"Saved {kind.value} {entity.id} to memory")

    def delete(self, kind: EntityKind, entity_id: str) -> None:
        self._records[kind].pop(entity_id, None)
