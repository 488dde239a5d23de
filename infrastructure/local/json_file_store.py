"""
JSON file implementation of LocalStore.

The whole store is one JSON document:

    {"workouts": [...], "templates": [...]}

Each write rewrites the document through a temporary file followed by
os.replace, so a crash never leaves a half-written store behind.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from application.exceptions import StorageError
from domain.models import Entity, EntityKind
from infrastructure.local.memory_store import sort_for_display

logger = logging.getLogger(__name__)

_SECTIONS = {
    EntityKind.WORKOUT: "workouts",
    EntityKind.TEMPLATE: "templates",
}


class JsonFileLocalStore:
    """
    Durable LocalStore persisted to a single JSON file.

    The file is read lazily on first access and cached; every save or
    delete writes the full document back.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize with the store file path.

        Args:
            path: JSON file location (created on first write)
        """
        self._path = Path(path)
        self._cache: Optional[Dict[EntityKind, Dict[str, Entity]]] = None

    @property
    def path(self) -> Path:
        return self._path

    def fetch_all(self, kind: EntityKind) -> List[Entity]:
        records = self._load()[kind]
        return sort_for_display(kind, list(records.values()))

    def save(self, entity: Entity) -> None:
        kind = EntityKind.of(entity)
        data = self._load()
        previous = data[kind].get(entity.id)
        data[kind][entity.id] = entity
        try:
            self._write(data)
        except StorageError:
            # keep the cache consistent with what is on disk
            if previous is None:
                data[kind].pop(entity.id, None)
            else:
                data[kind][entity.id] = previous
            raise

    def delete(self, kind: EntityKind, entity_id: str) -> None:
        data = self._load()
        previous = data[kind].pop(entity_id, None)
        if previous is None:
            return
        try:
            self._write(data)
        except StorageError:
            data[kind][entity_id] = previous
            raise

    # -------------------------------------------------------------------------
    # File I/O
    # -------------------------------------------------------------------------

    def _load(self) -> Dict[EntityKind, Dict[str, Entity]]:
        if self._cache is not None:
            return self._cache

        data: Dict[EntityKind, Dict[str, Entity]] = {kind: {} for kind in EntityKind}
        if not self._path.exists():
            logger.info(f"Local store {self._path} not found, starting empty")
            self._cache = data
            return data

        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
            for kind, section in _SECTIONS.items():
                for raw in document.get(section, []):
                    record = kind.record_type.model_validate(raw)
                    data[kind][record.id] = record
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            logger.error(f"Failed to read local store {self._path}: {e}")
            raise StorageError(f"Unreadable local store {self._path}: {e}") from e

        logger.info(
            f"Loaded local store {self._path}: "
            f"{len(data[EntityKind.WORKOUT])} workouts, {len(data[EntityKind.TEMPLATE])} templates"
        )
        self._cache = data
        return data

    def _write(self, data: Dict[EntityKind, Dict[str, Entity]]) -> None:
        document = {
            section: [record.model_dump(mode="json") for record in data[kind].values()]
            for kind, section in _SECTIONS.items()
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.error(f"Failed to write local store {self._path}: {e}")
            raise StorageError(f"Failed to write local store {self._path}: {e}") from e
