"""
Row converters: domain records <-> remote table rows.

Workout rows:  id, template_name, date, is_completed, notes, exercises_json
Template rows: id, name, exercises_json

Sub-records are stored as a JSON string column. Decoding is lenient in
the same places the mobile client is: a row without its required field
is dropped, unparsable exercise JSON decodes to no exercises, and
individual malformed exercises are skipped.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from domain.models import (
    Entity,
    EntityKind,
    ExerciseEntry,
    TemplateExercise,
    TemplateRecord,
    WorkoutRecord,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _dump_items(items: List[BaseModel]) -> str:
    return json.dumps([item.model_dump(mode="json") for item in items])


def _load_items(raw: Any, model: Type[M], record_id: str) -> List[M]:
    if not raw:
        return []
    try:
        decoded = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid exercises JSON on record {record_id}: {e}")
        return []
    if not isinstance(decoded, list):
        logger.warning(f"Exercises JSON on record {record_id} is not a list")
        return []

    items = []
    for entry in decoded:
        try:
            items.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Skipping malformed exercise on record {record_id}: {e.error_count()} error(s)")
    return items


def workout_to_row(workout: WorkoutRecord) -> Dict[str, Any]:
    return {
        "id": workout.id,
        "template_name": workout.display_name,
        "date": workout.modified_at.isoformat(),
        "is_completed": workout.completed,
        "notes": workout.notes,
        "exercises_json": _dump_items(workout.exercises),
    }


def template_to_row(template: TemplateRecord) -> Dict[str, Any]:
    return {
        "id": template.id,
        "name": template.name,
        "exercises_json": _dump_items(template.exercises),
    }


def row_to_workout(row: Dict[str, Any]) -> Optional[WorkoutRecord]:
    """Convert a row to a WorkoutRecord, or None if the row is unusable."""
    record_id = row.get("id")
    if not record_id or not row.get("date"):
        logger.warning(f"Invalid workout row {record_id}: missing id or date")
        return None
    try:
        return WorkoutRecord(
            id=str(record_id),
            modified_at=row["date"],
            display_name=row.get("template_name") or None,
            completed=bool(row.get("is_completed", False)),
            notes=row.get("notes") or None,
            exercises=_load_items(row.get("exercises_json"), ExerciseEntry, record_id),
        )
    except ValidationError as e:
        logger.warning(f"Invalid workout row {record_id}: {e}")
        return None


def row_to_template(row: Dict[str, Any]) -> Optional[TemplateRecord]:
    """Convert a row to a TemplateRecord, or None if the row is unusable."""
    record_id = row.get("id")
    name = row.get("name")
    if not record_id or not isinstance(name, str):
        logger.warning(f"Invalid template row {record_id}: missing id or name")
        return None
    return TemplateRecord(
        id=str(record_id),
        name=name,
        exercises=_load_items(row.get("exercises_json"), TemplateExercise, record_id),
    )


def entity_to_row(entity: Entity) -> Dict[str, Any]:
    if EntityKind.of(entity) is EntityKind.WORKOUT:
        return workout_to_row(entity)
    return template_to_row(entity)


def row_to_entity(kind: EntityKind, row: Dict[str, Any]) -> Optional[Entity]:
    if kind is EntityKind.WORKOUT:
        return row_to_workout(row)
    return row_to_template(row)
