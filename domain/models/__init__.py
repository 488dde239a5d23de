"""
Domain models for the Uplift sync core.

This package contains pure domain models that are independent of
infrastructure concerns (local persistence, remote stores).

These models represent the entities kept in sync:
- WorkoutRecord: A workout session (exercises with logged sets)
- TemplateRecord: A reusable plan (exercises with target sets/reps)
- EntityKind: Which of the two collections a record belongs to

Usage:
    >>> from domain.models import WorkoutRecord, TemplateRecord, TemplateExercise

    >>> template = TemplateRecord(
    ...     name="Push Day",
    ...     exercises=[
    ...         TemplateExercise(
    ...             name="Bench Press",
    ...             target_sets=3,
    ...             target_reps_min=8,
    ...             target_reps_max=12,
    ...         )
    ...     ],
    ... )
    >>> workout = WorkoutRecord.from_template(template)

    >>> # Serialize to JSON
    >>> json_str = workout.model_dump_json(indent=2)
"""

from domain.models.entity import Entity, EntityKind
from domain.models.sets import ExerciseEntry, SetEntry
from domain.models.template import TemplateExercise, TemplateRecord
from domain.models.workout import WorkoutRecord, utc_now

__all__ = [
    # Main entities
    "WorkoutRecord",
    "TemplateRecord",
    # Sub-records
    "ExerciseEntry",
    "SetEntry",
    "TemplateExercise",
    # Kinds
    "Entity",
    "EntityKind",
    "utc_now",
]
