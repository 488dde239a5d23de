"""
Domain layer for the Uplift sync core.

This package contains pure domain models and the merge engine, both
independent of infrastructure concerns (local storage, remote stores).
"""

from domain.models import (
    Entity,
    EntityKind,
    ExerciseEntry,
    SetEntry,
    TemplateExercise,
    TemplateRecord,
    WorkoutRecord,
)

__all__ = [
    "Entity",
    "EntityKind",
    "ExerciseEntry",
    "SetEntry",
    "TemplateExercise",
    "TemplateRecord",
    "WorkoutRecord",
]
