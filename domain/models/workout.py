"""
WorkoutRecord - a logged (or planned) workout session.

The session date doubles as the recency signal used to resolve
conflicts between the local and remote copies of the same workout.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models.sets import ExerciseEntry, SetEntry
from domain.models.template import TemplateRecord


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WorkoutRecord(BaseModel):
    """
    Workout session entity.

    Records are immutable: domain methods return new instances via
    model_copy, and the merge engine only ever selects one of its input
    instances, never edits one.

    Examples:
        >>> from domain.models import WorkoutRecord, ExerciseEntry, SetEntry

        >>> workout = WorkoutRecord(
        ...     display_name="Push Day",
        ...     exercises=[
        ...         ExerciseEntry(
        ...             name="Bench Press",
        ...             sets=[SetEntry(weight=60, reps=8, completed=True)],
        ...         )
        ...     ],
        ... )
        >>> workout.total_volume
        480.0
    """

    model_config = ConfigDict(frozen=True)

    # Identity
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID), immutable once assigned",
    )

    # Recency signal (session date)
    modified_at: datetime = Field(
        default_factory=utc_now,
        description="Session date; the sole conflict tie-break signal",
    )

    # Payload
    display_name: Optional[str] = Field(
        default=None, description="Name of the template the session came from"
    )
    completed: bool = Field(default=False, description="Whether the session is finished")
    notes: Optional[str] = Field(default=None, description="Free-form notes")
    exercises: List[ExerciseEntry] = Field(default_factory=list)

    @field_validator("modified_at")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Interpret naive datetimes as UTC so all timestamps are comparable."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def total_volume(self) -> float:
        """Sum of weight x reps over every set."""
        return sum(ex.total_volume for ex in self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(ex.total_sets for ex in self.exercises)

    @property
    def completed_sets(self) -> int:
        return sum(ex.completed_sets_count for ex in self.exercises)

    @property
    def progress_percentage(self) -> float:
        """Fraction of sets completed, 0.0 when the session has no sets."""
        if self.total_sets == 0:
            return 0.0
        return self.completed_sets / self.total_sets

    @property
    def has_started(self) -> bool:
        return self.completed_sets > 0

    # -------------------------------------------------------------------------
    # Factories / Domain Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_template(
        cls,
        template: TemplateRecord,
        *,
        modified_at: Optional[datetime] = None,
    ) -> "WorkoutRecord":
        """
        Start a new session from a template.

        Each template exercise becomes an exercise entry with one empty
        set per target set.

        Args:
            template: Template to instantiate.
            modified_at: Session date (defaults to now).

        Returns:
            New, unsaved WorkoutRecord with a fresh id.
        """
        exercises = [
            ExerciseEntry(
                name=ex.name,
                sets=[SetEntry() for _ in range(ex.target_sets)],
            )
            for ex in template.exercises
        ]
        return cls(
            display_name=template.name,
            modified_at=modified_at or utc_now(),
            exercises=exercises,
        )

    def mark_completed(self, at: Optional[datetime] = None) -> "WorkoutRecord":
        """Return a completed copy, bumping the recency signal."""
        return self.model_copy(
            update={"completed": True, "modified_at": at or utc_now()}
        )

    def __str__(self) -> str:
        name = self.display_name or "Workout"
        return f'WorkoutRecord("{name}", {self.modified_at.isoformat()}, {self.total_sets} sets)'
