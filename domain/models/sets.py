"""
Exercise and set sub-records carried inside a WorkoutRecord.

These are opaque to the sync engine: they travel through merges
unchanged and are only serialized by the store adapters.
"""

import uuid
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SetEntry(BaseModel):
    """A single logged set (weight x reps)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    weight: float = Field(default=0.0, ge=0, description="Weight lifted")
    reps: int = Field(default=0, ge=0, description="Repetitions performed")
    completed: bool = Field(default=False, description="Whether the set was completed")

    @property
    def volume(self) -> float:
        """Weight x reps for this set."""
        return self.weight * self.reps


class ExerciseEntry(BaseModel):
    """
    An exercise performed during a workout session.

    Examples:
        >>> entry = ExerciseEntry(
        ...     name="Bench Press",
        ...     sets=[SetEntry(weight=60, reps=8, completed=True)],
        ... )
        >>> entry.total_volume
        480.0
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, description="Exercise name")
    sets: List[SetEntry] = Field(default_factory=list)

    @property
    def total_sets(self) -> int:
        return len(self.sets)

    @property
    def completed_sets_count(self) -> int:
        return sum(1 for s in self.sets if s.completed)

    @property
    def total_volume(self) -> float:
        return sum(s.volume for s in self.sets)
