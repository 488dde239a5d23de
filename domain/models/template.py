"""
TemplateRecord - a reusable workout plan.

Templates are merged with a remote-wins policy and sorted by name.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemplateExercise(BaseModel):
    """
    Exercise prescription inside a template.

    Examples:
        >>> ex = TemplateExercise(name="Squat", target_sets=3, target_reps_min=8, target_reps_max=12)
        >>> ex.display_string
        '3 sets x 8-12 reps'
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, description="Exercise name")
    target_sets: int = Field(..., ge=0, description="Number of prescribed sets")
    target_reps_min: int = Field(..., ge=0, description="Lower bound of the rep range")
    target_reps_max: int = Field(..., ge=0, description="Upper bound of the rep range")
    notes: Optional[str] = Field(default=None, description="Coaching notes")

    @model_validator(mode="after")
    def validate_rep_range(self) -> "TemplateExercise":
        """Ensure the rep range is not inverted."""
        if self.target_reps_min > self.target_reps_max:
            raise ValueError("target_reps_min cannot exceed target_reps_max")
        return self

    @property
    def target_reps_display(self) -> str:
        if self.target_reps_min == self.target_reps_max:
            return str(self.target_reps_min)
        return f"{self.target_reps_min}-{self.target_reps_max}"

    @property
    def display_string(self) -> str:
        return f"{self.target_sets} sets x {self.target_reps_display} reps"


class TemplateRecord(BaseModel):
    """
    Workout template entity.

    Identity is the `id` field; `name` is used as the sort key when local
    and remote template collections are merged.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier (UUID), immutable once assigned",
    )
    name: str = Field(..., description="Template name")
    exercises: List[TemplateExercise] = Field(default_factory=list)

    @property
    def total_exercises(self) -> int:
        """Number of exercises in the template."""
        return len(self.exercises)

    @property
    def estimated_duration(self) -> int:
        """
        Rough duration estimate in minutes.

        Three minutes per set plus two minutes per exercise for transitions.
        """
        total_sets = sum(ex.target_sets for ex in self.exercises)
        return total_sets * 3 + len(self.exercises) * 2

    def __str__(self) -> str:
        return f'TemplateRecord("{self.name}", {self.total_exercises} exercises)'
