"""
Entity kinds flowing through the sync core.
"""

from enum import Enum
from typing import Union

from domain.models.template import TemplateRecord
from domain.models.workout import WorkoutRecord

Entity = Union[WorkoutRecord, TemplateRecord]


class EntityKind(str, Enum):
    """The two entity collections kept in sync."""

    WORKOUT = "workout"
    TEMPLATE = "template"

    @classmethod
    def of(cls, entity: Entity) -> "EntityKind":
        """
        Resolve the kind of a record.

        Raises:
            TypeError: If the object is not a sync entity.
        """
        if isinstance(entity, WorkoutRecord):
            return cls.WORKOUT
        if isinstance(entity, TemplateRecord):
            return cls.TEMPLATE
        raise TypeError(f"Unsupported entity type: {type(entity).__name__}")

    @property
    def record_type(self) -> type:
        return WorkoutRecord if self is EntityKind.WORKOUT else TemplateRecord
