"""
Merge engine: reconciles local and remote entity collections.

Both operations are pure (no I/O, no mutation of inputs) and cannot
fail. Policies per entity kind:
- Workouts: most recent `modified_at` wins; equal timestamps keep local.
- Templates: remote always wins.

Duplicate ids inside a single input collection resolve as "last write
wins" while seeding the id map.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from domain.models import Entity, EntityKind, TemplateRecord, WorkoutRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneSided:
    """Records present in only one of the two collections."""

    to_upload: List[Entity] = field(default_factory=list)
    to_download: List[Entity] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_upload and not self.to_download


class MergeEngine:
    """
    Stateless set-reconciliation over two keyed collections.

    Usage:
        >>> engine = MergeEngine()
        >>> merged = engine.merge_workouts(local_workouts, cloud_workouts)
        >>> one_sided = engine.find_one_sided(local_workouts, cloud_workouts)
        >>> one_sided.to_download  # cloud-only records
    """

    def merge(
        self,
        kind: EntityKind,
        local: Sequence[Entity],
        cloud: Sequence[Entity],
    ) -> List[Entity]:
        """Merge using the policy registered for `kind`."""
        if kind is EntityKind.WORKOUT:
            return self.merge_workouts(local, cloud)
        return self.merge_templates(local, cloud)

    def merge_workouts(
        self,
        local: Sequence[WorkoutRecord],
        cloud: Sequence[WorkoutRecord],
    ) -> List[WorkoutRecord]:
        """
        Merge workouts, keeping the most recently modified copy of each id.

        Args:
            local: Workouts from the local store
            cloud: Workouts from the remote store

        Returns:
            One record per id, ordered by modified_at descending
        """
        logger.debug(f"Merging workouts - local: {len(local)}, cloud: {len(cloud)}")

        merged: Dict[str, WorkoutRecord] = {w.id: w for w in local}

        for cloud_workout in cloud:
            local_workout = merged.get(cloud_workout.id)
            if local_workout is None:
                logger.debug(f"Adding cloud-only workout {cloud_workout.id}")
                merged[cloud_workout.id] = cloud_workout
            elif cloud_workout.modified_at > local_workout.modified_at:
                logger.debug(f"Cloud version newer for workout {cloud_workout.id}")
                merged[cloud_workout.id] = cloud_workout

        # sorted() is stable with reverse=True, so ties keep map order
        result = sorted(merged.values(), key=lambda w: w.modified_at, reverse=True)
        logger.info(f"Workout merge complete - total: {len(result)}")
        return result

    def merge_templates(
        self,
        local: Sequence[TemplateRecord],
        cloud: Sequence[TemplateRecord],
    ) -> List[TemplateRecord]:
        """
        Merge templates; the cloud copy of an id always replaces the local one.

        Args:
            local: Templates from the local store
            cloud: Templates from the remote store

        Returns:
            One record per id, ordered by name ascending
        """
        logger.debug(f"Merging templates - local: {len(local)}, cloud: {len(cloud)}")

        merged: Dict[str, TemplateRecord] = {t.id: t for t in local}
        for cloud_template in cloud:
            merged[cloud_template.id] = cloud_template

        result = sorted(merged.values(), key=lambda t: t.name)
        logger.info(f"Template merge complete - total: {len(result)}")
        return result

    def find_one_sided(
        self,
        local: Sequence[Entity],
        cloud: Sequence[Entity],
    ) -> OneSided:
        """
        Find records missing from one side.

        Only absence is detected, staleness is the merge's concern.

        Returns:
            OneSided with local-only records in `to_upload` and cloud-only
            records in `to_download`, each in input order
        """
        cloud_ids = {e.id for e in cloud}
        local_ids = {e.id for e in local}

        to_upload = [e for e in local if e.id not in cloud_ids]
        to_download = [e for e in cloud if e.id not in local_ids]

        if to_upload:
            logger.debug(f"Found {len(to_upload)} records to upload")
        if to_download:
            logger.debug(f"Found {len(to_download)} records to download")

        return OneSided(to_upload=to_upload, to_download=to_download)
