"""
Unit tests for the MergeEngine.

Tests for:
- Workout merge (newest wins, local wins ties, descending order)
- Template merge (remote wins, ascending name order)
- One-sided detection
"""

from datetime import datetime, timedelta, timezone

import pytest

pytestmark = pytest.mark.unit

from domain.models import EntityKind, TemplateRecord, WorkoutRecord
from domain.services import MergeEngine


T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def workout(id: str, day: int = 0, name: str = None) -> WorkoutRecord:
    return WorkoutRecord(id=id, modified_at=T0 + timedelta(days=day), display_name=name)


def template(id: str, name: str) -> TemplateRecord:
    return TemplateRecord(id=id, name=name)


@pytest.fixture
def engine() -> MergeEngine:
    return MergeEngine()


# =============================================================================
# Workouts
# =============================================================================


class TestMergeWorkouts:
    """Tests for MergeEngine.merge_workouts()."""

    def test_cloud_newer_wins(self, engine: MergeEngine):
        local = workout("1", day=0, name="local")
        cloud = workout("1", day=1, name="cloud")

        result = engine.merge_workouts([local], [cloud])

        assert result == [cloud]
        assert result[0] is cloud

    def test_local_newer_wins(self, engine: MergeEngine):
        local = workout("1", day=2, name="local")
        cloud = workout("1", day=1, name="cloud")

        result = engine.merge_workouts([local], [cloud])

        assert result[0] is local

    def test_equal_timestamps_keep_local(self, engine: MergeEngine):
        local = workout("1", day=0, name="local")
        cloud = workout("1", day=0, name="cloud")

        result = engine.merge_workouts([local], [cloud])

        assert len(result) == 1
        assert result[0] is local

    def test_local_only_records_unchanged(self, engine: MergeEngine):
        """Ids present only locally are returned as the exact local instance."""
        local_only = workout("L", day=3)
        result = engine.merge_workouts([local_only, workout("1")], [workout("1", day=1)])

        assert any(r is local_only for r in result)

    def test_cloud_only_records_added(self, engine: MergeEngine):
        cloud_only = workout("C", day=5)
        result = engine.merge_workouts([workout("1")], [cloud_only])

        assert {r.id for r in result} == {"1", "C"}

    def test_sorted_most_recent_first(self, engine: MergeEngine):
        local = [workout("a", day=1), workout("b", day=5)]
        cloud = [workout("c", day=3), workout("d", day=0)]

        result = engine.merge_workouts(local, cloud)

        assert [r.id for r in result] == ["b", "c", "a", "d"]
        dates = [r.modified_at for r in result]
        assert dates == sorted(dates, reverse=True)

    def test_ties_keep_map_order(self, engine: MergeEngine):
        """Equal timestamps keep local input order, then cloud-only order."""
        local = [workout("x", day=0), workout("y", day=0)]
        cloud = [workout("z", day=0), workout("x", day=0)]

        result = engine.merge_workouts(local, cloud)

        assert [r.id for r in result] == ["x", "y", "z"]

    def test_one_record_per_id(self, engine: MergeEngine):
        local = [workout(str(i), day=i) for i in range(5)]
        cloud = [workout(str(i), day=i + 1) for i in range(3, 8)]

        result = engine.merge_workouts(local, cloud)

        ids = [r.id for r in result]
        assert len(ids) == len(set(ids)) == 8

    def test_duplicate_local_ids_last_wins(self, engine: MergeEngine):
        first = workout("1", day=0, name="first")
        second = workout("1", day=0, name="second")

        result = engine.merge_workouts([first, second], [])

        assert result == [second]

    def test_idempotent(self, engine: MergeEngine):
        """Re-merging the merged result with the same inputs changes nothing."""
        local = [workout("1", day=0), workout("2", day=4)]
        cloud = [workout("1", day=2), workout("3", day=1)]

        once = engine.merge_workouts(local, cloud)
        again = engine.merge_workouts(once, cloud)

        assert [r.id for r in again] == [r.id for r in once]
        assert all(a is b for a, b in zip(again, once))
        assert engine.merge_workouts(local, cloud) == once

    def test_empty_inputs(self, engine: MergeEngine):
        assert engine.merge_workouts([], []) == []

    def test_inputs_not_mutated(self, engine: MergeEngine):
        local = [workout("1", day=0)]
        cloud = [workout("1", day=1)]
        local_copy, cloud_copy = list(local), list(cloud)

        engine.merge_workouts(local, cloud)

        assert local == local_copy
        assert cloud == cloud_copy


# =============================================================================
# Templates
# =============================================================================


class TestMergeTemplates:
    """Tests for MergeEngine.merge_templates()."""

    def test_remote_wins(self, engine: MergeEngine):
        result = engine.merge_templates([template("1", "A")], [template("1", "B")])

        assert len(result) == 1
        assert result[0].name == "B"

    def test_sorted_by_name(self, engine: MergeEngine):
        local = [template("1", "Pull"), template("2", "Legs")]
        cloud = [template("3", "Push"), template("4", "Arms")]

        result = engine.merge_templates(local, cloud)

        assert [t.name for t in result] == ["Arms", "Legs", "Pull", "Push"]

    def test_sort_is_case_sensitive(self, engine: MergeEngine):
        result = engine.merge_templates([template("1", "abs"), template("2", "Zumba")], [])

        assert [t.name for t in result] == ["Zumba", "abs"]

    def test_local_only_kept(self, engine: MergeEngine):
        local_only = template("L", "Local")
        result = engine.merge_templates([local_only], [template("C", "Cloud")])

        assert local_only in result
        assert len(result) == 2


# =============================================================================
# One-sided detection
# =============================================================================


class TestFindOneSided:
    """Tests for MergeEngine.find_one_sided()."""

    def test_detects_both_directions(self, engine: MergeEngine):
        local = [workout("1"), workout("2")]
        cloud = [workout("2"), workout("3")]

        one_sided = engine.find_one_sided(local, cloud)

        assert [r.id for r in one_sided.to_upload] == ["1"]
        assert [r.id for r in one_sided.to_download] == ["3"]

    def test_ignores_staleness(self, engine: MergeEngine):
        """Same id with different timestamps is not one-sided."""
        one_sided = engine.find_one_sided([workout("1", day=0)], [workout("1", day=9)])
        assert one_sided.is_empty

    def test_works_for_templates(self, engine: MergeEngine):
        one_sided = engine.find_one_sided([template("1", "A")], [])
        assert [t.id for t in one_sided.to_upload] == ["1"]
        assert one_sided.to_download == []

    def test_idempotent(self, engine: MergeEngine):
        local = [workout("1"), workout("2")]
        cloud = [workout("2"), workout("3")]

        assert engine.find_one_sided(local, cloud) == engine.find_one_sided(local, cloud)


class TestMergeDispatch:
    """Tests for MergeEngine.merge() policy dispatch."""

    def test_workout_policy(self, engine: MergeEngine):
        local = workout("1", day=3)
        result = engine.merge(EntityKind.WORKOUT, [local], [workout("1", day=1)])
        assert result[0] is local

    def test_template_policy(self, engine: MergeEngine):
        cloud = template("1", "Cloud")
        result = engine.merge(EntityKind.TEMPLATE, [template("1", "Local")], [cloud])
        assert result[0] is cloud
