"""
Fake Store Implementations for Testing.

This package provides in-memory fake implementations of the store
interfaces for fast, isolated testing. No filesystem, database or
network required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection and call recording
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeLocalStore, create_remote_store

    local = FakeLocalStore()
    local.seed([workout])

    remote = create_remote_store(num_workouts=3)
"""
from datetime import datetime, timedelta, timezone
from typing import List

from domain.models import (
    ExerciseEntry,
    SetEntry,
    TemplateExercise,
    TemplateRecord,
    WorkoutRecord,
)
from tests.fakes.local_store import FakeLocalStore
from tests.fakes.remote_store import FakeRemoteStore


# =============================================================================
# Sample Data
# =============================================================================


def make_workouts(
    count: int,
    *,
    prefix: str = "w",
    start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc),
) -> List[WorkoutRecord]:
    """
    Build `count` workouts with ids `{prefix}1..{prefix}N`, one day apart.

    Args:
        count: Number of workouts
        prefix: Id prefix
        start: Date of the first workout
    """
    return [
        WorkoutRecord(
            id=f"{prefix}{i + 1}",
            modified_at=start + timedelta(days=i),
            display_name=f"Test Workout {i + 1}",
            exercises=[
                ExerciseEntry(
                    name="Squat",
                    sets=[SetEntry(weight=100, reps=5, completed=True)],
                )
            ],
        )
        for i in range(count)
    ]


def make_templates(count: int, *, prefix: str = "t") -> List[TemplateRecord]:
    """Build `count` templates with ids `{prefix}1..{prefix}N`."""
    return [
        TemplateRecord(
            id=f"{prefix}{i + 1}",
            name=f"Template {i + 1}",
            exercises=[
                TemplateExercise(
                    name="Bench Press",
                    target_sets=3,
                    target_reps_min=8,
                    target_reps_max=12,
                )
            ],
        )
        for i in range(count)
    ]


# =============================================================================
# Factory Functions
# =============================================================================


def create_local_store(
    *,
    num_workouts: int = 0,
    num_templates: int = 0,
) -> FakeLocalStore:
    """
    Create a FakeLocalStore with optional pre-populated records.

    Args:
        num_workouts: Number of sample workouts (ids w1..wN)
        num_templates: Number of sample templates (ids t1..tN)

    Returns:
        Pre-populated FakeLocalStore
    """
    store = FakeLocalStore()
    store.seed(make_workouts(num_workouts))
    store.seed(make_templates(num_templates))
    return store


def create_remote_store(
    *,
    num_workouts: int = 0,
    num_templates: int = 0,
) -> FakeRemoteStore:
    """
    Create a FakeRemoteStore with optional pre-populated records.

    Args:
        num_workouts: Number of sample workouts (ids w1..wN)
        num_templates: Number of sample templates (ids t1..tN)

    Returns:
        Pre-populated FakeRemoteStore
    """
    store = FakeRemoteStore()
    store.seed(make_workouts(num_workouts))
    store.seed(make_templates(num_templates))
    return store


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeLocalStore",
    "FakeRemoteStore",
    # Sample data
    "make_workouts",
    "make_templates",
    # Factory functions
    "create_local_store",
    "create_remote_store",
]
