"""Shared fixtures for liftlog tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from liftlog.models import Exercise, Workout
from liftlog.storage import WorkoutStorage


@pytest.fixture
def push_day():
    """Two-exercise workout with known volume totals."""
    return Workout(
        name="Push Day",
        exercises=[
            Exercise(name="Bench", sets=4, reps=8, weight=135, muscle_group="Push"),
            Exercise(name="Squat", sets=5, reps=5, weight=185, muscle_group="Legs"),
        ],
    )


@pytest.fixture
def six_exercise_workout():
    """Workout with six distinct volumes, inserted out of order."""
    return Workout(
        name="Full Body",
        exercises=[
            Exercise(name="Curl", sets=3, reps=10, weight=30, muscle_group="Biceps"),
            Exercise(name="Deadlift", sets=3, reps=5, weight=315, muscle_group="Back"),
            Exercise(name="Dip", sets=3, reps=10, weight=10, muscle_group="Triceps"),
            Exercise(name="Squat", sets=5, reps=5, weight=225, muscle_group="Legs"),
            Exercise(name="Plank", sets=3, reps=1, weight=0, muscle_group="Core"),
            Exercise(name="Bench", sets=4, reps=8, weight=135, muscle_group="Chest"),
        ],
    )


@pytest.fixture
def storage(tmp_path):
    """Storage rooted in a fresh temporary directory."""
    return WorkoutStorage(tmp_path / "workouts")
