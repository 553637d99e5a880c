"""
Workout analyzer.

Provides functions for breaking down, ranking and comparing workout
volume. Every function takes the workout it analyzes and returns a fresh
result; nothing is cached between calls.
"""

import logging
from typing import List, Dict, Tuple
from collections import defaultdict

from .errors import EmptyWorkoutError
from .models import (
    Exercise,
    Workout,
    MuscleCategory,
    WorkoutSummary,
    WorkoutComparison,
)


logger = logging.getLogger(__name__)

SPLIT_CATEGORIES = (MuscleCategory.PUSH, MuscleCategory.PULL, MuscleCategory.LEGS)


def _require_exercises(workout: Workout) -> None:
    if not workout.exercises:
        raise EmptyWorkoutError(f"Workout '{workout.name}' has no exercises")


def volume_breakdown(workout: Workout) -> List[Tuple[Exercise, float]]:
    """
    Calculate each exercise's share of total workout volume.

    Parameters:
        workout: Workout to analyze.

    Returns:
        (exercise, fraction) pairs in insertion order. Empty when the
        workout has no volume.
    """
    total = workout.total_volume
    if total == 0:
        return []
    return [(e, e.volume / total) for e in workout.exercises]


def _ranked_shares(workout: Workout) -> List[Tuple[Exercise, float]]:
    # every exercise is ranked; shares are 0.0 without volume
    total = workout.total_volume
    return [(e, e.volume / total if total else 0.0) for e in workout.exercises]


def top_n(workout: Workout, n: int) -> List[Tuple[Exercise, float]]:
    """
    Rank exercises by volume, largest first.

    Ties keep insertion order. Returns min(n, size) entries; shares
    are 0.0 when the workout has no volume.

    Raises:
        EmptyWorkoutError: If the workout has no exercises.
        ValueError: If n is negative.
    """
    _require_exercises(workout)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    # sorted() is stable, also with reverse=True
    ranked = sorted(_ranked_shares(workout), key=lambda x: x[0].volume, reverse=True)
    return ranked[:n]


def bottom_n(workout: Workout, n: int) -> List[Tuple[Exercise, float]]:
    """
    Rank exercises by volume, smallest first.

    Ties keep insertion order. Returns an empty list for workouts with
    fewer than two exercises.

    Raises:
        EmptyWorkoutError: If the workout has no exercises.
        ValueError: If n is negative.
    """
    _require_exercises(workout)
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if workout.size < 2:
        return []

    ranked = sorted(_ranked_shares(workout), key=lambda x: x[0].volume)
    return ranked[:n]


def highest_volume_exercise(workout: Workout) -> Exercise:
    """Find the exercise with the most volume, first one wins on ties."""
    _require_exercises(workout)
    return max(workout.exercises, key=lambda e: e.volume)


def volume_percentage_split(workout: Workout) -> Dict[MuscleCategory, float]:
    """
    Calculate the push/pull/legs share of total workout volume.

    Volume from muscle groups outside the three categories is left out,
    so the fractions sum to less than 1 when such exercises exist.

    Returns:
        Fraction of total volume for PUSH, PULL and LEGS. All zero when
        the workout has no volume.
    """
    split = {category: 0.0 for category in SPLIT_CATEGORIES}
    total = workout.total_volume
    if total == 0:
        return split

    for exercise in workout.exercises:
        category = exercise.category
        if category in split:
            split[category] += exercise.volume

    # cap each share by what is left so float rounding never pushes the sum past 1
    fractions = {}
    used = 0.0
    for category, volume in split.items():
        fraction = min(volume / total, max(0.0, 1.0 - used))
        fractions[category] = fraction
        used += fraction

    return fractions


def volume_by_muscle_group(workout: Workout) -> Dict[str, float]:
    """Calculate total volume per muscle group, largest first."""
    volume_by_group: Dict[str, float] = defaultdict(float)

    for exercise in workout.exercises:
        volume_by_group[exercise.muscle_group] += exercise.volume

    return dict(sorted(volume_by_group.items(), key=lambda x: x[1], reverse=True))


def summarize_workout(workout: Workout) -> WorkoutSummary:
    """Calculate aggregate statistics for a workout."""
    _require_exercises(workout)

    return WorkoutSummary(
        name=workout.name,
        exercise_count=workout.size,
        total_sets=workout.total_sets,
        total_reps=workout.total_reps,
        total_volume=workout.total_volume,
        highest_volume_exercise=highest_volume_exercise(workout),
    )


def compare_workouts(a: Workout, b: Workout) -> WorkoutComparison:
    """
    Compare the exercises and total volume of two workouts.

    Exercise names are matched exactly, including case.

    Parameters:
        a: First workout.
        b: Second workout.

    Returns:
        Comparison with shared and unique exercise names and both totals.
    """
    names_a = frozenset(a.exercise_names)
    names_b = frozenset(b.exercise_names)

    comparison = WorkoutComparison(
        name_a=a.name,
        name_b=b.name,
        volume_a=a.total_volume,
        volume_b=b.total_volume,
        common_exercises=names_a & names_b,
        unique_to_a=names_a - names_b,
        unique_to_b=names_b - names_a,
    )
    logger.debug(
        f"Compared '{a.name}' and '{b.name}': "
        f"{len(comparison.common_exercises)} exercises in common"
    )
    return comparison
