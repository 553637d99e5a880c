"""
Tests for workout analyzer.

Tests volume breakdowns, rankings, push/pull/legs splits and
workout comparison.
"""

import random

import pytest

from liftlog.analyzer import (
    volume_breakdown,
    top_n,
    bottom_n,
    highest_volume_exercise,
    volume_percentage_split,
    volume_by_muscle_group,
    summarize_workout,
    compare_workouts,
)
from liftlog.errors import EmptyWorkoutError
from liftlog.models import Exercise, Workout, MuscleCategory


def _names(pairs):
    return [e.name for e, _ in pairs]


class TestVolumeBreakdown:
    """Tests for volume_breakdown."""

    def test_fractions(self, push_day):
        """Test each exercise gets its share of total volume."""
        breakdown = volume_breakdown(push_day)

        assert _names(breakdown) == ["Bench", "Squat"]
        assert breakdown[0][1] == pytest.approx(4320 / 8945)
        assert breakdown[1][1] == pytest.approx(4625 / 8945)
        assert sum(f for _, f in breakdown) == pytest.approx(1.0)

    def test_zero_volume_is_empty(self):
        """Test workouts without volume have no breakdown."""
        workout = Workout(
            name="Bodyweight",
            exercises=[Exercise(name="Push-up", sets=3, reps=20, weight=0, muscle_group="Push")],
        )
        assert volume_breakdown(workout) == []
        assert volume_breakdown(Workout(name="Empty")) == []

    def test_recomputed_per_workout(self, push_day, six_exercise_workout):
        """Test results never carry over between workouts."""
        volume_breakdown(six_exercise_workout)
        breakdown = volume_breakdown(push_day)

        assert _names(breakdown) == ["Bench", "Squat"]

        push_day.update_exercise(0, weight=0)
        assert volume_breakdown(push_day)[1][1] == pytest.approx(1.0)


class TestRankings:
    """Tests for top_n and bottom_n."""

    def test_top_n_descending(self, six_exercise_workout):
        """Test top exercises are sorted by volume, largest first."""
        top = top_n(six_exercise_workout, 3)

        assert _names(top) == ["Squat", "Deadlift", "Bench"]
        volumes = [e.volume for e, _ in top]
        assert volumes == sorted(volumes, reverse=True)
        assert top[0][1] == pytest.approx(5625 / 15870)

    def test_bottom_n_ascending(self, six_exercise_workout):
        """Test bottom exercises are sorted by volume, smallest first."""
        bottom = bottom_n(six_exercise_workout, 3)

        assert _names(bottom) == ["Plank", "Dip", "Curl"]

    def test_top_and_bottom_disjoint(self, six_exercise_workout):
        """Test top 3 and bottom 3 share no exercises with six exercises."""
        top = {id(e) for e, _ in top_n(six_exercise_workout, 3)}
        bottom = {id(e) for e, _ in bottom_n(six_exercise_workout, 3)}

        assert top.isdisjoint(bottom)

    def test_length_capped_by_size(self, push_day):
        """Test rankings never return more than the workout holds."""
        assert len(top_n(push_day, 5)) == 2
        assert len(bottom_n(push_day, 5)) == 2
        assert top_n(push_day, 0) == []

    def test_ties_keep_insertion_order(self):
        """Test equal volumes keep their original order both ways."""
        workout = Workout(
            name="Ties",
            exercises=[
                Exercise(name="A", sets=1, reps=10, weight=10, muscle_group="Push"),
                Exercise(name="B", sets=2, reps=5, weight=10, muscle_group="Pull"),
                Exercise(name="C", sets=1, reps=1, weight=500, muscle_group="Legs"),
                Exercise(name="D", sets=10, reps=1, weight=10, muscle_group="Legs"),
            ],
        )

        assert _names(top_n(workout, 4)) == ["C", "A", "B", "D"]
        assert _names(bottom_n(workout, 4)) == ["A", "B", "D", "C"]

    def test_zero_volume_workout_still_ranked(self):
        """Test bodyweight-only workouts rank every exercise with zero shares."""
        workout = Workout(
            name="Bodyweight",
            exercises=[
                Exercise(name="Pull-up", sets=3, reps=10, weight=0, muscle_group="Pull"),
                Exercise(name="Push-up", sets=3, reps=20, weight=0, muscle_group="Push"),
            ],
        )

        top = top_n(workout, 3)
        bottom = bottom_n(workout, 3)

        assert len(top) == min(3, workout.size)
        assert len(bottom) == min(3, workout.size)
        assert _names(top) == ["Pull-up", "Push-up"]
        assert _names(bottom) == ["Pull-up", "Push-up"]
        assert [f for _, f in top + bottom] == [0.0, 0.0, 0.0, 0.0]

    def test_bottom_n_needs_two_exercises(self):
        """Test bottom ranking is empty for a single exercise."""
        workout = Workout(
            name="Single",
            exercises=[Exercise(name="Squat", sets=5, reps=5, weight=225, muscle_group="Legs")],
        )

        assert bottom_n(workout, 3) == []
        assert _names(top_n(workout, 3)) == ["Squat"]

    def test_empty_workout_rejected(self):
        """Test ranking an empty workout is a contract violation."""
        empty = Workout(name="Empty")

        with pytest.raises(EmptyWorkoutError):
            top_n(empty, 3)
        with pytest.raises(EmptyWorkoutError):
            bottom_n(empty, 3)

    def test_negative_n_rejected(self, push_day):
        """Test negative counts raise ValueError."""
        with pytest.raises(ValueError):
            top_n(push_day, -1)
        with pytest.raises(ValueError):
            bottom_n(push_day, -1)


class TestHighestVolume:
    """Tests for highest_volume_exercise."""

    def test_push_day(self, push_day):
        """Test squat outweighs bench on push day."""
        assert highest_volume_exercise(push_day).name == "Squat"

    def test_first_wins_ties(self):
        """Test the first of equal maxima is returned."""
        workout = Workout(
            name="Ties",
            exercises=[
                Exercise(name="A", sets=1, reps=10, weight=10, muscle_group="Push"),
                Exercise(name="B", sets=10, reps=1, weight=10, muscle_group="Pull"),
            ],
        )
        assert highest_volume_exercise(workout).name == "A"

    def test_empty_workout_rejected(self):
        """Test highest volume of an empty workout raises."""
        with pytest.raises(EmptyWorkoutError):
            highest_volume_exercise(Workout(name="Empty"))


class TestVolumeSplit:
    """Tests for volume_percentage_split."""

    def test_push_day(self, push_day):
        """Test split of the push day scenario."""
        split = volume_percentage_split(push_day)

        assert set(split) == {MuscleCategory.PUSH, MuscleCategory.PULL, MuscleCategory.LEGS}
        assert split[MuscleCategory.PUSH] == pytest.approx(4320 / 8945)
        assert split[MuscleCategory.PUSH] == pytest.approx(0.483, abs=1e-3)
        assert split[MuscleCategory.PULL] == 0
        assert split[MuscleCategory.LEGS] == pytest.approx(0.517, abs=1e-3)
        assert sum(split.values()) == pytest.approx(1.0)

    def test_other_volume_excluded(self):
        """Test uncategorized volume lowers the sum below one."""
        workout = Workout(
            name="Mixed",
            exercises=[
                Exercise(name="Row", sets=1, reps=10, weight=100, muscle_group="Back"),
                Exercise(name="Carry", sets=1, reps=10, weight=100, muscle_group="Grip"),
            ],
        )
        split = volume_percentage_split(workout)

        assert split[MuscleCategory.PULL] == pytest.approx(0.5)
        assert MuscleCategory.OTHER not in split
        assert sum(split.values()) == pytest.approx(0.5)

    def test_fractions_bounded(self, six_exercise_workout):
        """Test each fraction lies in [0, 1] and the sum is at most one."""
        split = volume_percentage_split(six_exercise_workout)

        assert all(0 <= f <= 1 for f in split.values())
        assert sum(split.values()) <= 1

    def test_sum_never_exceeds_one(self):
        """Test rounding never pushes the split total above one."""
        rng = random.Random(1234)
        groups = ["Push", "Pull", "Legs"]

        for _ in range(500):
            workout = Workout(
                name="Random",
                exercises=[
                    Exercise(
                        name=f"Lift {i}",
                        sets=rng.randint(1, 6),
                        reps=rng.randint(1, 15),
                        weight=round(rng.uniform(0, 400), 1),
                        muscle_group=rng.choice(groups),
                    )
                    for i in range(rng.randint(1, 8))
                ],
            )
            split = volume_percentage_split(workout)
            total = workout.total_volume

            assert sum(split.values()) <= 1
            assert all(0 <= f <= 1 for f in split.values())
            if total:
                assert sum(split.values()) == pytest.approx(1.0)
                for category, fraction in split.items():
                    expected = sum(
                        e.volume for e in workout.exercises if e.category == category
                    )
                    assert fraction == pytest.approx(expected / total)

    def test_zero_volume(self):
        """Test empty workouts split to zeros."""
        split = volume_percentage_split(Workout(name="Empty"))
        assert list(split.values()) == [0.0, 0.0, 0.0]


class TestSummaries:
    """Tests for per-workout summaries."""

    def test_summarize_workout(self, push_day):
        """Test summary totals and highest exercise."""
        summary = summarize_workout(push_day)

        assert summary.name == "Push Day"
        assert summary.exercise_count == 2
        assert summary.total_sets == 9
        assert summary.total_reps == 13
        assert summary.total_volume == 8945
        assert summary.highest_volume_exercise.name == "Squat"

    def test_summarize_empty_rejected(self):
        """Test summaries need at least one exercise."""
        with pytest.raises(EmptyWorkoutError):
            summarize_workout(Workout(name="Empty"))

    def test_volume_by_muscle_group(self, six_exercise_workout):
        """Test raw volume per muscle group, largest first."""
        volumes = volume_by_muscle_group(six_exercise_workout)

        assert list(volumes)[:2] == ["Legs", "Back"]
        assert volumes["Chest"] == 4320
        assert volumes["Core"] == 0


class TestCompareWorkouts:
    """Tests for compare_workouts."""

    def _leg_day(self):
        return Workout(
            name="Leg Day",
            exercises=[
                Exercise(name="Squat", sets=5, reps=5, weight=225, muscle_group="Legs"),
                Exercise(name="Lunge", sets=3, reps=10, weight=50, muscle_group="Legs"),
            ],
        )

    def test_exercise_sets(self, push_day):
        """Test common and unique exercise names."""
        result = compare_workouts(push_day, self._leg_day())

        assert result.common_exercises == {"Squat"}
        assert result.unique_to_a == {"Bench"}
        assert result.unique_to_b == {"Lunge"}

    def test_volume_difference(self, push_day):
        """Test difference and percent against the smaller total."""
        leg_day = self._leg_day()
        result = compare_workouts(push_day, leg_day)

        assert result.volume_a == 8945
        assert result.volume_b == 5625 + 1500
        assert result.volume_difference == 8945 - 7125
        assert result.volume_difference_as_percent == pytest.approx(1820 / 7125)
        assert result.larger == "a"

    def test_symmetry(self, push_day):
        """Test swapping inputs swaps unique sets and the larger side."""
        leg_day = self._leg_day()
        forward = compare_workouts(push_day, leg_day)
        backward = compare_workouts(leg_day, push_day)

        assert forward.unique_to_a == backward.unique_to_b
        assert forward.unique_to_b == backward.unique_to_a
        assert forward.common_exercises == backward.common_exercises
        assert forward.volume_difference == backward.volume_difference
        assert forward.volume_difference_as_percent == backward.volume_difference_as_percent
        assert forward.larger == "a"
        assert backward.larger == "b"

    def test_names_case_sensitive(self):
        """Test exercise names must match exactly."""
        a = Workout(
            name="A",
            exercises=[Exercise(name="squat", sets=1, reps=1, weight=1, muscle_group="Legs")],
        )
        b = Workout(
            name="B",
            exercises=[Exercise(name="Squat", sets=1, reps=1, weight=1, muscle_group="Legs")],
        )
        result = compare_workouts(a, b)

        assert result.common_exercises == frozenset()
        assert result.larger is None

    def test_against_empty_workout(self):
        """Test comparing 1000 lbs with an empty workout leaves percent undefined."""
        a = Workout(
            name="A",
            exercises=[Exercise(name="Row", sets=1, reps=10, weight=100, muscle_group="Back")],
        )
        b = Workout(name="B")

        result = compare_workouts(a, b)

        assert result.volume_a == 1000
        assert result.volume_difference == 1000
        assert result.volume_difference_as_percent is None
        assert result.unique_to_a == {"Row"}
        assert result.unique_to_b == frozenset()
