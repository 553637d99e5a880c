"""Data models for strength workout tracking."""

import math
from dataclasses import dataclass, field, replace
from typing import Optional, List, FrozenSet
from enum import Enum

from .errors import ValidationError


class MuscleCategory(Enum):
    """Enumeration of muscle group categories used for split analysis."""

    PUSH = "Push"
    PULL = "Pull"
    LEGS = "Legs"
    OTHER = "Other"

    @classmethod
    def from_muscle_group(cls, muscle_group: str) -> "MuscleCategory":
        """Convert a free-text muscle group to its category."""
        mapping = {
            "push": cls.PUSH,
            "chest": cls.PUSH,
            "pecs": cls.PUSH,
            "shoulder": cls.PUSH,
            "shoulders": cls.PUSH,
            "delts": cls.PUSH,
            "front delts": cls.PUSH,
            "tricep": cls.PUSH,
            "triceps": cls.PUSH,
            "pull": cls.PULL,
            "back": cls.PULL,
            "upper back": cls.PULL,
            "lats": cls.PULL,
            "traps": cls.PULL,
            "rear delts": cls.PULL,
            "bicep": cls.PULL,
            "biceps": cls.PULL,
            "forearms": cls.PULL,
            "leg": cls.LEGS,
            "legs": cls.LEGS,
            "quads": cls.LEGS,
            "quadriceps": cls.LEGS,
            "hamstrings": cls.LEGS,
            "glutes": cls.LEGS,
            "calves": cls.LEGS,
            "hips": cls.LEGS,
            "adductors": cls.LEGS,
            "abductors": cls.LEGS,
        }
        return mapping.get(muscle_group.strip().lower(), cls.OTHER)


def _require_int(label: str, value, minimum: int) -> int:
    # bools are ints, reject them explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number, got {value!r}")
    if value < minimum:
        raise ValidationError(f"{label} must be at least {minimum}, got {value}")
    return value


@dataclass
class Exercise:
    """Represents one logged movement within a workout."""

    name: str
    sets: int
    reps: int
    weight: float
    muscle_group: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Exercise name must not be blank")
        if not any(ch.isalpha() for ch in self.name):
            raise ValidationError("Exercise name must contain at least one letter")
        if not isinstance(self.muscle_group, str) or not self.muscle_group.strip():
            raise ValidationError("Muscle group must not be blank")

        _require_int("Sets", self.sets, 1)
        _require_int("Reps", self.reps, 1)

        if isinstance(self.weight, bool) or not isinstance(self.weight, (int, float)):
            raise ValidationError(f"Weight must be a number, got {self.weight!r}")
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValidationError(f"Weight must be non-negative, got {self.weight}")
        self.weight = float(self.weight)

    @property
    def volume(self) -> float:
        """Calculate volume as sets × reps × weight."""
        return self.sets * self.reps * self.weight

    @property
    def category(self) -> MuscleCategory:
        """Push/pull/legs category of this exercise's muscle group."""
        return MuscleCategory.from_muscle_group(self.muscle_group)

    @classmethod
    def from_string(cls, exercise_str: str) -> "Exercise":
        """
        Parse exercise from comma-separated string.

        Expected format: "name,sets,reps,weight,muscle group".

        Raises:
            ValidationError: If the string is malformed or a value is out
                of range.
        """
        if not exercise_str or not exercise_str.strip():
            raise ValidationError("Exercise description is empty")

        parts = exercise_str.split(",")
        if len(parts) != 5:
            raise ValidationError(
                f"Expected 'name,sets,reps,weight,muscle group', got {exercise_str!r}"
            )

        try:
            sets = int(parts[1])
            reps = int(parts[2])
            weight = float(parts[3])
        except ValueError:
            raise ValidationError(
                f"Sets and reps must be whole numbers and weight a number: {exercise_str!r}"
            )

        return cls(
            name=parts[0].strip(),
            sets=sets,
            reps=reps,
            weight=weight,
            muscle_group=parts[4].strip(),
        )


@dataclass
class Workout:
    """Represents a named, ordered collection of exercises."""

    name: str
    exercises: List[Exercise] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Workout name must not be blank")

    def __len__(self) -> int:
        return len(self.exercises)

    @property
    def total_volume(self) -> float:
        """Calculate total volume across all exercises."""
        return sum(e.volume for e in self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(e.sets for e in self.exercises)

    @property
    def total_reps(self) -> int:
        return sum(e.reps for e in self.exercises)

    @property
    def size(self) -> int:
        """Count of exercises in this workout."""
        return len(self.exercises)

    @property
    def exercise_names(self) -> List[str]:
        return [e.name for e in self.exercises]

    def add_exercise(self, exercise: Exercise) -> None:
        """Append an exercise, keeping insertion order."""
        self.exercises.append(exercise)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.exercises):
            raise IndexError(
                f"Exercise index {index} out of range for workout "
                f"'{self.name}' with {len(self.exercises)} exercises"
            )

    def update_exercise(self, index: int, **changes) -> Exercise:
        """
        Replace fields of the exercise at a position.

        Parameters:
            index: Zero-based position, 0 <= index < size.
            changes: New values for any of name, sets, reps, weight,
                muscle_group.

        Returns:
            The updated exercise, stored back at the same position.

        Raises:
            IndexError: If index is out of range.
            TypeError: If an unknown field is given.
            ValidationError: If a new value breaks an exercise invariant.
        """
        self._check_index(index)
        updated = replace(self.exercises[index], **changes)
        self.exercises[index] = updated
        return updated

    def remove_exercise(self, index: int) -> Exercise:
        """Remove and return the exercise at a position."""
        self._check_index(index)
        return self.exercises.pop(index)


@dataclass
class WorkoutSummary:
    """Aggregated statistics for a single workout."""

    name: str
    exercise_count: int
    total_sets: int
    total_reps: int
    total_volume: float
    highest_volume_exercise: Exercise


@dataclass(frozen=True)
class WorkoutComparison:
    """Result of comparing the exercises and volume of two workouts."""

    name_a: str
    name_b: str
    volume_a: float
    volume_b: float
    common_exercises: FrozenSet[str] = frozenset()
    unique_to_a: FrozenSet[str] = frozenset()
    unique_to_b: FrozenSet[str] = frozenset()

    @property
    def volume_difference(self) -> float:
        """Absolute difference in total volume."""
        return abs(self.volume_a - self.volume_b)

    @property
    def larger(self) -> Optional[str]:
        """Which side had more volume: "a", "b", or None when equal."""
        if self.volume_a > self.volume_b:
            return "a"
        if self.volume_b > self.volume_a:
            return "b"
        return None

    @property
    def volume_difference_as_percent(self) -> Optional[float]:
        """
        Volume difference as a fraction of the smaller total.

        Returns 0.0 when both totals are zero and None when only the
        smaller total is zero, since no finite percentage exists.
        """
        smaller = min(self.volume_a, self.volume_b)
        if smaller == 0:
            return 0.0 if self.volume_difference == 0 else None
        return self.volume_difference / smaller
