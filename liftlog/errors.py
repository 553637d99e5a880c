"""Exception types raised by the workout core."""


class LiftlogError(Exception):
    """Base class for all liftlog errors."""


class ValidationError(LiftlogError, ValueError):
    """Raised when an exercise or workout value is malformed or out of range."""


class EmptyWorkoutError(LiftlogError, ValueError):
    """Raised when a ranking query is made on a workout with no exercises."""


class WorkoutStorageError(LiftlogError):
    """Base class for persistence failures."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class NotFoundError(WorkoutStorageError):
    """No saved record exists for the requested workout name."""


class CorruptRecordError(WorkoutStorageError):
    """A saved record exists but cannot be parsed into a valid workout."""


class StorageIOError(WorkoutStorageError):
    """The underlying file system refused a read or write."""
