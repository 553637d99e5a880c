"""
Workout persistence.

Stores each workout as one JSON record in a configurable directory,
keyed by workout name. Saves go through a temporary file and an atomic
rename so a failed write never replaces a good record.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import quote, unquote

from .errors import (
    CorruptRecordError,
    NotFoundError,
    StorageIOError,
    ValidationError,
)
from .models import Exercise, Workout


logger = logging.getLogger(__name__)

RECORD_FORMAT = 1
RECORD_SUFFIX = ".json"
TEMP_PREFIX = ".tmp-"

EXERCISE_FIELDS = ("name", "sets", "reps", "weight", "muscle_group")


def _default_file_mode() -> int:
    """Permission bits a plainly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def workout_to_record(workout: Workout) -> Dict[str, Any]:
    """Convert a workout to its JSON-serializable record."""
    return {
        "format": RECORD_FORMAT,
        "name": workout.name,
        "exercises": [
            {
                "name": e.name,
                "sets": e.sets,
                "reps": e.reps,
                "weight": e.weight,
                "muscle_group": e.muscle_group,
            }
            for e in workout.exercises
        ],
    }


def workout_from_record(name: str, data: Any) -> Workout:
    """
    Rebuild a workout from a decoded record.

    Parameters:
        name: Workout name the record was stored under.
        data: Decoded JSON document.

    Returns:
        The reconstituted workout.

    Raises:
        CorruptRecordError: If the record is malformed in any way.
    """
    if not isinstance(data, dict):
        raise CorruptRecordError(name, f"Record for '{name}' is not an object")
    if data.get("format") != RECORD_FORMAT:
        raise CorruptRecordError(
            name, f"Record for '{name}' has unsupported format {data.get('format')!r}"
        )
    if data.get("name") != name:
        raise CorruptRecordError(
            name, f"Record for '{name}' names a different workout: {data.get('name')!r}"
        )

    items = data.get("exercises")
    if not isinstance(items, list):
        raise CorruptRecordError(name, f"Record for '{name}' has no exercise list")

    exercises = []
    for position, item in enumerate(items):
        if not isinstance(item, dict) or set(item) != set(EXERCISE_FIELDS):
            raise CorruptRecordError(
                name, f"Exercise {position} in '{name}' has the wrong fields"
            )
        weight = item["weight"]
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise CorruptRecordError(
                name, f"Exercise {position} in '{name}' has a non-numeric weight"
            )
        try:
            exercises.append(Exercise(**item))
        except ValidationError as e:
            raise CorruptRecordError(
                name, f"Exercise {position} in '{name}' is invalid: {e}"
            ) from e

    try:
        return Workout(name=name, exercises=exercises)
    except ValidationError as e:
        raise CorruptRecordError(name, f"Record for '{name}' is invalid: {e}") from e


class WorkoutStorage:
    """Saves, loads, lists and deletes workouts in a directory."""

    def __init__(self, root: Path):
        """
        Initialize storage rooted at a directory.

        Parameters:
            root: Directory holding workout records. Created on first save.
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _record_path(self, name: str) -> Path:
        """Map a workout name to its record file."""
        stem = quote(name, safe="")
        # keep names starting with "." from becoming hidden or temp files
        if stem.startswith("."):
            stem = "%2E" + stem[1:]
        return self._root / (stem + RECORD_SUFFIX)

    def exists(self, name: str) -> bool:
        return self._record_path(name).is_file()

    def save(self, workout: Workout) -> bool:
        """
        Save a workout, replacing any existing record with the same name.

        Parameters:
            workout: Workout to persist.

        Returns:
            True on success, False if the record could not be written.
        """
        record_path = self._record_path(workout.name)
        tmp_path = None

        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._root),
                prefix=TEMP_PREFIX,
                suffix=RECORD_SUFFIX,
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                json.dump(workout_to_record(workout), tmp_file, indent=2)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())

            # temp files are created 0600; give records the usual umask mode
            os.chmod(tmp_path, _default_file_mode())
            os.replace(tmp_path, record_path)
        except OSError as e:
            logger.error(f"Failed to save workout '{workout.name}': {e}")
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    logger.warning(f"Could not remove temporary file {tmp_path}")
            return False

        logger.info(f"Saved workout '{workout.name}' to {record_path}")
        return True

    def load(self, name: str) -> Workout:
        """
        Load a workout by name.

        Parameters:
            name: Workout name.

        Returns:
            The saved workout.

        Raises:
            NotFoundError: If no record exists for the name.
            CorruptRecordError: If the record cannot be parsed.
            StorageIOError: If the record cannot be read.
        """
        record_path = self._record_path(name)

        try:
            with open(record_path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise NotFoundError(name, f"No saved workout named '{name}'")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptRecordError(name, f"Record for '{name}' is not valid JSON: {e}")
        except OSError as e:
            raise StorageIOError(name, f"Could not read workout '{name}': {e}")

        workout = workout_from_record(name, data)
        logger.debug(f"Loaded workout '{name}' with {workout.size} exercises")
        return workout

    def list(self) -> List[str]:
        """
        List names of all saved workouts.

        Returns:
            Workout names ordered by record file name.
        """
        if not self._root.is_dir():
            return []

        names = []
        for path in sorted(self._root.glob("*" + RECORD_SUFFIX)):
            if path.name.startswith(TEMP_PREFIX) or not path.is_file():
                continue
            names.append(unquote(path.name[: -len(RECORD_SUFFIX)]))
        return names

    def delete(self, name: str) -> bool:
        """
        Delete a saved workout.

        Parameters:
            name: Workout name.

        Returns:
            True if the record was removed, False if it did not exist or
            could not be removed.
        """
        record_path = self._record_path(name)

        try:
            record_path.unlink()
        except FileNotFoundError:
            logger.warning(f"Cannot delete '{name}': no saved workout")
            return False
        except OSError as e:
            logger.error(f"Failed to delete workout '{name}': {e}")
            return False

        logger.info(f"Deleted workout '{name}'")
        return True
