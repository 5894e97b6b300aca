"""Program structure operations.

Every operation takes a Document and returns an updated copy; the input is
never modified. Validation happens before any change so a rejected call has
no effect. Structural deletes never touch ``logs_by_date``.
"""

import copy
import logging
from enum import Enum

from ..errors import NotFoundError, ValidationError
from ..models.document import Document
from ..models.program import (
    BASELINE_NAME,
    BASELINE_WORKOUT_ID,
    DEFAULT_CATEGORY,
    Exercise,
    Workout,
)
from ..models.units import ExerciseUnit, Unit
from ..utils.exercise_utils import MAX_NAME_LENGTH, clean_name, find_best_match, names_equal
from ..utils.ids import new_id

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Reorder direction."""

    UP = "up"
    DOWN = "down"


def _validate_name(name: str | None, existing: list[str], kind: str) -> str:
    name = clean_name(name)
    if not name:
        raise ValidationError(f"{kind} name cannot be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"{kind} name must be at most {MAX_NAME_LENGTH} characters")
    for other in existing:
        if names_equal(other, name):
            raise ValidationError(f"{kind} '{other}' already exists")
    return name


def _all_ids(doc: Document) -> set[str]:
    ids = {w.id for w in doc.program.workouts}
    return ids | doc.program.exercise_ids()


def _workout(doc: Document, workout_id: str) -> Workout:
    workout = doc.program.get_workout(workout_id)
    if workout is None:
        raise NotFoundError(f"Workout '{workout_id}' not found")
    return workout


def _exercise(workout: Workout, exercise_id: str) -> Exercise:
    exercise = workout.get_exercise(exercise_id)
    if exercise is None:
        raise NotFoundError(f"Exercise '{exercise_id}' not found in workout '{workout.name}'")
    return exercise


def _resolve_unit(
    unit: "ExerciseUnit | Unit | str",
    abbreviation: str | None,
    allow_decimal: bool,
) -> ExerciseUnit:
    if isinstance(unit, ExerciseUnit):
        return unit
    return ExerciseUnit.parse(unit, abbreviation, allow_decimal)


def _swap(items: list, index: int, direction: Direction) -> int | None:
    """Index of the neighbor to swap with, or None at the edges."""
    target = index - 1 if direction == Direction.UP else index + 1
    if target < 0 or target >= len(items):
        return None
    return target


# ---------------------------------------------------------------------------
# Workouts
# ---------------------------------------------------------------------------


def add_workout(doc: Document, name: str, category: str | None = None) -> Document:
    """Append a new, empty workout."""
    name = _validate_name(name, [w.name for w in doc.program.workouts], "Workout")
    new = copy.deepcopy(doc)
    workout = Workout(
        id=new_id("w", _all_ids(doc)),
        name=name,
        category=clean_name(category) or DEFAULT_CATEGORY,
    )
    new.program.workouts.append(workout)
    logger.debug("Added workout %s (%s)", workout.id, workout.name)
    return new


def rename_workout(doc: Document, workout_id: str, name: str) -> Document:
    """Rename a workout (the baseline included)."""
    _workout(doc, workout_id)
    others = [w.name for w in doc.program.workouts if w.id != workout_id]
    name = _validate_name(name, others, "Workout")
    new = copy.deepcopy(doc)
    _workout(new, workout_id).name = name
    return new


def set_workout_category(doc: Document, workout_id: str, category: str | None) -> Document:
    """Set a workout's free-text category; blank restores the default."""
    _workout(doc, workout_id)
    new = copy.deepcopy(doc)
    workout = _workout(new, workout_id)
    default = BASELINE_NAME if workout.is_baseline else DEFAULT_CATEGORY
    workout.category = clean_name(category) or default
    return new


def delete_workout(doc: Document, workout_id: str) -> Document:
    """Remove a workout. Logged history for its exercises is kept."""
    if workout_id == BASELINE_WORKOUT_ID:
        raise ValidationError("Baseline cannot be deleted")
    _workout(doc, workout_id)
    new = copy.deepcopy(doc)
    new.program.workouts = [w for w in new.program.workouts if w.id != workout_id]
    logger.debug("Deleted workout %s", workout_id)
    return new


def reorder_workout(doc: Document, workout_id: str, direction: "Direction | str") -> Document:
    """Swap a workout with its neighbor. The baseline never moves."""
    direction = Direction(direction)
    if workout_id == BASELINE_WORKOUT_ID:
        raise ValidationError("Baseline position is fixed")
    workout = _workout(doc, workout_id)
    workouts = doc.program.workouts
    index = workouts.index(workout)
    target = _swap(workouts, index, direction)

    new = copy.deepcopy(doc)
    if target is None:
        return new
    if workouts[target].id == BASELINE_WORKOUT_ID:
        raise ValidationError("Workouts cannot be moved past the baseline")

    items = new.program.workouts
    items[index], items[target] = items[target], items[index]
    return new


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------


def add_exercise(
    doc: Document,
    workout_id: str,
    name: str,
    unit: "ExerciseUnit | Unit | str" = Unit.REPS,
    abbreviation: str | None = None,
    allow_decimal: bool = False,
) -> Document:
    """Append an exercise to a workout.

    A custom unit requires an abbreviation of at most 10 characters.
    """
    workout = _workout(doc, workout_id)
    name = _validate_name(name, [e.name for e in workout.exercises], "Exercise")
    resolved = _resolve_unit(unit, abbreviation, allow_decimal)

    new = copy.deepcopy(doc)
    exercise = Exercise(id=new_id("ex", _all_ids(doc)), name=name, unit=resolved)
    _workout(new, workout_id).exercises.append(exercise)
    logger.debug("Added exercise %s (%s) to %s", exercise.id, exercise.name, workout_id)
    return new


def rename_exercise(doc: Document, workout_id: str, exercise_id: str, name: str) -> Document:
    """Rename an exercise within its workout."""
    workout = _workout(doc, workout_id)
    _exercise(workout, exercise_id)
    others = [e.name for e in workout.exercises if e.id != exercise_id]
    name = _validate_name(name, others, "Exercise")

    new = copy.deepcopy(doc)
    _exercise(_workout(new, workout_id), exercise_id).name = name
    return new


def delete_exercise(doc: Document, workout_id: str, exercise_id: str) -> Document:
    """Remove an exercise from its workout. Logged history is kept."""
    _exercise(_workout(doc, workout_id), exercise_id)
    new = copy.deepcopy(doc)
    workout = _workout(new, workout_id)
    workout.exercises = [e for e in workout.exercises if e.id != exercise_id]
    logger.debug("Deleted exercise %s from %s", exercise_id, workout_id)
    return new


def reorder_exercise(
    doc: Document,
    workout_id: str,
    exercise_id: str,
    direction: "Direction | str",
) -> Document:
    """Swap an exercise with its neighbor; no-op at the edges."""
    direction = Direction(direction)
    workout = _workout(doc, workout_id)
    index = workout.exercises.index(_exercise(workout, exercise_id))
    target = _swap(workout.exercises, index, direction)

    new = copy.deepcopy(doc)
    if target is None:
        return new
    items = _workout(new, workout_id).exercises
    items[index], items[target] = items[target], items[index]
    return new


def change_exercise_unit(
    doc: Document,
    workout_id: str,
    exercise_id: str,
    unit: "ExerciseUnit | Unit | str",
    abbreviation: str | None = None,
    allow_decimal: bool = False,
) -> Document:
    """Change the unit an exercise is logged in. Existing logs are not converted."""
    _exercise(_workout(doc, workout_id), exercise_id)
    resolved = _resolve_unit(unit, abbreviation, allow_decimal)
    new = copy.deepcopy(doc)
    _exercise(_workout(new, workout_id), exercise_id).unit = resolved
    return new


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def find_exercise(doc: Document, exercise_id: str) -> tuple[Workout, Exercise] | None:
    """Find an exercise anywhere in the program by id."""
    for workout, exercise in doc.program.iter_exercises():
        if exercise.id == exercise_id:
            return workout, exercise
    return None


def find_exercise_by_name(
    doc: Document,
    name: str,
    workout_id: str | None = None,
    threshold: float = 0.8,
) -> tuple[Workout, Exercise] | None:
    """Find an exercise by id or (fuzzy) name.

    Args:
        doc: The document to search
        name: An exercise id or name; abbreviations like 'OHP' are expanded
        workout_id: Restrict the search to one workout
        threshold: Minimum similarity ratio for fuzzy matches

    Returns:
        (workout, exercise) or None
    """
    pairs = [
        (w, e)
        for w, e in doc.program.iter_exercises()
        if workout_id is None or w.id == workout_id
    ]
    for workout, exercise in pairs:
        if exercise.id == name:
            return workout, exercise

    index = find_best_match(name, [e.name for _, e in pairs], threshold=threshold)
    if index is None:
        return None
    return pairs[index]


def find_workout_by_name(doc: Document, name: str) -> Workout | None:
    """Find a workout by id or case-insensitive name."""
    for workout in doc.program.workouts:
        if workout.id == name or names_equal(workout.name, name):
            return workout
    return None
