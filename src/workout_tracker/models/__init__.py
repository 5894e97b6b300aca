"""Data models for workout-tracker."""

from .document import SCHEMA_VERSION, Document, Meta
from .log import BODYWEIGHT, LogEntry, WorkoutSet
from .muscles import MUSCLE_KEYWORDS, MuscleGroup
from .program import BASELINE_WORKOUT_ID, Exercise, Program, Workout
from .units import CustomUnit, ExerciseUnit, Unit

__all__ = [
    "BASELINE_WORKOUT_ID",
    "BODYWEIGHT",
    "CustomUnit",
    "Document",
    "Exercise",
    "ExerciseUnit",
    "LogEntry",
    "Meta",
    "MUSCLE_KEYWORDS",
    "MuscleGroup",
    "Program",
    "SCHEMA_VERSION",
    "Unit",
    "Workout",
    "WorkoutSet",
]
