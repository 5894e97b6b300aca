"""Rolling summaries over the log.

Date ranges are inclusive and compared as strings; this is valid because
date keys are fixed-width and zero-padded.
"""

import math
from dataclasses import dataclass
from enum import Enum

from ..models.document import Document
from ..models.log import BODYWEIGHT
from ..models.units import ExerciseUnit
from ..utils.dates import (
    MONDAY,
    in_range,
    is_valid_date_key,
    start_of_month,
    start_of_week,
    start_of_year,
)
from .program_editor import find_exercise

NO_DATA = "-"
WEEK_START = MONDAY


class RangePreset(str, Enum):
    """Summary ranges ending at the selected date."""

    WTD = "wtd"
    MTD = "mtd"
    YTD = "ytd"


@dataclass(frozen=True)
class DateRange:
    """An inclusive range of date keys."""

    start: str
    end: str
    label: str = ""

    def contains(self, date_key: str) -> bool:
        return is_valid_date_key(date_key) and in_range(date_key, self.start, self.end)


@dataclass
class Summary:
    """Totals for one exercise over a range."""

    total_quantity: int | float = 0
    max_weight: float | str = NO_DATA  # number, "BW" or NO_DATA

    def format_max_weight(self) -> str:
        if isinstance(self.max_weight, float) and self.max_weight.is_integer():
            return str(int(self.max_weight))
        return str(self.max_weight)


@dataclass
class SummaryRow:
    """One exercise's line in a workout summary."""

    exercise_id: str
    name: str
    unit: ExerciseUnit
    summary: Summary


def range_for(preset: "RangePreset | str", date_key: str, week_start: int = WEEK_START) -> DateRange:
    """Resolve a WTD/MTD/YTD preset ending at date_key."""
    preset = RangePreset(preset)
    if preset == RangePreset.WTD:
        start = start_of_week(date_key, week_start)
    elif preset == RangePreset.MTD:
        start = start_of_month(date_key)
    else:
        start = start_of_year(date_key)
    return DateRange(start=start, end=date_key, label=preset.name)


def summarize(
    doc: Document,
    exercise_id: str,
    start_key: str,
    end_key: str,
    unit: ExerciseUnit | None = None,
) -> Summary:
    """Total quantity and maximum weight for an exercise over a range.

    Args:
        doc: The document to read
        exercise_id: Exercise to summarize
        start_key: First date key (inclusive)
        end_key: Last date key (inclusive)
        unit: Unit used for rounding; looked up in the program when omitted

    Returns:
        Summary with the numeric max weight if any numeric weight was logged,
        otherwise "BW" if any bodyweight set was logged, otherwise NO_DATA
    """
    if unit is None:
        found = find_exercise(doc, exercise_id)
        unit = found[1].unit if found else ExerciseUnit()

    total = 0.0
    max_numeric: float | None = None
    has_bodyweight = False

    for date_key, bucket in doc.logs_by_date.items():
        if not is_valid_date_key(date_key):
            continue
        if not in_range(date_key, start_key, end_key):
            continue

        entry = bucket.get(exercise_id)
        if entry is None:
            continue

        for workout_set in entry.sets:
            total += workout_set.quantity
            if workout_set.is_bodyweight:
                has_bodyweight = True
                continue
            weight = workout_set.numeric_weight
            if weight is not None:
                max_numeric = weight if max_numeric is None else max(max_numeric, weight)

    if unit.allows_decimal:
        total_quantity: int | float = round(total, 2)
    else:
        total_quantity = math.floor(total)

    if max_numeric is not None:
        max_weight: float | str = max_numeric
    elif has_bodyweight:
        max_weight = BODYWEIGHT
    else:
        max_weight = NO_DATA

    return Summary(total_quantity=total_quantity, max_weight=max_weight)


def summarize_workout(
    doc: Document,
    workout_id: str,
    preset: "RangePreset | str",
    date_key: str,
    week_start: int = WEEK_START,
) -> tuple[DateRange, list[SummaryRow]]:
    """Summarize every exercise of a workout over a preset range."""
    date_range = range_for(preset, date_key, week_start)
    workout = doc.program.get_workout(workout_id)
    if workout is None:
        return date_range, []

    rows = [
        SummaryRow(
            exercise_id=exercise.id,
            name=exercise.name,
            unit=exercise.unit,
            summary=summarize(doc, exercise.id, date_range.start, date_range.end, exercise.unit),
        )
        for exercise in workout.exercises
    ]
    return date_range, rows
