"""Per-date exercise log operations."""

import copy
import math
import re
from dataclasses import dataclass, field
from typing import Iterable

from ..errors import ValidationError
from ..models.document import Document
from ..models.log import BODYWEIGHT, LogEntry, WorkoutSet
from ..utils.dates import is_valid_date_key
from .program_editor import find_exercise


def default_set() -> WorkoutSet:
    """A freshly added set: zero reps at bodyweight."""
    return WorkoutSet(reps=0, weight=BODYWEIGHT)


@dataclass
class Draft:
    """Editable sets and notes for one (date, exercise) pair."""

    sets: list[WorkoutSet] = field(default_factory=list)
    notes: str = ""
    source: str = "empty"  # "existing", "previous" or "empty"


def find_previous_log(doc: Document, exercise_id: str, before_key: str) -> LogEntry | None:
    """Most recent entry for an exercise on a date strictly before before_key."""
    keys = [k for k in doc.logs_by_date if is_valid_date_key(k) and k < before_key]
    for date_key in sorted(keys, reverse=True):
        entry = doc.logs_by_date[date_key].get(exercise_id)
        if entry is not None:
            return entry
    return None


def open_draft_for(doc: Document, exercise_id: str, date_key: str) -> Draft:
    """Prepare a draft for logging an exercise on a date.

    Uses the entry for that date if one exists, otherwise carries forward the
    most recent earlier entry, otherwise starts with a single default set.
    """
    entry = doc.get_log(date_key, exercise_id)
    source = "existing"
    if entry is None:
        entry = find_previous_log(doc, exercise_id, date_key)
        source = "previous"
    if entry is None or not entry.sets:
        return Draft(sets=[default_set()], notes=entry.notes if entry else "", source="empty")

    sets = [
        WorkoutSet(
            reps=s.reps,
            weight=BODYWEIGHT if s.is_bodyweight else str(s.weight).strip(),
        )
        for s in entry.sets
    ]
    return Draft(sets=sets, notes=entry.notes, source=source)


def normalize_quantity(value, allow_decimal: bool) -> int | float:
    """Clamp to >= 0; floor unless decimals are allowed (then 2 places)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number <= 0:
        return 0
    if allow_decimal:
        number = round(number, 2)
        return int(number) if number.is_integer() else number
    return math.floor(number)


def normalize_weight(value) -> str:
    """'BW' (any case) stays 'BW'; anything else keeps only digits and dots."""
    text = str(value if value is not None else "").strip()
    if text.upper() == BODYWEIGHT:
        return BODYWEIGHT
    return re.sub(r"[^\d.]", "", text) or BODYWEIGHT


def save_log(
    doc: Document,
    date_key: str,
    exercise_id: str,
    sets: Iterable[WorkoutSet],
    notes: str = "",
) -> Document:
    """Store sets for an exercise on a date, replacing any prior entry.

    Sets with a non-positive quantity are dropped. If none remain, a single
    zero-rep bodyweight placeholder is stored so the entry still exists.
    """
    if not is_valid_date_key(date_key):
        raise ValidationError(f"Invalid date '{date_key}'. Use YYYY-MM-DD.")

    found = find_exercise(doc, exercise_id)
    allow_decimal = found[1].unit.allows_decimal if found else False

    cleaned = []
    for s in sets:
        reps = normalize_quantity(s.reps, allow_decimal)
        if reps > 0:
            cleaned.append(WorkoutSet(reps=reps, weight=normalize_weight(s.weight)))
    if not cleaned:
        cleaned = [default_set()]

    new = copy.deepcopy(doc)
    new.logs_by_date.setdefault(date_key, {})[exercise_id] = LogEntry(
        sets=cleaned, notes=notes or ""
    )
    return new


def delete_log(doc: Document, date_key: str, exercise_id: str) -> Document:
    """Remove the entry for a (date, exercise) pair if present."""
    new = copy.deepcopy(doc)
    bucket = new.logs_by_date.get(date_key)
    if bucket is None or exercise_id not in bucket:
        return new
    del bucket[exercise_id]
    if not bucket:
        del new.logs_by_date[date_key]
    return new


def format_sets(entry: LogEntry) -> str:
    """Format the non-zero sets of an entry, e.g. '5x185, 8xBW'."""
    return ", ".join(s.format() for s in entry.sets if s.quantity > 0)


def logged_dates(doc: Document, exercise_id: str) -> list[str]:
    """Sorted date keys that hold an entry for the exercise."""
    return sorted(
        k for k, bucket in doc.logs_by_date.items()
        if is_valid_date_key(k) and exercise_id in bucket
    )
