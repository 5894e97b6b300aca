"""Schema migration and structural repair of loaded documents.

``migrate`` turns loosely-typed JSON (from storage or an import file) into a
validated Document. It is deterministic for documents that already contain
a baseline workout and idempotent in general: migrating a migrated document
gives back an equal one.
"""

import logging
import math

from ..models.document import SCHEMA_VERSION, Document, now_ms
from ..models.log import BODYWEIGHT
from ..models.program import BASELINE_NAME, BASELINE_WORKOUT_ID, DEFAULT_CATEGORY
from ..models.units import Unit
from ..utils.ids import new_id

logger = logging.getLogger(__name__)

DEFAULT_BASELINE_EXERCISES = ["Push Ups", "Pull Ups", "Squats", "Face Pulls"]
DEFAULT_WORKOUTS = {
    "Workout A": ["Incline Bench Press", "Row"],
    "Workout B": ["Overhead Press", "Pull Down"],
}


def _exercise_stubs(names: list[str], taken: set[str]) -> list[dict]:
    stubs = []
    for name in names:
        ex_id = new_id("ex", taken)
        taken.add(ex_id)
        stubs.append({"id": ex_id, "name": name, "unit": Unit.REPS.value})
    return stubs


def _baseline_workout(taken: set[str]) -> dict:
    return {
        "id": BASELINE_WORKOUT_ID,
        "name": BASELINE_NAME,
        "category": BASELINE_NAME,
        "exercises": _exercise_stubs(DEFAULT_BASELINE_EXERCISES, taken),
    }


def default_document_dict() -> dict:
    """The raw shape of a first-run document."""
    taken: set[str] = set()
    workouts = [_baseline_workout(taken)]
    for name, exercises in DEFAULT_WORKOUTS.items():
        workout_id = new_id("w", taken)
        taken.add(workout_id)
        workouts.append(
            {
                "id": workout_id,
                "name": name,
                "category": DEFAULT_CATEGORY,
                "exercises": _exercise_stubs(exercises, taken),
            }
        )
    now = now_ms()
    return {
        "version": SCHEMA_VERSION,
        "program": {"workouts": workouts},
        "logsByDate": {},
        "meta": {"createdAt": now, "updatedAt": now},
    }


def make_default_document() -> Document:
    """Create the document used on first run or when storage is unreadable."""
    return Document.from_dict(default_document_dict())


def _coerce_quantity(value) -> int | float:
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0
        if not math.isfinite(number):
            return 0
        return int(number) if number.is_integer() else number
    return 0


def _coerce_weight(value) -> str:
    if isinstance(value, str):
        text = value.strip()
        if not text or text.upper() == BODYWEIGHT:
            return BODYWEIGHT
        return text
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
        return str(int(value)) if float(value).is_integer() else str(value)
    return BODYWEIGHT


def _repair_unit(raw: dict) -> dict:
    try:
        kind = Unit(raw.get("unit"))
    except ValueError:
        # Version 1 documents had no units; every exercise counted reps
        return {"unit": Unit.REPS.value}
    if kind != Unit.CUSTOM:
        return {"unit": kind.value}
    custom = raw.get("customUnit")
    if not isinstance(custom, dict) or not str(custom.get("abbreviation") or "").strip():
        logger.warning("Custom unit without an abbreviation; using reps")
        return {"unit": Unit.REPS.value}
    return {"unit": kind.value, "customUnit": dict(custom)}


def _repair_exercise(raw: dict) -> dict:
    exercise = {"id": raw["id"], "name": str(raw.get("name") or "").strip() or "Untitled"}
    exercise.update(_repair_unit(raw))
    return exercise


def _repair_workout(raw: dict, taken: set[str]) -> dict:
    is_baseline = raw["id"] == BASELINE_WORKOUT_ID
    category = raw.get("category")
    if not isinstance(category, str) or not category.strip():
        category = BASELINE_NAME if is_baseline else DEFAULT_CATEGORY

    exercises = []
    raw_exercises = raw.get("exercises")
    for ex in raw_exercises if isinstance(raw_exercises, list) else []:
        if not isinstance(ex, dict) or not isinstance(ex.get("id"), str) or not ex["id"]:
            logger.warning("Dropping malformed exercise in workout %s", raw["id"])
            continue
        if ex["id"] in taken:
            logger.warning("Dropping duplicate exercise id %s", ex["id"])
            continue
        taken.add(ex["id"])
        exercises.append(_repair_exercise(ex))

    name = str(raw.get("name") or "").strip() or (BASELINE_NAME if is_baseline else "Untitled")
    return {
        "id": raw["id"],
        "name": name,
        "category": category.strip(),
        "exercises": exercises,
    }


def _repair_entry(raw) -> dict | None:
    if not isinstance(raw, dict) or not isinstance(raw.get("sets"), list):
        return None
    sets = [
        {"reps": _coerce_quantity(s.get("reps")), "weight": _coerce_weight(s.get("weight"))}
        for s in raw["sets"]
        if isinstance(s, dict)
    ]
    if not sets:
        sets = [{"reps": 0, "weight": BODYWEIGHT}]
    notes = raw.get("notes")
    return {"sets": sets, "notes": notes if isinstance(notes, str) else ""}


def _repair_logs(raw) -> dict:
    if not isinstance(raw, dict):
        return {}
    logs = {}
    for date_key, entries in raw.items():
        if not isinstance(entries, dict):
            logger.warning("Dropping malformed log bucket for %r", date_key)
            continue
        bucket = {}
        for exercise_id, entry in entries.items():
            repaired = _repair_entry(entry)
            if repaired is None:
                logger.warning("Dropping malformed log entry %s on %s", exercise_id, date_key)
                continue
            bucket[exercise_id] = repaired
        logs[date_key] = bucket
    return logs


def _repair_meta(raw) -> dict:
    raw = raw if isinstance(raw, dict) else {}
    now = now_ms()
    created = raw.get("createdAt")
    updated = raw.get("updatedAt")
    created = created if isinstance(created, int) and not isinstance(created, bool) else now
    updated = updated if isinstance(updated, int) and not isinstance(updated, bool) else created
    return {"createdAt": created, "updatedAt": updated}


def repair(raw) -> dict | None:
    """Repair a raw document dict in its JSON shape.

    Returns None when the value lacks ``program.workouts`` entirely; the
    caller then falls back to a default document.
    """
    if not isinstance(raw, dict):
        return None
    program = raw.get("program")
    if not isinstance(program, dict) or not isinstance(program.get("workouts"), list):
        return None

    version = raw.get("version")
    if not isinstance(version, int) or isinstance(version, bool) or version < 1:
        version = 1
    if version > SCHEMA_VERSION:
        logger.warning(
            "Document version %s is newer than supported version %s", version, SCHEMA_VERSION
        )

    taken: set[str] = set()
    workouts = []
    seen_workouts: set[str] = set()
    for workout in program["workouts"]:
        if not isinstance(workout, dict) or not isinstance(workout.get("id"), str) or not workout["id"]:
            logger.warning("Dropping malformed workout entry")
            continue
        if workout["id"] in seen_workouts:
            logger.warning("Dropping duplicate workout id %s", workout["id"])
            continue
        seen_workouts.add(workout["id"])
        workouts.append(_repair_workout(workout, taken))

    if BASELINE_WORKOUT_ID not in seen_workouts:
        logger.info("Baseline workout missing; injecting default baseline")
        workouts.insert(0, _baseline_workout(taken))

    return {
        "version": SCHEMA_VERSION,
        "program": {"workouts": workouts},
        "logsByDate": _repair_logs(raw.get("logsByDate")),
        "meta": _repair_meta(raw.get("meta")),
    }


def migrate(raw) -> Document | None:
    """Migrate loosely-typed JSON to a Document, or None if unusable."""
    repaired = repair(raw)
    if repaired is None:
        return None
    return Document.from_dict(repaired)
