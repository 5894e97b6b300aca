"""Export and import of whole-document JSON snapshots."""

import json
from datetime import date

from ..errors import ImportRejectedError
from ..models.document import Document
from ..services.migration import migrate
from ..utils.dates import to_date_key

EXPORT_PREFIX = "workout-tracker-export"


def export_filename(day: date | None = None) -> str:
    """File name for an export made on the given day (default today)."""
    return f"{EXPORT_PREFIX}-{to_date_key(day or date.today())}.json"


def export_snapshot(doc: Document) -> bytes:
    """Serialize the full document for download."""
    return json.dumps(doc.to_dict(), indent=2).encode("utf-8")


def validate_snapshot(raw) -> None:
    """Reject anything that is not a plausible exported document."""
    if not isinstance(raw, dict):
        raise ImportRejectedError("Import file must contain a JSON object")
    program = raw.get("program")
    if not isinstance(program, dict):
        raise ImportRejectedError("Import file missing required field 'program'")
    if not isinstance(program.get("workouts"), list):
        raise ImportRejectedError("Import file missing required field 'program.workouts'")
    if not isinstance(raw.get("logsByDate"), dict):
        raise ImportRejectedError("Import file missing required field 'logsByDate'")


def import_snapshot(data: bytes | str) -> Document:
    """Parse and validate an exported snapshot.

    The returned document is repaired (baseline present, fields normalized)
    and stamped as updated now. Saving it replaces all current data, so
    callers must confirm with the user first.

    Raises:
        ImportRejectedError: The data is not JSON or lacks required fields
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ImportRejectedError(f"Import file is not UTF-8 text: {e}") from e

    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise ImportRejectedError(f"Invalid JSON: {e}") from e

    validate_snapshot(raw)
    doc = migrate(raw)
    if doc is None:
        raise ImportRejectedError("Import file could not be read as a workout document")
    doc.touch()
    return doc
