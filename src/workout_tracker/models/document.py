"""The persisted document: program, logs and metadata."""

import time
from dataclasses import dataclass, field

from .log import LogEntry
from .program import Program

SCHEMA_VERSION = 2


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class Meta:
    """Document timestamps (epoch milliseconds)."""

    created_at: int = field(default_factory=now_ms)
    updated_at: int = field(default_factory=now_ms)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"createdAt": self.created_at, "updatedAt": self.updated_at}

    @classmethod
    def from_dict(cls, data: dict) -> "Meta":
        """Create from dictionary."""
        now = now_ms()
        return cls(
            created_at=data.get("createdAt", now),
            updated_at=data.get("updatedAt", now),
        )


@dataclass
class Document:
    """All application state.

    ``logs_by_date`` maps a date key (``YYYY-MM-DD``) to a mapping of
    exercise id to LogEntry. Entries may reference exercises that are no
    longer in the program.
    """

    program: Program = field(default_factory=Program)
    logs_by_date: dict[str, dict[str, LogEntry]] = field(default_factory=dict)
    meta: Meta = field(default_factory=Meta)
    version: int = SCHEMA_VERSION

    def get_log(self, date_key: str, exercise_id: str) -> LogEntry | None:
        """Get the entry for an exact (date, exercise) pair."""
        return self.logs_by_date.get(date_key, {}).get(exercise_id)

    def touch(self) -> None:
        """Refresh the update timestamp."""
        self.meta.updated_at = now_ms()

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            "version": self.version,
            "program": self.program.to_dict(),
            "logsByDate": {
                date_key: {ex_id: entry.to_dict() for ex_id, entry in entries.items()}
                for date_key, entries in self.logs_by_date.items()
            },
            "meta": self.meta.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        """Create from an already-migrated dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            program=Program.from_dict(data["program"]),
            logs_by_date={
                date_key: {ex_id: LogEntry.from_dict(entry) for ex_id, entry in entries.items()}
                for date_key, entries in data.get("logsByDate", {}).items()
            },
            meta=Meta.from_dict(data.get("meta", {})),
        )
