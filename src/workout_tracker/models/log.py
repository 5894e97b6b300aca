"""Workout log data models."""

import math
from dataclasses import dataclass, field

BODYWEIGHT = "BW"  # Weight marker: no external load


@dataclass
class WorkoutSet:
    """A single logged set: a quantity and a weight."""

    reps: int | float = 0  # Quantity in the exercise's unit
    weight: str = BODYWEIGHT  # "BW" or a numeric string such as "185"

    @property
    def is_bodyweight(self) -> bool:
        return str(self.weight).strip().upper() == BODYWEIGHT

    @property
    def numeric_weight(self) -> float | None:
        """The weight as a number, or None for bodyweight/unparseable values."""
        text = str(self.weight).strip()
        if not text or text.upper() == BODYWEIGHT:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
        return value if math.isfinite(value) else None

    @property
    def quantity(self) -> float:
        """The quantity coerced to a finite number (0 otherwise)."""
        try:
            value = float(self.reps)
        except (TypeError, ValueError):
            return 0.0
        return value if math.isfinite(value) else 0.0

    def format(self) -> str:
        """Format as '5x185' or '8xBW'."""
        weight = BODYWEIGHT if self.is_bodyweight else self.weight
        return f"{format_quantity(self.reps)}x{weight}"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"reps": self.reps, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutSet":
        """Create from dictionary."""
        weight = data.get("weight")
        return cls(
            reps=data.get("reps", 0),
            weight=weight if isinstance(weight, str) else BODYWEIGHT,
        )


@dataclass
class LogEntry:
    """Sets and notes logged for one exercise on one date."""

    sets: list[WorkoutSet] = field(default_factory=list)
    notes: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"sets": [s.to_dict() for s in self.sets], "notes": self.notes}

    @classmethod
    def from_dict(cls, data: dict) -> "LogEntry":
        """Create from dictionary."""
        return cls(
            sets=[WorkoutSet.from_dict(s) for s in data.get("sets", []) if isinstance(s, dict)],
            notes=data.get("notes") or "",
        )


def format_quantity(value: int | float) -> str:
    """Format a quantity without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
