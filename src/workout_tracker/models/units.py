"""Exercise unit definitions."""

from dataclasses import dataclass
from enum import Enum

from ..errors import ValidationError

MAX_ABBREVIATION_LENGTH = 10


class Unit(str, Enum):
    """Units an exercise can be logged in."""

    REPS = "reps"
    MILES = "miles"
    YARDS = "yards"
    LAPS = "laps"
    STEPS = "steps"
    SEC = "sec"
    MIN = "min"
    HRS = "hrs"
    CUSTOM = "custom"  # Abbreviation and decimal flag carried by CustomUnit


# Fixed units whose logged quantities may be fractional
DECIMAL_UNITS = frozenset({Unit.MILES, Unit.MIN, Unit.HRS})


@dataclass(frozen=True)
class CustomUnit:
    """A user-defined unit."""

    abbreviation: str
    allow_decimal: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"abbreviation": self.abbreviation, "allowDecimal": self.allow_decimal}


@dataclass(frozen=True)
class ExerciseUnit:
    """The unit of an exercise: a fixed Unit, or CUSTOM with its CustomUnit."""

    kind: Unit = Unit.REPS
    custom: CustomUnit | None = None

    def __post_init__(self):
        if self.kind == Unit.CUSTOM and self.custom is None:
            raise ValidationError("Custom unit requires an abbreviation")
        if self.kind != Unit.CUSTOM and self.custom is not None:
            raise ValidationError(f"Unit '{self.kind.value}' does not take a custom unit")

    @classmethod
    def parse(
        cls,
        unit: "str | Unit",
        abbreviation: str | None = None,
        allow_decimal: bool = False,
    ) -> "ExerciseUnit":
        """Build a unit from user input, validating custom abbreviations."""
        try:
            kind = Unit(str(unit).strip().lower())
        except ValueError:
            choices = ", ".join(u.value for u in Unit)
            raise ValidationError(f"Unknown unit '{unit}'. Choose one of: {choices}")

        if kind != Unit.CUSTOM:
            return cls(kind=kind)

        abbreviation = (abbreviation or "").strip()
        if not abbreviation:
            raise ValidationError("Custom unit requires an abbreviation")
        if len(abbreviation) > MAX_ABBREVIATION_LENGTH:
            raise ValidationError(
                f"Unit abbreviation must be at most {MAX_ABBREVIATION_LENGTH} characters"
            )
        return cls(kind=kind, custom=CustomUnit(abbreviation, bool(allow_decimal)))

    @property
    def allows_decimal(self) -> bool:
        """Whether logged quantities may be fractional."""
        if self.custom is not None:
            return self.custom.allow_decimal
        return self.kind in DECIMAL_UNITS

    @property
    def label(self) -> str:
        """Short display label."""
        if self.custom is not None:
            return self.custom.abbreviation
        return self.kind.value

    def to_dict(self) -> dict:
        """Convert to the fields stored on an exercise."""
        data = {"unit": self.kind.value}
        if self.custom is not None:
            data["customUnit"] = self.custom.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseUnit":
        """Read unit fields from a stored exercise.

        Unknown or incomplete units fall back to reps.
        """
        try:
            kind = Unit(data.get("unit", Unit.REPS.value))
        except ValueError:
            return cls()

        if kind != Unit.CUSTOM:
            return cls(kind=kind)

        custom_data = data.get("customUnit")
        if not isinstance(custom_data, dict):
            return cls()
        abbreviation = str(custom_data.get("abbreviation", "")).strip()[:MAX_ABBREVIATION_LENGTH]
        if not abbreviation:
            return cls()
        return cls(
            kind=kind,
            custom=CustomUnit(abbreviation, bool(custom_data.get("allowDecimal", False))),
        )


REPS = ExerciseUnit()
