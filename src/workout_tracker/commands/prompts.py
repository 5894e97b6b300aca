"""Interactive set entry via questionary."""

import questionary
from questionary import Style

from ..models.log import BODYWEIGHT, WorkoutSet, format_quantity
from ..models.program import Exercise
from ..services.logbook import Draft, normalize_quantity, normalize_weight

# Custom style for prompts
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _valid_quantity(allow_decimal: bool):
    def check(text: str) -> bool | str:
        try:
            value = float(text)
        except ValueError:
            return "Enter a number"
        if value < 0:
            return "Must be 0 or more"
        if not allow_decimal and not value.is_integer():
            return "This unit takes whole numbers"
        return True

    return check


def _valid_weight(text: str) -> bool | str:
    text = text.strip()
    if not text or text.upper() == BODYWEIGHT:
        return True
    try:
        float(text)
    except ValueError:
        return f"Enter a number or {BODYWEIGHT}"
    return True


class SetEntryPrompt:
    """Walks the user through the sets of a draft, one set at a time."""

    def __init__(self, exercise: Exercise, draft: Draft):
        self.exercise = exercise
        self.draft = draft

    async def ask_set(self, number: int, current: WorkoutSet) -> WorkoutSet | None:
        """Ask for one set, pre-filled from the draft. None means cancelled."""
        unit = self.exercise.unit
        reps = await questionary.text(
            f"Set {number} - {unit.label}:",
            default=format_quantity(current.reps),
            validate=_valid_quantity(unit.allows_decimal),
            style=custom_style,
        ).ask_async()
        if reps is None:
            return None

        weight = await questionary.text(
            f"Set {number} - weight ({BODYWEIGHT} for bodyweight):",
            default=BODYWEIGHT if current.is_bodyweight else str(current.weight),
            validate=_valid_weight,
            style=custom_style,
        ).ask_async()
        if weight is None:
            return None

        return WorkoutSet(
            reps=normalize_quantity(reps, unit.allows_decimal),
            weight=normalize_weight(weight),
        )

    async def collect(self) -> tuple[list[WorkoutSet], str] | None:
        """Collect sets and notes. Returns None if the user cancelled."""
        print(f"\n=== {self.exercise.name} ===\n")
        if self.draft.source == "previous":
            print("(pre-filled from your last session)\n")

        sets: list[WorkoutSet] = []
        for i, current in enumerate(self.draft.sets, start=1):
            entered = await self.ask_set(i, current)
            if entered is None:
                return None
            sets.append(entered)

        while True:
            more = await questionary.confirm(
                "Add another set?", default=False, style=custom_style
            ).ask_async()
            if more is None:
                return None
            if not more:
                break
            template = sets[-1] if sets else WorkoutSet()
            entered = await self.ask_set(len(sets) + 1, template)
            if entered is None:
                return None
            sets.append(entered)

        notes = await questionary.text(
            "Notes (optional):", default=self.draft.notes, style=custom_style
        ).ask_async()
        if notes is None:
            return None

        return sets, notes.strip()
