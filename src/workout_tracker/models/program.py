"""Workout program data models."""

from dataclasses import dataclass, field

from .units import ExerciseUnit

BASELINE_WORKOUT_ID = "baseline"
BASELINE_NAME = "Baseline"
DEFAULT_CATEGORY = "Workout"


@dataclass
class Exercise:
    """An exercise within a workout."""

    id: str
    name: str
    unit: ExerciseUnit = field(default_factory=ExerciseUnit)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name, **self.unit.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            unit=ExerciseUnit.from_dict(data),
        )


@dataclass
class Workout:
    """An ordered, categorized group of exercises."""

    id: str
    name: str
    category: str = DEFAULT_CATEGORY
    exercises: list[Exercise] = field(default_factory=list)

    @property
    def is_baseline(self) -> bool:
        return self.id == BASELINE_WORKOUT_ID

    def get_exercise(self, exercise_id: str) -> Exercise | None:
        """Find an exercise in this workout by id."""
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Workout":
        """Create from dictionary."""
        default = BASELINE_NAME if data["id"] == BASELINE_WORKOUT_ID else DEFAULT_CATEGORY
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            category=data.get("category") or default,
            exercises=[Exercise.from_dict(ex) for ex in data.get("exercises", [])],
        )


@dataclass
class Program:
    """The exercise program: every workout, baseline included."""

    workouts: list[Workout] = field(default_factory=list)

    @property
    def baseline(self) -> Workout | None:
        return self.get_workout(BASELINE_WORKOUT_ID)

    def get_workout(self, workout_id: str) -> Workout | None:
        """Find a workout by id."""
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        return None

    def iter_exercises(self):
        """Yield (workout, exercise) pairs in program order."""
        for workout in self.workouts:
            for exercise in workout.exercises:
                yield workout, exercise

    def exercise_ids(self) -> set[str]:
        """All exercise ids currently in the program."""
        return {exercise.id for _, exercise in self.iter_exercises()}

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"workouts": [w.to_dict() for w in self.workouts]}

    @classmethod
    def from_dict(cls, data: dict) -> "Program":
        """Create from dictionary."""
        return cls(workouts=[Workout.from_dict(w) for w in data.get("workouts", [])])
