"""Tests for data models."""

import pytest

from workout_tracker.errors import ValidationError
from workout_tracker.models import (
    BODYWEIGHT,
    CustomUnit,
    Exercise,
    ExerciseUnit,
    LogEntry,
    Unit,
    Workout,
    WorkoutSet,
)


class TestExerciseUnit:
    """Tests for the exercise unit variant."""

    def test_fixed_units_decimal_flag(self):
        """Test which fixed units allow decimals."""
        assert ExerciseUnit(Unit.MILES).allows_decimal
        assert ExerciseUnit(Unit.HRS).allows_decimal
        assert not ExerciseUnit(Unit.REPS).allows_decimal
        assert not ExerciseUnit(Unit.LAPS).allows_decimal

    def test_parse_custom(self):
        """Test building a custom unit from input."""
        unit = ExerciseUnit.parse("custom", " kcal ", allow_decimal=True)
        assert unit.kind == Unit.CUSTOM
        assert unit.label == "kcal"
        assert unit.allows_decimal

    def test_parse_custom_requires_abbreviation(self):
        """Test custom unit without abbreviation is rejected."""
        with pytest.raises(ValidationError):
            ExerciseUnit.parse("custom", "  ")

    def test_parse_custom_abbreviation_too_long(self):
        """Test abbreviation length limit."""
        with pytest.raises(ValidationError):
            ExerciseUnit.parse("custom", "x" * 11)

    def test_parse_unknown_unit(self):
        """Test unknown unit names are rejected."""
        with pytest.raises(ValidationError):
            ExerciseUnit.parse("furlongs")

    def test_custom_kind_needs_spec(self):
        """Test the variant cannot be built inconsistently."""
        with pytest.raises(ValidationError):
            ExerciseUnit(Unit.CUSTOM)
        with pytest.raises(ValidationError):
            ExerciseUnit(Unit.REPS, CustomUnit("x"))

    def test_from_dict_falls_back_to_reps(self):
        """Test unknown or incomplete stored units become reps."""
        assert ExerciseUnit.from_dict({"unit": "parsecs"}).kind == Unit.REPS
        assert ExerciseUnit.from_dict({"unit": "custom"}).kind == Unit.REPS
        assert ExerciseUnit.from_dict({}).kind == Unit.REPS


class TestProgramModels:
    """Tests for workout and exercise serialization."""

    def test_exercise_to_dict_custom_unit(self):
        """Test custom units serialize with their spec."""
        exercise = Exercise(
            id="ex_1",
            name="Sled Push",
            unit=ExerciseUnit.parse("custom", "m", allow_decimal=True),
        )
        data = exercise.to_dict()

        assert data["unit"] == "custom"
        assert data["customUnit"] == {"abbreviation": "m", "allowDecimal": True}
        assert Exercise.from_dict(data) == exercise

    def test_workout_default_category(self):
        """Test category defaults depend on the baseline id."""
        assert Workout.from_dict({"id": "baseline", "name": "Baseline"}).category == "Baseline"
        assert Workout.from_dict({"id": "w_1", "name": "Legs"}).category == "Workout"

    def test_baseline_flag(self):
        """Test the baseline property."""
        assert Workout(id="baseline", name="Baseline").is_baseline
        assert not Workout(id="w_1", name="Legs").is_baseline


class TestWorkoutSet:
    """Tests for logged sets."""

    def test_bodyweight(self):
        """Test bodyweight detection is case-insensitive."""
        assert WorkoutSet(reps=5, weight="bw").is_bodyweight
        assert WorkoutSet(reps=5, weight=BODYWEIGHT).numeric_weight is None

    def test_numeric_weight(self):
        """Test numeric weights parse."""
        assert WorkoutSet(reps=5, weight="185").numeric_weight == 185
        assert WorkoutSet(reps=5, weight="abc").numeric_weight is None

    def test_quantity_coercion(self):
        """Test non-numeric quantities count as zero."""
        assert WorkoutSet(reps="7").quantity == 7
        assert WorkoutSet(reps="nope").quantity == 0
        assert WorkoutSet(reps=float("inf")).quantity == 0

    def test_format(self):
        """Test display format."""
        assert WorkoutSet(reps=5, weight="185").format() == "5x185"
        assert WorkoutSet(reps=8.0, weight="BW").format() == "8xBW"

    def test_log_entry_from_dict(self):
        """Test entries tolerate missing weight and notes."""
        entry = LogEntry.from_dict({"sets": [{"reps": 3}]})
        assert entry.sets == [WorkoutSet(reps=3, weight=BODYWEIGHT)]
        assert entry.notes == ""
