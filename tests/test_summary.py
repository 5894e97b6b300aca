"""Tests for the summary aggregator."""

import pytest

from workout_tracker.errors import ValidationError
from workout_tracker.models.log import LogEntry, WorkoutSet
from workout_tracker.services import logbook, program_editor
from workout_tracker.services.summary import (
    NO_DATA,
    RangePreset,
    range_for,
    summarize,
    summarize_workout,
)
from workout_tracker.utils.dates import SUNDAY


class TestRangeFor:
    """Tests for WTD/MTD/YTD ranges."""

    def test_presets(self):
        """Test range starts for a Friday."""
        assert range_for(RangePreset.WTD, "2024-03-15").start == "2024-03-11"
        assert range_for("mtd", "2024-03-15").start == "2024-03-01"
        assert range_for("ytd", "2024-03-15").start == "2024-01-01"
        assert range_for("ytd", "2024-03-15").end == "2024-03-15"

    def test_sunday_week(self):
        """Test the Sunday week-start option."""
        assert range_for("wtd", "2024-03-15", week_start=SUNDAY).start == "2024-03-10"

    def test_label(self):
        """Test labels."""
        assert range_for("wtd", "2024-03-15").label == "WTD"

    def test_impossible_date(self):
        """Test a well-shaped but impossible date is a validation error."""
        with pytest.raises(ValidationError, match="not a calendar date"):
            range_for("mtd", "2024-02-30")

    def test_impossible_date_in_workout_summary(self, doc):
        """Test workout summaries reject impossible dates the same way."""
        with pytest.raises(ValidationError):
            summarize_workout(doc, "baseline", "wtd", "2023-02-29")


class TestSummarize:
    """Tests for summarize."""

    def test_empty_range(self, doc):
        """Test no entries gives zero and the no-data marker."""
        result = summarize(doc, "ex_bench", "2024-03-01", "2024-03-31")
        assert result.total_quantity == 0
        assert result.max_weight == NO_DATA

    def test_bodyweight_and_numeric(self, doc):
        """Test numeric max wins over bodyweight."""
        doc = logbook.save_log(
            doc, "2024-03-15", "ex_bench", [WorkoutSet(10, "BW"), WorkoutSet(8, "185")]
        )
        result = summarize(doc, "ex_bench", "2024-03-11", "2024-03-15")
        assert result.total_quantity == 18
        assert result.max_weight == 185

    def test_bodyweight_only(self, doc):
        """Test BW is reported when no numeric weight was logged."""
        doc = logbook.save_log(doc, "2024-03-15", "ex_push", [WorkoutSet(20, "BW")])
        result = summarize(doc, "ex_push", "2024-03-01", "2024-03-31")
        assert result.max_weight == "BW"
        assert result.total_quantity == 20

    def test_range_inclusive(self, doc):
        """Test both ends count and outside dates do not."""
        for day, reps in [("2024-03-10", 1), ("2024-03-11", 2), ("2024-03-15", 4), ("2024-03-16", 8)]:
            doc = logbook.save_log(doc, day, "ex_push", [WorkoutSet(reps, "BW")])
        result = summarize(doc, "ex_push", "2024-03-11", "2024-03-15")
        assert result.total_quantity == 6

    def test_skips_invalid_keys(self, doc):
        """Test malformed date keys are ignored."""
        doc.logs_by_date["2024-3-12"] = {"ex_push": LogEntry(sets=[WorkoutSet(50, "BW")])}
        doc = logbook.save_log(doc, "2024-03-12", "ex_push", [WorkoutSet(5, "BW")])
        assert summarize(doc, "ex_push", "2024-03-01", "2024-03-31").total_quantity == 5

    def test_max_across_days(self, doc):
        """Test the maximum is taken across all days."""
        doc = logbook.save_log(doc, "2024-03-12", "ex_bench", [WorkoutSet(5, "195")])
        doc = logbook.save_log(doc, "2024-03-14", "ex_bench", [WorkoutSet(5, "185.5")])
        result = summarize(doc, "ex_bench", "2024-03-11", "2024-03-15")
        assert result.max_weight == 195
        assert result.format_max_weight() == "195"

    def test_decimal_unit_total(self, doc):
        """Test decimal units round to two places."""
        doc = logbook.save_log(doc, "2024-03-12", "ex_run", [WorkoutSet(1.25, "")])
        doc = logbook.save_log(doc, "2024-03-13", "ex_run", [WorkoutSet(2.5, "")])
        assert summarize(doc, "ex_run", "2024-03-11", "2024-03-15").total_quantity == 3.75

    def test_integral_unit_floors(self, doc):
        """Test stray fractional quantities are floored for whole-number units."""
        doc.logs_by_date["2024-03-12"] = {"ex_push": LogEntry(sets=[WorkoutSet(2.6), WorkoutSet(2.6)])}
        assert summarize(doc, "ex_push", "2024-03-11", "2024-03-15").total_quantity == 5

    def test_deleted_exercise_still_summarized(self, doc):
        """Test history of a deleted exercise can still be summarized."""
        doc = logbook.save_log(doc, "2024-03-12", "ex_row", [WorkoutSet(10, "95")])
        doc = program_editor.delete_exercise(doc, "w_a", "ex_row")
        assert summarize(doc, "ex_row", "2024-03-11", "2024-03-15").total_quantity == 10


class TestSummarizeWorkout:
    """Tests for per-workout summaries."""

    def test_rows_follow_program_order(self, doc):
        """Test one row per exercise, in order."""
        doc = logbook.save_log(doc, "2024-03-12", "ex_bench", [WorkoutSet(5, "185")])
        date_range, rows = summarize_workout(doc, "w_a", "wtd", "2024-03-15")

        assert date_range.start == "2024-03-11"
        assert [r.name for r in rows] == ["Barbell Bench Press", "Row", "Chin Ups"]
        assert rows[0].summary.total_quantity == 5
        assert rows[1].summary.max_weight == NO_DATA

    def test_unknown_workout(self, doc):
        """Test unknown workouts give no rows."""
        _, rows = summarize_workout(doc, "w_missing", "wtd", "2024-03-15")
        assert rows == []
