"""Tests for log operations."""

import copy

import pytest

from workout_tracker.errors import ValidationError
from workout_tracker.models.log import BODYWEIGHT, LogEntry, WorkoutSet
from workout_tracker.services import logbook


class TestSaveLog:
    """Tests for save_log."""

    def test_drops_zero_sets(self, doc):
        """Test zero-rep sets are not stored."""
        new = logbook.save_log(
            doc, "2024-03-15", "ex_bench", [WorkoutSet(5, "185"), WorkoutSet(0, "BW")]
        )
        assert new.get_log("2024-03-15", "ex_bench").sets == [WorkoutSet(5, "185")]

    def test_placeholder_when_empty(self, doc):
        """Test an all-zero save stores one placeholder set."""
        new = logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(0)])
        entry = new.get_log("2024-03-15", "ex_bench")
        assert entry.sets == [WorkoutSet(0, BODYWEIGHT)]

    def test_floors_integral_units(self, doc):
        """Test reps are floored and negatives dropped."""
        new = logbook.save_log(
            doc, "2024-03-15", "ex_push", [WorkoutSet(7.9, "BW"), WorkoutSet(-3, "BW")]
        )
        assert new.get_log("2024-03-15", "ex_push").sets == [WorkoutSet(7, "BW")]

    def test_keeps_decimals_when_allowed(self, doc):
        """Test decimal units keep two decimal places."""
        new = logbook.save_log(doc, "2024-03-15", "ex_run", [WorkoutSet(3.14159, "")])
        entry = new.get_log("2024-03-15", "ex_run")
        assert entry.sets == [WorkoutSet(3.14, BODYWEIGHT)]

    def test_weight_normalization(self, doc):
        """Test weights are BW or digits only."""
        new = logbook.save_log(
            doc,
            "2024-03-15",
            "ex_bench",
            [WorkoutSet(5, " 185 lbs"), WorkoutSet(5, "bw"), WorkoutSet(5, "heavy")],
        )
        weights = [s.weight for s in new.get_log("2024-03-15", "ex_bench").sets]
        assert weights == ["185", "BW", "BW"]

    def test_replaces_prior_entry(self, doc):
        """Test saving twice replaces rather than appends."""
        doc = logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(5, "185")], "heavy")
        doc = logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(3, "195")])
        entry = doc.get_log("2024-03-15", "ex_bench")

        assert entry.sets == [WorkoutSet(3, "195")]
        assert entry.notes == ""

    def test_invalid_date(self, doc):
        """Test malformed date keys are rejected."""
        with pytest.raises(ValidationError):
            logbook.save_log(doc, "15/03/2024", "ex_bench", [WorkoutSet(5)])

    def test_input_not_mutated(self, doc):
        """Test the original document is untouched."""
        before = copy.deepcopy(doc)
        logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(5)])
        assert doc == before


class TestDeleteLog:
    """Tests for delete_log."""

    def test_delete(self, doc):
        """Test removing an entry."""
        doc = logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(5)])
        doc = logbook.save_log(doc, "2024-03-15", "ex_row", [WorkoutSet(5)])
        new = logbook.delete_log(doc, "2024-03-15", "ex_bench")

        assert new.get_log("2024-03-15", "ex_bench") is None
        assert new.get_log("2024-03-15", "ex_row") is not None

    def test_delete_missing_is_noop(self, doc):
        """Test deleting a missing entry changes nothing."""
        assert logbook.delete_log(doc, "2024-03-15", "ex_bench") == doc


class TestOpenDraft:
    """Tests for carry-forward drafts."""

    def test_empty_draft(self, doc):
        """Test a never-logged exercise starts with one bodyweight set."""
        draft = logbook.open_draft_for(doc, "ex_bench", "2024-03-15")
        assert draft.sets == [WorkoutSet(0, BODYWEIGHT)]
        assert draft.source == "empty"

    def test_existing_entry(self, doc):
        """Test the same-day entry is used when present."""
        doc = logbook.save_log(doc, "2024-03-15", "ex_bench", [WorkoutSet(5, "185")], "felt good")
        draft = logbook.open_draft_for(doc, "ex_bench", "2024-03-15")

        assert draft.sets == [WorkoutSet(5, "185")]
        assert draft.notes == "felt good"
        assert draft.source == "existing"

    def test_carry_forward_most_recent(self, doc):
        """Test the latest earlier entry is used."""
        doc = logbook.save_log(doc, "2024-03-01", "ex_bench", [WorkoutSet(5, "165")])
        doc = logbook.save_log(doc, "2024-03-10", "ex_bench", [WorkoutSet(5, "175")])
        doc = logbook.save_log(doc, "2024-03-20", "ex_bench", [WorkoutSet(5, "195")])
        draft = logbook.open_draft_for(doc, "ex_bench", "2024-03-15")

        assert draft.sets == [WorkoutSet(5, "175")]
        assert draft.source == "previous"

    def test_carry_forward_skips_other_exercises(self, doc):
        """Test days without this exercise are skipped."""
        doc = logbook.save_log(doc, "2024-03-01", "ex_bench", [WorkoutSet(5, "165")])
        doc = logbook.save_log(doc, "2024-03-14", "ex_row", [WorkoutSet(8, "95")])
        draft = logbook.open_draft_for(doc, "ex_bench", "2024-03-15")
        assert draft.sets == [WorkoutSet(5, "165")]

    def test_carry_forward_ignores_invalid_keys(self, doc):
        """Test malformed date keys are never used."""
        doc.logs_by_date["2024-3-1"] = {"ex_bench": LogEntry(sets=[WorkoutSet(1, "1")])}
        draft = logbook.open_draft_for(doc, "ex_bench", "2024-03-15")
        assert draft.source == "empty"


class TestFormatting:
    """Tests for display helpers."""

    def test_format_sets_hides_zero(self):
        """Test placeholder sets are hidden."""
        entry = LogEntry(sets=[WorkoutSet(5, "185"), WorkoutSet(0, "BW"), WorkoutSet(8, "BW")])
        assert logbook.format_sets(entry) == "5x185, 8xBW"

    def test_logged_dates(self, doc):
        """Test history dates are sorted."""
        doc = logbook.save_log(doc, "2024-03-10", "ex_bench", [WorkoutSet(5)])
        doc = logbook.save_log(doc, "2024-03-01", "ex_bench", [WorkoutSet(5)])
        assert logbook.logged_dates(doc, "ex_bench") == ["2024-03-01", "2024-03-10"]
