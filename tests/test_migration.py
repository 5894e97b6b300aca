"""Tests for document migration and repair."""

from workout_tracker.models import BASELINE_WORKOUT_ID, Unit
from workout_tracker.services.migration import (
    DEFAULT_BASELINE_EXERCISES,
    make_default_document,
    migrate,
    repair,
)


def v1_document():
    """A document in the original format: no units, no categories."""
    return {
        "version": 1,
        "program": {
            "workouts": [
                {"id": "w_1", "name": "Upper", "exercises": [{"id": "ex_1", "name": "Row"}]},
            ]
        },
        "logsByDate": {"2024-03-15": {"ex_1": {"sets": [{"reps": 8, "weight": "135"}], "notes": ""}}},
        "meta": {"createdAt": 1, "updatedAt": 2},
    }


class TestDefaultDocument:
    """Tests for the first-run document."""

    def test_default_program(self):
        """Test the default program has baseline first and two samples."""
        doc = make_default_document()
        names = [w.name for w in doc.program.workouts]

        assert names == ["Baseline", "Workout A", "Workout B"]
        assert doc.program.workouts[0].id == BASELINE_WORKOUT_ID
        assert [e.name for e in doc.program.baseline.exercises] == DEFAULT_BASELINE_EXERCISES
        assert doc.logs_by_date == {}

    def test_ids_unique(self):
        """Test all generated ids are distinct."""
        doc = make_default_document()
        ids = [w.id for w in doc.program.workouts]
        ids += [e.id for _, e in doc.program.iter_exercises()]
        assert len(ids) == len(set(ids))


class TestMigrate:
    """Tests for migrate()."""

    def test_rejects_unusable_values(self):
        """Test values without program.workouts are unusable."""
        assert migrate(None) is None
        assert migrate([]) is None
        assert migrate({"program": {}}) is None
        assert migrate({"program": {"workouts": "nope"}}) is None

    def test_v1_upgrade(self):
        """Test version 1 documents gain units and categories."""
        doc = migrate(v1_document())

        assert doc.version == 2
        upper = doc.program.get_workout("w_1")
        assert upper.category == "Workout"
        assert upper.exercises[0].unit.kind == Unit.REPS
        assert doc.get_log("2024-03-15", "ex_1").sets[0].weight == "135"

    def test_versionless_units_kept(self):
        """Test documents without a version keep the units they carry."""
        doc = migrate(
            {
                "program": {
                    "workouts": [
                        {
                            "id": "baseline",
                            "name": "Baseline",
                            "exercises": [
                                {"id": "ex_run", "name": "Run", "unit": "miles"},
                                {
                                    "id": "ex_rope",
                                    "name": "Rope",
                                    "unit": "custom",
                                    "customUnit": {"abbreviation": "jumps", "allowDecimal": False},
                                },
                                {"id": "ex_odd", "name": "Odd", "unit": "furlongs"},
                            ],
                        }
                    ]
                },
                "logsByDate": {},
            }
        )
        exercises = doc.program.baseline.exercises

        assert exercises[0].unit.kind == Unit.MILES
        assert exercises[1].unit.kind == Unit.CUSTOM
        assert exercises[1].unit.label == "jumps"
        assert exercises[2].unit.kind == Unit.REPS

    def test_custom_unit_without_abbreviation(self):
        """Test an incomplete custom unit falls back to reps."""
        raw = v1_document()
        raw["program"]["workouts"][0]["exercises"][0].update({"unit": "custom", "customUnit": {}})
        assert migrate(raw).program.get_workout("w_1").exercises[0].unit.kind == Unit.REPS

    def test_injects_baseline_first(self):
        """Test a missing baseline is added at the front."""
        doc = migrate(v1_document())
        assert doc.program.workouts[0].id == BASELINE_WORKOUT_ID
        assert doc.program.workouts[0].category == "Baseline"

    def test_missing_logs(self):
        """Test missing logsByDate becomes empty."""
        raw = v1_document()
        del raw["logsByDate"]
        assert migrate(raw).logs_by_date == {}

    def test_normalizes_workouts(self):
        """Test workouts without exercises or category are filled in."""
        raw = {"program": {"workouts": [{"id": "baseline", "name": "Base"}, {"id": "w_2", "name": "Legs", "category": " "}]}}
        doc = migrate(raw)

        assert doc.program.baseline.exercises == []
        assert doc.program.baseline.category == "Baseline"
        assert doc.program.get_workout("w_2").category == "Workout"

    def test_drops_malformed_entries(self):
        """Test malformed workouts, exercises and logs are dropped."""
        raw = {
            "program": {
                "workouts": [
                    "junk",
                    {"name": "No id"},
                    {"id": "w_1", "name": "A", "exercises": [{"name": "no id"}, {"id": "ex_1", "name": "Row"}]},
                    {"id": "w_1", "name": "Duplicate"},
                ]
            },
            "logsByDate": {"2024-03-15": {"ex_1": {"sets": "bad"}, "ex_2": {"sets": []}}, "x": "bad"},
        }
        doc = migrate(raw)

        assert [w.id for w in doc.program.workouts] == ["baseline", "w_1"]
        assert [e.id for e in doc.program.get_workout("w_1").exercises] == ["ex_1"]
        assert list(doc.logs_by_date) == ["2024-03-15"]
        assert doc.get_log("2024-03-15", "ex_1") is None
        # An empty set list gets the placeholder set
        assert doc.get_log("2024-03-15", "ex_2").sets[0].weight == "BW"

    def test_keeps_invalid_date_keys(self):
        """Test odd date keys survive; readers skip them."""
        raw = v1_document()
        raw["logsByDate"]["someday"] = {"ex_1": {"sets": [{"reps": 1}]}}
        assert "someday" in migrate(raw).logs_by_date

    def test_coerces_set_values(self):
        """Test string quantities and numeric weights are coerced."""
        raw = v1_document()
        raw["logsByDate"]["2024-03-16"] = {"ex_1": {"sets": [{"reps": "6", "weight": 95}, {"reps": "x", "weight": None}]}}
        entry = migrate(raw).get_log("2024-03-16", "ex_1")

        assert entry.sets[0].reps == 6
        assert entry.sets[0].weight == "95"
        assert entry.sets[1].reps == 0
        assert entry.sets[1].weight == "BW"

    def test_idempotent(self):
        """Test repairing a repaired document changes nothing."""
        once = migrate(v1_document())
        twice = migrate(once.to_dict())
        assert twice == once
        assert repair(once.to_dict()) == once.to_dict()

    def test_meta_preserved(self):
        """Test existing timestamps are kept."""
        doc = migrate(v1_document())
        assert doc.meta.created_at == 1
        assert doc.meta.updated_at == 2
