"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest

from workout_tracker.db import DocumentStore
from workout_tracker.services.migration import migrate


def build_document():
    """A small document with fixed ids."""
    return migrate(
        {
            "version": 2,
            "program": {
                "workouts": [
                    {
                        "id": "baseline",
                        "name": "Baseline",
                        "category": "Baseline",
                        "exercises": [
                            {"id": "ex_push", "name": "Push Ups", "unit": "reps"},
                            {"id": "ex_face", "name": "Face Pulls", "unit": "reps"},
                        ],
                    },
                    {
                        "id": "w_a",
                        "name": "Workout A",
                        "category": "Workout",
                        "exercises": [
                            {"id": "ex_bench", "name": "Barbell Bench Press", "unit": "reps"},
                            {"id": "ex_row", "name": "Row", "unit": "reps"},
                            {"id": "ex_chin", "name": "Chin Ups", "unit": "reps"},
                        ],
                    },
                    {
                        "id": "w_cardio",
                        "name": "Cardio",
                        "category": "Conditioning",
                        "exercises": [
                            {"id": "ex_run", "name": "Run", "unit": "miles"},
                        ],
                    },
                ]
            },
            "logsByDate": {},
            "meta": {"createdAt": 1700000000000, "updatedAt": 1700000000000},
        }
    )


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def store(temp_db_path):
    """A document store backed by a temporary database."""
    return DocumentStore(temp_db_path)


@pytest.fixture
def doc():
    """A document with a baseline, a strength workout and a cardio workout."""
    return build_document()
