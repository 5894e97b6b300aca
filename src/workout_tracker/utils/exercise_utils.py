"""Utilities for exercise name normalization and matching."""

import re
from difflib import SequenceMatcher

MAX_NAME_LENGTH = 50

# Common abbreviation expansions
ABBREVIATIONS = {
    "bb": "barbell",
    "db": "dumbbell",
    "kb": "kettlebell",
    "ohp": "overhead press",
    "rdl": "romanian deadlift",
    "bss": "bulgarian split squat",
    "rfess": "rear foot elevated split squat",
}


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, removes extra whitespace, and expands common abbreviations.
    """
    normalized = name.lower().strip()
    normalized = re.sub(r"\s+", " ", normalized)

    if normalized in ABBREVIATIONS:
        return ABBREVIATIONS[normalized]

    for abbrev, full in ABBREVIATIONS.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def clean_name(name: str | None) -> str:
    """Trim a user-entered name and collapse inner whitespace."""
    return re.sub(r"\s+", " ", (name or "").strip())


def names_equal(a: str, b: str) -> bool:
    """Case-insensitive name comparison."""
    return clean_name(a).casefold() == clean_name(b).casefold()


def find_best_match(
    name: str,
    candidates: list[str],
    threshold: float = 0.8,
) -> int | None:
    """Find the best matching name.

    Args:
        name: The name to match
        candidates: Names to search
        threshold: Minimum similarity ratio (0-1) to consider a match

    Returns:
        Index of the best match in candidates, or None if none is above threshold
    """
    # Exact (case-insensitive) matches win outright
    for i, candidate in enumerate(candidates):
        if names_equal(candidate, name):
            return i

    normalized_name = normalize_exercise_name(name)
    best_index: int | None = None
    best_score = 0.0

    for i, candidate in enumerate(candidates):
        normalized = normalize_exercise_name(candidate)
        if normalized == normalized_name:
            return i

        score = SequenceMatcher(None, normalized_name, normalized).ratio()
        if score > best_score:
            best_score = score
            best_index = i

    if best_score >= threshold:
        return best_index

    return None
