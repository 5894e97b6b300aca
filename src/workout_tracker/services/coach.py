"""Heuristic training-balance coach.

Classifies exercises into muscle groups by keyword, totals logged volume
per group and flags push/pull imbalances and neglected groups. The
thresholds are fixed constants, not clinical guidance.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from ..models.document import Document
from ..models.muscles import MUSCLE_KEYWORDS, PULL_GROUPS, PUSH_GROUPS, MuscleGroup
from ..utils.dates import in_range, is_valid_date_key
from ..utils.exercise_utils import normalize_exercise_name
from .summary import WEEK_START, DateRange, RangePreset, range_for

MIN_TOTAL_VOLUME = 50
PUSH_PULL_RATIO_LIMIT = 1.5
REAR_DELT_MIN_ANTERIOR = 30
REAR_DELT_RATIO_LIMIT = 2
NEGLECT_MIN_TOTAL = 100
NEGLECT_SHARE = 0.05
MAX_INSIGHTS = 3

NEGLECT_WATCHLIST = (MuscleGroup.BACK, MuscleGroup.HAMSTRINGS, MuscleGroup.POSTERIOR_DELT)

SUGGESTIONS = {
    MuscleGroup.BACK: ["Barbell Row", "Pull Ups", "Lat Pulldown"],
    MuscleGroup.HAMSTRINGS: ["Romanian Deadlift", "Leg Curl", "Good Morning"],
    MuscleGroup.POSTERIOR_DELT: ["Face Pulls", "Reverse Fly", "Band Pull Apart"],
}
PULL_SUGGESTIONS = ["Barbell Row", "Pull Ups", "Face Pulls"]


class Severity(str, Enum):
    """How urgently an insight should be acted on."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class InsightKind(str, Enum):
    PUSH_PULL_IMBALANCE = "push_pull_imbalance"
    REAR_DELT_NEGLECT = "rear_delt_neglect"
    NEGLECTED_GROUP = "neglected_group"
    BALANCED = "balanced"


@dataclass
class Insight:
    """A single piece of coaching advice."""

    severity: Severity
    kind: InsightKind
    title: str
    message: str
    suggestions: list[str] = field(default_factory=list)
    group: MuscleGroup | None = None


@dataclass
class CoachReport:
    """Volume per group and the resulting insights for a range."""

    date_range: DateRange
    volume: dict[MuscleGroup, float]
    insights: list[Insight]

    @property
    def total_volume(self) -> float:
        return sum(self.volume.values())


def _label(group: MuscleGroup) -> str:
    return group.value.replace("_", " ").title()


def classify(exercise_name: str) -> frozenset[MuscleGroup]:
    """Muscle groups an exercise works, judged by its name.

    Returns every group with a keyword contained in the normalized name, or
    ``{UNCLASSIFIED}`` if none match.
    """
    name = normalize_exercise_name(exercise_name)
    groups = frozenset(
        group
        for group, keywords in MUSCLE_KEYWORDS.items()
        if any(keyword in name for keyword in keywords)
    )
    return groups or frozenset({MuscleGroup.UNCLASSIFIED})


def aggregate_volume(doc: Document, start_key: str, end_key: str) -> dict[MuscleGroup, float]:
    """Total reps per muscle group over an inclusive date range.

    Entries for exercises no longer in the program are skipped. A set counts
    toward every group its exercise is classified into.
    """
    names = {exercise.id: exercise.name for _, exercise in doc.program.iter_exercises()}
    groups_by_id = {ex_id: classify(name) for ex_id, name in names.items()}
    volume: dict[MuscleGroup, float] = defaultdict(float)

    for date_key, bucket in doc.logs_by_date.items():
        if not is_valid_date_key(date_key) or not in_range(date_key, start_key, end_key):
            continue
        for exercise_id, entry in bucket.items():
            groups = groups_by_id.get(exercise_id)
            if groups is None:
                continue
            for workout_set in entry.sets:
                for group in groups:
                    volume[group] += workout_set.quantity

    return dict(volume)


def detect_insights(volume: dict[MuscleGroup, float]) -> list[Insight]:
    """Derive at most three insights from per-group volume.

    Imbalance checks come before neglect checks; with too little data
    (under 50 total) nothing is reported.
    """
    total = sum(volume.values())
    if total < MIN_TOTAL_VOLUME:
        return []

    def vol(group: MuscleGroup) -> float:
        return volume.get(group, 0)

    insights: list[Insight] = []

    push = sum(vol(g) for g in PUSH_GROUPS)
    pull = sum(vol(g) for g in PULL_GROUPS)
    if pull > 0 and push > PUSH_PULL_RATIO_LIMIT * pull:
        ratio = push / pull
        insights.append(
            Insight(
                severity=Severity.HIGH,
                kind=InsightKind.PUSH_PULL_IMBALANCE,
                title="Push/pull imbalance",
                message=(
                    f"You are doing {ratio:.1f}x more pushing than pulling "
                    f"({push:g} vs {pull:g} reps). Aim for at most {PUSH_PULL_RATIO_LIMIT}x."
                ),
                suggestions=list(PULL_SUGGESTIONS),
            )
        )

    anterior = vol(MuscleGroup.ANTERIOR_DELT)
    posterior = vol(MuscleGroup.POSTERIOR_DELT)
    if anterior > REAR_DELT_MIN_ANTERIOR and anterior > REAR_DELT_RATIO_LIMIT * posterior:
        insights.append(
            Insight(
                severity=Severity.MEDIUM,
                kind=InsightKind.REAR_DELT_NEGLECT,
                title="Rear delts are lagging",
                message=(
                    f"Front delt volume ({anterior:g}) is more than double "
                    f"rear delt volume ({posterior:g})."
                ),
                suggestions=list(SUGGESTIONS[MuscleGroup.POSTERIOR_DELT]),
                group=MuscleGroup.POSTERIOR_DELT,
            )
        )

    for group in NEGLECT_WATCHLIST:
        if len(insights) >= 2:
            break
        if total > NEGLECT_MIN_TOTAL and vol(group) / total < NEGLECT_SHARE:
            share = vol(group) / total * 100
            insights.append(
                Insight(
                    severity=Severity.LOW,
                    kind=InsightKind.NEGLECTED_GROUP,
                    title=f"{_label(group)} looks neglected",
                    message=f"{_label(group)} is only {share:.1f}% of your total volume.",
                    suggestions=list(SUGGESTIONS[group]),
                    group=group,
                )
            )

    if not insights and total > NEGLECT_MIN_TOTAL:
        insights.append(
            Insight(
                severity=Severity.INFO,
                kind=InsightKind.BALANCED,
                title="Training looks balanced",
                message="No major imbalances found in this period. Keep it up.",
            )
        )

    return insights[:MAX_INSIGHTS]


def analyze(
    doc: Document,
    preset: "RangePreset | str",
    date_key: str,
    week_start: int = WEEK_START,
) -> CoachReport:
    """Volume and insights for a WTD/MTD/YTD range ending at date_key."""
    date_range = range_for(preset, date_key, week_start)
    volume = aggregate_volume(doc, date_range.start, date_range.end)
    return CoachReport(date_range=date_range, volume=volume, insights=detect_insights(volume))
