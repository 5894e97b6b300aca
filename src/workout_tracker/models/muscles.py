"""Muscle groups and the keywords used to recognise them in exercise names."""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle groups tracked by the coach."""

    CHEST = "chest"
    ANTERIOR_DELT = "anterior_delt"
    LATERAL_DELT = "lateral_delt"
    POSTERIOR_DELT = "posterior_delt"
    TRICEPS = "triceps"
    BACK = "back"
    BICEPS = "biceps"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    UNCLASSIFIED = "unclassified"


# Lower-case substrings matched against normalized exercise names.
# An exercise belongs to every group with at least one matching keyword.
MUSCLE_KEYWORDS: dict[MuscleGroup, list[str]] = {
    MuscleGroup.CHEST: [
        "bench",
        "chest",
        "push up",
        "pushup",
        "push-up",
        "pec",
        "dip",
        "incline press",
        "decline press",
        "cable fly",
        "dumbbell fly",
        "crossover",
    ],
    MuscleGroup.ANTERIOR_DELT: [
        "overhead press",
        "shoulder press",
        "military press",
        "push press",
        "front raise",
        "arnold",
        "incline bench",
        "incline press",
        "landmine press",
        "pike push",
    ],
    MuscleGroup.LATERAL_DELT: [
        "lateral raise",
        "side raise",
        "upright row",
    ],
    MuscleGroup.POSTERIOR_DELT: [
        "face pull",
        "rear delt",
        "reverse fly",
        "reverse flye",
        "rear fly",
        "pull apart",
    ],
    MuscleGroup.TRICEPS: [
        "tricep",
        "skull crusher",
        "pushdown",
        "push down",
        "dip",
        "close grip",
        "french press",
        "overhead extension",
    ],
    MuscleGroup.BACK: [
        "row",
        "pull up",
        "pullup",
        "pull-up",
        "chin up",
        "chinup",
        "chin-up",
        "pulldown",
        "pull down",
        "lat pull",
        "lats",
        "deadlift",
        "back extension",
        "shrug",
        "pullover",
    ],
    MuscleGroup.BICEPS: [
        "bicep",
        "hammer curl",
        "barbell curl",
        "dumbbell curl",
        "cable curl",
        "preacher",
        "concentration curl",
        "spider curl",
        "chin up",
        "chinup",
        "chin-up",
    ],
    MuscleGroup.QUADS: [
        "squat",
        "leg press",
        "lunge",
        "leg extension",
        "step up",
        "step-up",
        "hack",
        "wall sit",
    ],
    MuscleGroup.HAMSTRINGS: [
        "deadlift",
        "romanian",
        "leg curl",
        "hamstring",
        "good morning",
        "nordic",
        "glute ham",
    ],
    MuscleGroup.GLUTES: [
        "glute",
        "hip thrust",
        "bridge",
        "lunge",
        "step up",
        "step-up",
        "abduction",
    ],
    MuscleGroup.CALVES: [
        "calf",
        "calves",
        "heel raise",
    ],
    MuscleGroup.CORE: [
        "plank",
        "crunch",
        "sit up",
        "situp",
        "sit-up",
        "ab wheel",
        "rollout",
        "leg raise",
        "russian twist",
        "hollow",
        "dead bug",
        "pallof",
        "core",
    ],
}

PUSH_GROUPS = (MuscleGroup.CHEST, MuscleGroup.ANTERIOR_DELT, MuscleGroup.TRICEPS)
PULL_GROUPS = (MuscleGroup.BACK, MuscleGroup.POSTERIOR_DELT, MuscleGroup.BICEPS)
