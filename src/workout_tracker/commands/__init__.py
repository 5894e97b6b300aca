"""CLI commands for workout-tracker."""

from .backup import backup
from .coach import coach
from .exercises import exercises
from .export import export
from .import_data import import_data
from .init import init
from .log import log
from .summary import summary
from .workouts import workouts

__all__ = [
    "backup",
    "coach",
    "exercises",
    "export",
    "import_data",
    "init",
    "log",
    "summary",
    "workouts",
]
