"""workout-tracker: personal workout logging with rolling summaries."""

__version__ = "0.1.0"
