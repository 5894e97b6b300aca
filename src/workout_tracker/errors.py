"""Exception hierarchy for workout-tracker."""


class WorkoutTrackerError(Exception):
    """Base class for all workout-tracker errors."""


class ValidationError(WorkoutTrackerError, ValueError):
    """User input was rejected before any state was changed."""


class NotFoundError(ValidationError):
    """A workout or exercise id does not exist in the program."""


class ParseError(WorkoutTrackerError, ValueError):
    """A document could not be parsed or has the wrong shape."""


class ImportRejectedError(ParseError):
    """An import file was rejected; the current document is untouched."""


class StorageError(WorkoutTrackerError, RuntimeError):
    """Writing the document failed."""


class StorageQuotaError(StorageError):
    """The storage backend is out of space.

    Distinct from other write failures so callers can suggest exporting
    the data and clearing space instead of simply retrying.
    """
