"""Database layer for workout-tracker."""

from .engine import get_db_path, init_db
from .snapshot import export_filename, export_snapshot, import_snapshot
from .store import BACKUP_KEY, PRIMARY_KEY, DocumentStore

__all__ = [
    "BACKUP_KEY",
    "DocumentStore",
    "export_filename",
    "export_snapshot",
    "get_db_path",
    "import_snapshot",
    "init_db",
    "PRIMARY_KEY",
]
