"""Persistence of the single workout document."""

import json
import logging
from pathlib import Path
from typing import Callable

import aiosqlite

from ..errors import StorageError, StorageQuotaError
from ..models.document import Document
from ..services.migration import make_default_document, migrate
from .engine import get_db_path, init_db

logger = logging.getLogger(__name__)

PRIMARY_KEY = "workout_tracker_v2"
BACKUP_KEY = "workout_tracker_v2_backup"

SQLITE_FULL = 13

_UPSERT = """
    INSERT INTO documents (key, value, updated_at)
    VALUES (?, ?, CURRENT_TIMESTAMP)
    ON CONFLICT(key) DO UPDATE SET
        value = excluded.value,
        updated_at = excluded.updated_at
"""


def _is_quota_error(exc: Exception) -> bool:
    if getattr(exc, "sqlite_errorcode", None) == SQLITE_FULL:
        return True
    if isinstance(exc, OSError) and exc.errno == 28:  # ENOSPC
        return True
    return "disk is full" in str(exc).lower()


class DocumentStore:
    """Loads and saves the workout document.

    The primary slot holds the current document; before every save its
    previous contents are copied to a single backup slot.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._schema_ready = False

    async def _ensure_schema(self) -> None:
        if not self._schema_ready:
            await init_db(self.db_path)
            self._schema_ready = True

    async def _read(self, db: aiosqlite.Connection, key: str) -> str | None:
        cursor = await db.execute("SELECT value FROM documents WHERE key = ?", (key,))
        row = await cursor.fetchone()
        return row[0] if row else None

    async def read_raw(self, key: str = PRIMARY_KEY) -> str | None:
        """Raw JSON text stored under a slot."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            return await self._read(db, key)

    async def load(self) -> Document:
        """Load the document, falling back to defaults if it is unusable.

        Never raises for a missing or corrupt document.
        """
        try:
            raw_text = await self.read_raw(PRIMARY_KEY)
        except aiosqlite.Error as e:
            logger.warning("Could not read document from %s: %s", self.db_path, e)
            return make_default_document()

        if not raw_text:
            logger.debug("No stored document; starting with defaults")
            return make_default_document()

        try:
            raw = json.loads(raw_text)
        except json.JSONDecodeError as e:
            logger.warning("Stored document is corrupt (%s); starting with defaults", e)
            return make_default_document()

        doc = migrate(raw)
        if doc is None:
            logger.warning("Stored document is missing required fields; starting with defaults")
            return make_default_document()
        return doc

    async def load_backup(self) -> Document | None:
        """The previously committed document, or None if there is none."""
        raw_text = await self.read_raw(BACKUP_KEY)
        if not raw_text:
            return None
        try:
            return migrate(json.loads(raw_text))
        except json.JSONDecodeError:
            logger.warning("Backup document is corrupt")
            return None

    async def _backup_primary(self, db: aiosqlite.Connection) -> None:
        try:
            current = await self._read(db, PRIMARY_KEY)
            if current is not None:
                await db.execute(_UPSERT, (BACKUP_KEY, current))
                await db.commit()
        except aiosqlite.Error as e:
            logger.warning("Backup copy failed, saving anyway: %s", e)

    async def save(self, doc: Document) -> None:
        """Write the document, rotating the previous one into the backup slot.

        Raises:
            StorageQuotaError: The disk or database is full
            StorageError: Any other write failure
        """
        payload = json.dumps(doc.to_dict())
        try:
            await self._ensure_schema()
            async with aiosqlite.connect(self.db_path) as db:
                await self._backup_primary(db)
                await db.execute(_UPSERT, (PRIMARY_KEY, payload))
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            if _is_quota_error(e):
                raise StorageQuotaError(f"Storage is full: {e}") from e
            raise StorageError(f"Could not save document: {e}") from e
        logger.debug("Saved document (%d bytes)", len(payload))

    async def apply(
        self,
        mutation: Callable[..., Document],
        *args,
        base: Document | None = None,
        **kwargs,
    ) -> Document:
        """Apply a pure mutation, stamp and save.

        Args:
            mutation: Function taking a Document and returning an updated copy
            base: Document the caller already loaded and resolved ids against.
                Defaults, repairs and injected baselines get fresh ids on every
                load, so callers that looked ids up must pass it.

        Validation errors from the mutation propagate before anything is written.
        """
        doc = base if base is not None else await self.load()
        new = mutation(doc, *args, **kwargs)
        new.touch()
        await self.save(new)
        return new

    async def restore_backup(self) -> Document | None:
        """Make the backup the current document.

        The current document becomes the new backup, so a restore can be undone
        by restoring again.
        """
        backup = await self.load_backup()
        if backup is None:
            return None
        backup.touch()
        await self.save(backup)
        return backup

