"""Entry and project persistence using SQLite."""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator

from .domain.errors import StorageError, ValidationError
from .domain.models import WorkEntry

logger = logging.getLogger(__name__)


class EntryStore:
    """Stores work entries and the project registry."""

    def __init__(self, db_path: str = "data/tallysheet.db") -> None:
        """Initialize entry database.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, translating sqlite errors."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StorageError(f"Database error in {self.db_path}: {e}") from e
        finally:
            conn.close()

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS entries (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    project TEXT NOT NULL,
                    start_at TEXT NOT NULL,
                    end_at TEXT NOT NULL,
                    notes TEXT NOT NULL DEFAULT ''
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS projects (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE
                )
                """
            )
        logger.debug(f"Initialized entry database at {self.db_path}")

    def add_entry(self, entry: WorkEntry) -> int:
        """Record a work entry.

        Args:
            entry: Entry to store

        Returns:
            ID of recorded entry
        """
        if not entry.project.strip():
            raise ValidationError("Project name must not be empty")

        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO entries (project, start_at, end_at, notes) VALUES (?, ?, ?, ?)",
                (
                    entry.project,
                    entry.start.isoformat(),
                    entry.end.isoformat(),
                    entry.notes,
                ),
            )
            entry_id = cursor.lastrowid

        logger.info(
            f"Recorded entry #{entry_id}: project={entry.project}, "
            f"duration={entry.duration}"
        )
        return int(entry_id) if entry_id is not None else -1

    def get_entry_rows(self) -> list[tuple[int, WorkEntry]]:
        """Get all entries with their IDs in insertion order.

        Returns:
            List of (id, entry) pairs
        """
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, project, start_at, end_at, notes FROM entries ORDER BY id"
            ).fetchall()

        return [
            (
                row[0],
                WorkEntry(
                    project=row[1],
                    start=datetime.fromisoformat(row[2]),
                    end=datetime.fromisoformat(row[3]),
                    notes=row[4],
                ),
            )
            for row in rows
        ]

    def get_entries(self) -> list[WorkEntry]:
        """Get all entries in insertion order."""
        return [entry for _, entry in self.get_entry_rows()]

    def delete_entries(self, entry_ids: Iterable[int]) -> int:
        """Delete entries by ID.

        Args:
            entry_ids: IDs collected beforehand, e.g. from get_entry_rows

        Returns:
            Number of deleted entries
        """
        ids = sorted(set(entry_ids))
        if not ids:
            return 0

        with self._connect() as conn:
            cursor = conn.executemany(
                "DELETE FROM entries WHERE id = ?", [(entry_id,) for entry_id in ids]
            )
            deleted = cursor.rowcount

        logger.info(f"Deleted {deleted} of {len(ids)} requested entries")
        return deleted

    def get_projects(self) -> list[str]:
        """Get the project registry in the order projects were added."""
        with self._connect() as conn:
            rows = conn.execute("SELECT name FROM projects ORDER BY id").fetchall()
        return [row[0] for row in rows]

    def add_project(self, name: str) -> bool:
        """Add a project to the registry.

        Args:
            name: Project name

        Returns:
            True if added, False if it was already registered
        """
        name = name.strip()
        if not name:
            raise ValidationError("Project name must not be empty")

        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO projects (name) VALUES (?)", (name,)
            )
            added = cursor.rowcount > 0

        if added:
            logger.info(f"Added project: {name}")
        return added

    def remove_project(self, name: str) -> bool:
        """Remove a project from the registry. Existing entries are kept.

        Returns:
            True if removed, False if it was not registered
        """
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM projects WHERE name = ?", (name,))
            removed = cursor.rowcount > 0

        if removed:
            logger.info(f"Removed project: {name}")
        return removed

    def seed_projects(self, names: Iterable[str]) -> int:
        """Fill an empty project registry with default names.

        Returns:
            Number of projects added
        """
        if self.get_projects():
            return 0
        return sum(1 for name in names if self.add_project(name))
