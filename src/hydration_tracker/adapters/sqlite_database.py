"""Embedded SQLite store shared by the SQLite repositories."""

import logging
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field

from hydration_tracker.domain.errors import StorageError

logger = logging.getLogger(__name__)

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS water_entries (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        amount_ml INTEGER NOT NULL,
        timestamp TEXT NOT NULL,
        date TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS settings (
        id INTEGER PRIMARY KEY CHECK (id = 1),
        daily_goal_ml INTEGER DEFAULT 4000,
        reminder_interval_minutes INTEGER DEFAULT 60,
        reminder_enabled INTEGER DEFAULT 1,
        sound_enabled INTEGER DEFAULT 1,
        start_with_system INTEGER DEFAULT 0,
        theme TEXT DEFAULT 'dark'
    )
    """,
    "INSERT OR IGNORE INTO settings (id) VALUES (1)",
    "CREATE INDEX IF NOT EXISTS idx_date ON water_entries(date)",
)


@dataclass
class SqliteDatabase:
    """A single SQLite connection behind one exclusive lock."""

    connection: sqlite3.Connection
    lock: AbstractContextManager = field(default_factory=threading.RLock)

    @classmethod
    def open(cls, path: str) -> "SqliteDatabase":
        """Open the database file and make sure the schema exists."""
        try:
            connection = sqlite3.connect(path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageError(f"Failed to open database {path}: {exc}") from exc
        database = cls(connection)
        database.initialize()
        logger.info("Opened database", extra={"path": path})
        return database

    def initialize(self) -> None:
        """Create tables, the default settings row, and the date index."""
        with self.cursor() as cursor:
            for statement in _SCHEMA:
                cursor.execute(statement)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Hold the lock and yield a cursor, committing on success."""
        with self.lock:
            try:
                cursor = self.connection.cursor()
            except sqlite3.Error as exc:
                raise StorageError(str(exc)) from exc
            try:
                yield cursor
                self.connection.commit()
            except sqlite3.Error as exc:
                self.connection.rollback()
                raise StorageError(str(exc)) from exc
            finally:
                cursor.close()

    def close(self) -> None:
        """Close the underlying connection."""
        with self.lock:
            self.connection.close()
