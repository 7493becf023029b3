# src/termtodo/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Any failure talking to the task database."""


class MalformedRowError(StorageError):
    """A stored row cannot be turned into a Task (e.g. unparseable completed flag)."""


class DuplicateTaskError(StorageError):
    """A task with the same name already exists (name is the primary key)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A task named {name!r} already exists")
        self.name = name


class TaskStore:
    """
    SQLite task store.

    Schema (kept compatible with existing data files):
        tasks(name TEXT PRIMARY KEY, completed BOOLEAN)

    Lifetime:
    - one connection, opened in __init__ and held until close()
    - every write is committed immediately (statement-level durability)
    - all statements are parameterized; task names never reach SQL text
    """

    def __init__(self, db_path: str | Path = "tasks.db") -> None:
        self._db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Failed to open the database at {self._db_path}: {e}") from e
        self._conn.row_factory = sqlite3.Row
        self._configure_conn(self._conn)
        try:
            self.ensure_schema()
        except StorageError:
            self.close()
            raise
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        conn.close()
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"TaskStore for {self._db_path} is closed")
        return self._conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(Exception):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _parse_completed(name: str, raw: object) -> bool:
        # BOOLEAN has NUMERIC affinity: valid rows hold 0/1 integers.
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise MalformedRowError(
                f"Task {name!r} has an invalid completed value {raw!r}"
            )
        return bool(raw)

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        name = row["name"]
        if not isinstance(name, str) or not name:
            raise MalformedRowError(f"Invalid task name {name!r}")
        return Task(name=name, completed=self._parse_completed(name, row["completed"]))

    def _execute_write(self, sql: str, params: tuple[object, ...]) -> int:
        conn = self._get_conn()
        try:
            cur = conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Database write failed: {e}") from e
        return cur.rowcount

    # ---- public API ----

    def ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    name TEXT PRIMARY KEY,
                    completed BOOLEAN
                )
                """
            )
            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Error initializing database {self._db_path}: {e}") from e

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to count tasks: {e}") from e
        return int(n)

    def list_all(self) -> list[Task]:
        """
        Return every task in storage order (no ORDER BY).

        A single malformed row aborts the whole listing with MalformedRowError.
        """
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT name, completed FROM tasks").fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Error retrieving tasks from database: {e}") from e
        return [self._row_to_task(r) for r in rows]

    def insert(self, name: str, completed: bool = False) -> Task:
        if not name or not name.strip():
            raise ValueError("name is required")

        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO tasks (name, completed) VALUES (?, ?)",
                (name, bool(completed)),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            raise DuplicateTaskError(name) from e
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Failed to insert task {name!r}: {e}") from e

        logger.debug("Task inserted name=%r completed=%s", name, completed)
        return Task(name=name, completed=bool(completed))

    def delete(self, name: str) -> bool:
        """Delete by exact name. Returns False when nothing matched (not an error)."""
        removed = self._execute_write("DELETE FROM tasks WHERE name = ?", (name,))
        logger.debug("Task delete name=%r removed=%s", name, removed)
        return removed > 0

    def get_completed(self, name: str) -> bool | None:
        """Completed flag for `name`, or None when no such task is stored."""
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT completed FROM tasks WHERE name = ?", (name,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read status of task {name!r}: {e}") from e
        if row is None:
            return None
        return self._parse_completed(name, row["completed"])

    def set_completed(self, name: str, completed: bool) -> bool:
        """Overwrite the completed flag. Returns False when nothing matched (not an error)."""
        updated = self._execute_write(
            "UPDATE tasks SET completed = ? WHERE name = ?",
            (bool(completed), name),
        )
        logger.debug("Task set_completed name=%r completed=%s updated=%s", name, completed, updated)
        return updated > 0
