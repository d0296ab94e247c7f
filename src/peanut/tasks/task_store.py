# src/peanut/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_models import NAME_MAX_LEN, ListTaskFilter, Task, TaskStatus
from .task_time import from_db, to_db

logger = logging.getLogger(__name__)

# Kept byte-compatible with databases created by earlier peanut releases.
SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS task (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(128) NOT NULL,
        status TINYINT NOT NULL,
        ctime TIMESTAMP NOT NULL,
        actual_start TIMESTAMP,
        expected_end TIMESTAMP,
        actual_end TIMESTAMP
    )
"""

INDEX_SQL = "CREATE INDEX IF NOT EXISTS name_idx ON task (name)"

# (filter attribute, column, operator) for the optional timestamp bounds.
_TIME_BOUNDS = (
    ("ctime_open", "ctime", ">="),
    ("ctime_close", "ctime", "<="),
    ("actual_start_open", "actual_start", ">="),
    ("actual_start_close", "actual_start", "<="),
    ("expected_end_open", "expected_end", ">="),
    ("expected_end_close", "expected_end", "<="),
    ("actual_end_open", "actual_end", ">="),
    ("actual_end_close", "actual_end", "<="),
)


class TaskStoreError(RuntimeError):
    """A statement against the task database failed (the sqlite3 error is chained)."""


class TaskStore:
    """
    SQLite task store.

    One table (`task`) plus an index on name. Schema creation is explicit
    (`create_schema`) so the console can run it as a bootstrap step.

    Each method opens its own short-lived SQLite connection.
    """

    def __init__(self, db_path: str | Path = "peanut.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _build_where(task_filter: ListTaskFilter | None) -> tuple[str, list[Any]]:
        """
        Translate a filter into a WHERE clause + params.

        Shared by the page query and the count query so both always agree.
        """
        if task_filter is None:
            return "", []

        clauses: list[str] = []
        params: list[Any] = []

        if task_filter.name:
            clauses.append("name LIKE ?")
            params.append(f"%{task_filter.name}%")

        if task_filter.status > TaskStatus.NONE:
            clauses.append("status = ?")
            params.append(int(task_filter.status))

        for attr, column, op in _TIME_BOUNDS:
            value = getattr(task_filter, attr)
            if value is None:
                continue
            clauses.append(f"{column} {op} ?")
            params.append(to_db(value))

        if not clauses:
            return "", []
        return " WHERE " + " AND ".join(clauses), params

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            name=str(row["name"] or ""),
            status=TaskStatus.from_db(row["status"]),
            ctime=from_db(row["ctime"]) or datetime.min,
            actual_start=from_db(row["actual_start"]),
            expected_end=from_db(row["expected_end"]),
            actual_end=from_db(row["actual_end"]),
        )

    # ---- public API ----

    def create_schema(self) -> None:
        """Create the task table and its name index if they do not exist yet."""
        conn = self._get_conn()
        try:
            try:
                conn.execute(SCHEMA_SQL)
            except sqlite3.Error as e:
                raise TaskStoreError(f"failed to execute schema: {e}") from e

            try:
                conn.execute(INDEX_SQL)
            except sqlite3.Error as e:
                raise TaskStoreError(f"failed to create index: {e}") from e

            conn.commit()
        finally:
            conn.close()
        logger.info("Schema executed (db=%s)", self._db_path)
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM task")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def insert(self, task: Task) -> int:
        """
        Persist a new task and return its id.

        `task.id` is ignored: SQLite assigns the identifier.
        """
        name = (task.name or "").strip()
        if not name:
            raise ValueError("name is required")
        if len(name) > NAME_MAX_LEN:
            raise ValueError(f"name is longer than {NAME_MAX_LEN} characters")

        sql = (
            "INSERT INTO task(name, status, ctime, actual_start, expected_end, actual_end) "
            "VALUES (?, ?, ?, ?, ?, ?)"
        )
        params = (
            name,
            int(task.status),
            to_db(task.ctime),
            to_db(task.actual_start),
            to_db(task.expected_end),
            to_db(task.actual_end),
        )
        logger.debug("SQL: %s params=%s", sql, params)

        conn = self._get_conn()
        try:
            try:
                cur = conn.execute(sql, params)
                conn.commit()
            except sqlite3.Error as e:
                raise TaskStoreError(f"failed to save task: {e}") from e
            rowid = cur.lastrowid
            if rowid is None:
                raise TaskStoreError("SQLite did not return lastrowid for task insert")
            task_id = int(rowid)
            logger.debug("Task added id=%s name=%r status=%s", task_id, name, task.status.name)
            return task_id
        finally:
            conn.close()

    def query(
        self,
        page: int,
        page_size: int,
        task_filter: ListTaskFilter | None = None,
    ) -> tuple[list[Task], int]:
        """
        One page of tasks (newest id first) plus the total number of matching tasks.

        Two statements are issued: the page itself and a COUNT(*) with the same
        WHERE clause, since SQLite cannot return both in one round trip.
        """
        page = max(1, int(page))
        page_size = max(1, int(page_size))
        where, params = self._build_where(task_filter)

        page_sql = f"SELECT * FROM task{where} ORDER BY id DESC LIMIT ? OFFSET ?"
        page_params = [*params, page_size, (page - 1) * page_size]
        count_sql = f"SELECT COUNT(*) FROM task{where}"

        conn = self._get_conn()
        try:
            try:
                logger.debug("SQL: %s params=%s", page_sql, page_params)
                rows = conn.execute(page_sql, page_params).fetchall()

                logger.debug("SQL: %s params=%s", count_sql, params)
                (total,) = conn.execute(count_sql, params).fetchone()
                tasks = [self._row_to_task(r) for r in rows]
            except (sqlite3.Error, ValueError) as e:
                raise TaskStoreError(f"failed to list tasks: {e}") from e
            return tasks, int(total)
        finally:
            conn.close()
