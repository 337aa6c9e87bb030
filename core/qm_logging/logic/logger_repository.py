"""
core/qm_logging/logic/logger_repository.py
==========================================

SQLite persistence for log entries. Only used when ``[Logging] database``
points to a file; otherwise the Logger keeps entries in memory.
"""
from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

from core.qm_logging.models.log_entry import LogEntry


class LoggerRepository:
    """Append-only log table with a single reused connection."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = Path(db_path)
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = None
        self._ensure_db()

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ------------------------------------------------------------------ #
    #  Connection management                                             #
    # ------------------------------------------------------------------ #
    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # ------------------------------------------------------------------ #
    #  Public API                                                        #
    # ------------------------------------------------------------------ #
    def insert_log(self, entry: LogEntry) -> int:
        with self._lock:
            conn = self._get_connection()
            cursor = conn.execute(
                """INSERT INTO logs
                   (timestamp, feature, event, username, reference_id, message, log_level)
                   VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (
                    entry.timestamp.isoformat(),
                    entry.feature,
                    entry.event,
                    entry.username,
                    entry.reference_id,
                    entry.message,
                    entry.log_level,
                ),
            )
            conn.commit()
            return int(cursor.lastrowid)

    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT * FROM logs ORDER BY id DESC LIMIT ?", (limit,)
            ).fetchall()
        return [LogEntry.from_dict(dict(row)) for row in rows]

    def query_logs(
        self,
        *,
        username: Optional[str] = None,
        feature: Optional[str] = None,
        event: Optional[str] = None,
        reference_id: Optional[str] = None,
        level: Optional[str] = None,
        limit: int = 1_000,
    ) -> List[LogEntry]:
        """Newest first; every given filter must match exactly."""
        filters = {
            "username": username,
            "feature": feature,
            "event": event,
            "reference_id": reference_id,
            "log_level": level,
        }
        clauses = [f"{column} = ?" for column, value in filters.items() if value is not None]
        params: list = [value for value in filters.values() if value is not None]

        sql = "SELECT * FROM logs"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += " ORDER BY id DESC LIMIT ?"
        params.append(limit)

        with self._lock:
            rows = self._get_connection().execute(sql, params).fetchall()
        return [LogEntry.from_dict(dict(row)) for row in rows]

    def clear_logs(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute("DELETE FROM logs")
            conn.commit()

    # ------------------------------------------------------------------ #
    #  Internals                                                         #
    # ------------------------------------------------------------------ #
    def _ensure_db(self) -> None:
        with self._lock:
            conn = self._get_connection()
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    feature TEXT NOT NULL,
                    event TEXT NOT NULL,
                    username TEXT,
                    reference_id TEXT,
                    message TEXT,
                    log_level TEXT NOT NULL DEFAULT 'INFO'
                )
                """
            )
            conn.commit()
