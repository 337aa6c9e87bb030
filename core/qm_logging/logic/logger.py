"""
core/qm_logging/logic/logger.py
===============================

Central feature logger.

- Keeps entries in memory (thread-safe list).
- Forwards every entry to the stdlib ``logging`` module.
- Optionally persists entries to SQLite when ``[Logging] database`` is set.

Use the process-wide instance via ``get_logger()``; tests create their own.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Optional

from core.config.config_service import LoggingConfig, config_service
from core.helpers.date_time_helper import utc_now
from core.qm_logging.logic.logger_repository import LoggerRepository
from core.qm_logging.models.log_entry import LogEntry

_std_logger = logging.getLogger(__name__)

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Logger:
    """Thread-safe feature logger with optional SQLite backend."""

    def __init__(
        self,
        *,
        level: str = "INFO",
        echo: bool = False,
        db_path: Optional[Path] = None,
    ) -> None:
        self._lock = threading.Lock()
        self.level = self._normalize_level(level)
        self.echo = echo
        self.entries: list[LogEntry] = []
        self._repo: LoggerRepository | None = LoggerRepository(db_path) if db_path else None

    @classmethod
    def from_config(cls, cfg: LoggingConfig) -> "Logger":
        db_path = Path(cfg.database).expanduser() if cfg.database.strip() else None
        return cls(level=cfg.level, echo=cfg.echo, db_path=db_path)

    @property
    def repository(self) -> LoggerRepository | None:
        return self._repo

    # ------------------------------------------------------------------ #
    #  Public API: log                                                   #
    # ------------------------------------------------------------------ #
    def log(
        self,
        feature: str,
        event: str,
        *,
        username: Optional[str] = None,
        level: str = "INFO",
        reference_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Optional[LogEntry]:
        """
        Record one entry. Entries below the configured level are dropped
        and ``None`` is returned.
        """
        level = self._normalize_level(level)
        if LEVELS.index(level) < LEVELS.index(self.level):
            return None

        entry = LogEntry(
            timestamp=utc_now(),
            log_level=level,
            username=username or "unknown",
            feature=feature,
            event=event,
            reference_id=reference_id,
            message=message,
        )

        with self._lock:
            if self._repo is not None:
                entry.id = self._repo.insert_log(entry)
            else:
                entry.id = len(self.entries) + 1
            self.entries.append(entry)

        _std_logger.log(
            getattr(logging, level),
            "[%s] %s (%s): %s", feature, event, entry.username, message or "",
        )
        if self.echo:
            print(f"[{level}] {feature}.{event}: {message or ''}")
        return entry

    # ------------------------------------------------------------------ #
    #  Fetch / Query / Clear                                             #
    # ------------------------------------------------------------------ #
    def fetch_logs(self, limit: int = 100) -> List[LogEntry]:
        """Newest first."""
        if self._repo is not None:
            return self._repo.fetch_logs(limit)
        with self._lock:
            return list(reversed(self.entries))[:limit]

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
        lvl = self._normalize_level(level) if level is not None else None
        if self._repo is not None:
            return self._repo.query_logs(
                username=username, feature=feature, event=event,
                reference_id=reference_id, level=lvl, limit=limit,
            )
        with self._lock:
            rows = list(reversed(self.entries))

        if username is not None:
            rows = [e for e in rows if e.username == username]
        if feature is not None:
            rows = [e for e in rows if e.feature == feature]
        if event is not None:
            rows = [e for e in rows if e.event == event]
        if reference_id is not None:
            rows = [e for e in rows if e.reference_id == reference_id]
        if lvl is not None:
            rows = [e for e in rows if e.log_level == lvl]
        return rows[:limit]

    def clear_logs(self) -> None:
        with self._lock:
            self.entries.clear()
            if self._repo is not None:
                self._repo.clear_logs()

    def close(self) -> None:
        if self._repo is not None:
            self._repo.close()

    # ------------------------------------------------------------------ #
    #  Internals                                                         #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _normalize_level(level: str) -> str:
        lvl = str(level or "").strip().upper()
        if lvl not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        return lvl


# --------------------------------------------------------------------------- #
#  Global instance                                                            #
# --------------------------------------------------------------------------- #
_instance: Logger | None = None
_instance_lock = threading.Lock()


def get_logger() -> Logger:
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Logger.from_config(config_service.logging)
    return _instance
