"""
log_entry.py

Dataclass for a single log entry.

• from_dict()  – builds the object from a DB/JSON dict
• as_dict()    – returns a dict for display/export with
                 - timestamp_utc (ISO UTC)
                 - timestamp     (local display time)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import core.helpers.date_time_helper as dt


@dataclass
class LogEntry:
    timestamp: datetime          # always UTC
    log_level: str
    username: Optional[str]
    feature: str
    event: str
    reference_id: Optional[str] = None
    message: Optional[str] = None
    id: Optional[int] = None

    # -------------------- Factory ------------------------------------ #
    @classmethod
    def from_dict(cls, data: dict) -> "LogEntry":
        """Build a LogEntry from a DB/JSON dict."""
        ts = data["timestamp"]
        if isinstance(ts, str):
            ts = datetime.fromisoformat(ts)
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return cls(
            id=data.get("id"),
            timestamp=ts,
            log_level=data.get("log_level", "INFO"),
            username=data.get("username"),
            feature=data.get("feature", ""),
            event=data.get("event", ""),
            reference_id=data.get("reference_id"),
            message=data.get("message"),
        )

    # -------------------- Dict for display / export ------------------ #
    def as_dict(self) -> dict:
        utc_iso = self.timestamp.replace(microsecond=0).isoformat()
        return {
            "id": self.id,
            "timestamp_utc": utc_iso,
            "timestamp": dt.utc_to_local_str(utc_iso),
            "log_level": self.log_level,
            "username": self.username,
            "feature": self.feature,
            "event": self.event,
            "reference_id": self.reference_id,
            "message": self.message,
        }
