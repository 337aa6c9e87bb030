"""
date_time_helper.py

Helper functions for UTC timestamps and their local display form.

All timestamps are created and stored in UTC; conversion to local time happens
only for display (log rendering, status output).
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from core.config.config_service import config_service

# Local timezone for display, configured via [General] timezone
LOCAL_TZ = ZoneInfo(config_service.general.timezone)


def utc_now() -> datetime:
    """Current UTC time as an aware datetime without microseconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def utc_to_local_str(utc_iso: str) -> str:
    """
    Formats a UTC ISO8601 timestamp as a human-readable local string.

    :param utc_iso: UTC time as ISO string
    :return: String in format "DD.MM.YYYY HH:mm:ss" (local time)
    """
    dt_utc = datetime.fromisoformat(utc_iso)
    if dt_utc.tzinfo is None:
        dt_utc = dt_utc.replace(tzinfo=timezone.utc)
    return dt_utc.astimezone(LOCAL_TZ).strftime("%d.%m.%Y %H:%M:%S")
