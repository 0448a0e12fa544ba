# utils/timestamps.py
from datetime import datetime, timezone


def current_iso_timestamp(now=None) -> str:
    """ISO 8601 in UTC with millisecond precision and a trailing 'Z' (e.g. 2025-06-11T17:12:50.455Z)."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
