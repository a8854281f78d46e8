# prreviewer/utils/datetime_tools.py
from __future__ import annotations
from datetime import datetime, timezone

# DB convention: timestamps are stored as naive UTC


def utcnow() -> datetime:
    """Current time as naive UTC, ready for a DateTime column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat_utc(value: datetime | None) -> str | None:
    """Render a stored timestamp as ISO-8601 UTC with a trailing 'Z'.

    - None stays None (e.g. mergedAt of an open PR).
    - Naive values are treated as UTC; aware values are converted to UTC.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="microseconds") + "Z"
