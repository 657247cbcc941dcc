"""Soft-delete lifecycle and the datetime string format shared by every table.

A row is *live* while ``soft_deleted_at`` holds the ``MAX_DATETIME`` sentinel
and *soft-deleted* once the stored value is at or before the current time.
The state is always computed against the clock, never cached.
"""

from datetime import datetime, timezone

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
PRECISE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

MAX_DATETIME = "9999-12-31 23:59:59"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_datetime_string() -> str:
    """Current UTC time in the stored column format."""
    return utc_now().strftime(DATETIME_FORMAT)


def now_precise_datetime_string() -> str:
    """Current UTC time with microseconds, used to order version snapshots."""
    return utc_now().strftime(PRECISE_DATETIME_FORMAT)


def parse_datetime(value: str) -> datetime | None:
    """Parse a stored datetime string as UTC; ``None`` for blank or malformed input."""
    value = value.strip()
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_soft_deleted(soft_deleted_at: str, now: datetime | None = None) -> bool:
    """True iff the stored timestamp is at or before ``now`` (default: the clock)."""
    moment = parse_datetime(soft_deleted_at)
    if moment is None:
        return False
    return moment <= (now or utc_now())
