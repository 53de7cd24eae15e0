"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime, time, timedelta


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository/persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 string into a timezone-aware datetime.

    Accepts a trailing "Z", explicit offsets, and date-only values
    (midnight). Values without an offset are taken as UTC. An explicit
    offset is kept as given; convert with ensure_utc, which can raise
    OverflowError for instants at the very ends of the datetime range.

    Args:
        value: ISO-8601 timestamp string

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If value is not a valid ISO-8601 timestamp
    """
    text = value.strip()
    if not text:
        raise ValueError("empty timestamp")
    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def isoformat_utc(dt: datetime) -> str:
    """
    Serialize a datetime as ISO-8601 UTC with a "Z" suffix.

    Milliseconds are shown; microseconds only when the value has them.
    Example: 2025-01-01T12:00:00.000Z
    """
    normalized = ensure_utc(dt)
    timespec = "milliseconds" if normalized.microsecond % 1000 == 0 else "microseconds"
    return normalized.isoformat(timespec=timespec).replace("+00:00", "Z")


def utc_day_bounds(moment: datetime) -> tuple[datetime, datetime]:
    """
    Return the first and last instant of the UTC calendar day containing moment.

    The end bound is inclusive (23:59:59.999999).

    Args:
        moment: Any datetime; naive values are taken as UTC

    Returns:
        (start_of_day, end_of_day), both UTC-aware
    """
    day = ensure_utc(moment).date()
    start = datetime.combine(day, time.min, tzinfo=UTC)
    end = start + timedelta(days=1) - timedelta(microseconds=1)
    return start, end
