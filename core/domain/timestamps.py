"""
UTC timestamp helpers shared by the domain and the store adapters.
"""
import calendar
from datetime import MAXYEAR, MINYEAR, datetime, timezone
from typing import Optional


def as_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def add_months(value: datetime, months: int) -> datetime:
    """
    Add calendar months, clamping the day to the end of the target month.

    Jan 31 + 1 month is Feb 28 (Feb 29 in leap years) and Feb 29 + 12 months
    is Feb 28. Time of day and tzinfo are preserved. Results past the year
    9999 are capped at ``datetime.max``.

    Args:
        value: Starting datetime
        months: Number of months to add (may be negative)

    Returns:
        Shifted datetime
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    if year > MAXYEAR:
        return datetime.max.replace(tzinfo=value.tzinfo)
    if year < MINYEAR:
        return datetime.min.replace(tzinfo=value.tzinfo)
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a stored timestamp.

    Accepts datetimes and ISO-8601 strings (including a trailing ``Z``).
    Empty or unparseable values yield None, which callers treat as
    "no current expiry".
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def format_timestamp(value: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds, e.g. 2025-10-01T00:00:00.000Z."""
    utc = as_utc(value)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
