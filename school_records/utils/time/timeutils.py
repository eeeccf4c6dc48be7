"""Time utilities - DRY principle"""
from datetime import date, datetime, timezone
from typing import Any

# MongoDB stores UTC; pymongo hands back naive UTC datetimes, so we store them that way too

def now_utc() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

def to_naive_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)

def parse_datetime(value: Any) -> datetime:
    """Parse a datetime, date or ISO-8601 string into a naive UTC datetime"""
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return to_naive_utc(datetime.fromisoformat(text))
        except ValueError as e:
            raise ValueError(f"Invalid date format, expected ISO-8601: {value}") from e
    raise ValueError(f"Invalid date value: {value!r}")

def years_before(dt: datetime, years: int) -> datetime:
    """Same calendar instant `years` earlier (Feb 29 falls back to Feb 28)"""
    try:
        return dt.replace(year=dt.year - years)
    except ValueError:
        return dt.replace(year=dt.year - years, day=28)
