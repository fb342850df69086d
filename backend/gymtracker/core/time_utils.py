import logging
import math
from datetime import date, datetime, timedelta, timezone, tzinfo

logger = logging.getLogger(__name__)


def resolve_timezone(tz_name: str | None) -> tzinfo | None:
    """Map a settings timezone name to a tzinfo used for date keys.

    - 'local' or None: return None, meaning the system local timezone
      (resolved per instant by `datetime.astimezone()`, so DST applies).
    - 'UTC' / IANA name (e.g., 'America/New_York'): return that zone.
    - Unknown names fall back to the system local timezone.
    """
    if not tz_name or tz_name == "local":
        return None
    if tz_name.upper() == "UTC":
        return timezone.utc
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("unknown timezone %r, using the system local timezone", tz_name)
        return None


def to_zone(dt: datetime, tz: tzinfo | None) -> datetime:
    """Convert a datetime (assume UTC if naive) into `tz` (None = system local)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(tz)


def ensure_utc(dt: datetime) -> datetime:
    """Return `dt` as an aware UTC datetime. Naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def local_date(dt: datetime, tz: tzinfo | None) -> date:
    return to_zone(dt, tz).date()


def date_key(dt: datetime, tz: tzinfo | None) -> str:
    """Calendar day of `dt` in `tz` as 'YYYY-MM-DD'."""
    return local_date(dt, tz).isoformat()


def monday_of(d: date) -> date:
    # Monday = 0, Sunday = 6, so Sunday belongs to the preceding Monday
    return d - timedelta(days=d.weekday())


def week_of_year_label(dt: datetime, tz: tzinfo | None) -> str:
    """Chart label 'Week N' for the week-of-year containing `dt`.

    N = ceil((days since Jan 1 midnight + weekday of Jan 1 + 1) / 7), where
    the day count is fractional (time of day included) and the weekday counts
    Sunday as 0.
    Example: 2025-01-01 10:00 (Jan 1 is a Wednesday) -> 'Week 1'
    """
    local = to_zone(dt, tz)
    jan1_naive = datetime(local.year, 1, 1)
    if tz is None:
        jan1 = jan1_naive.astimezone()
    else:
        jan1 = jan1_naive.replace(tzinfo=tz)
    days = (local.timestamp() - jan1.timestamp()) / 86400
    jan1_weekday = (jan1.weekday() + 1) % 7
    week = math.ceil((days + jan1_weekday + 1) / 7)
    return f"Week {week}"


def minutes_between(start: datetime, end: datetime) -> float:
    """Elapsed minutes between two datetimes (fractional)."""
    return (ensure_utc(end) - ensure_utc(start)).total_seconds() / 60


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Unlike round(), halves never go to the even neighbour.
    """
    return math.floor(value + 0.5)
