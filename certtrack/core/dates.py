"""Date Normalization — canonical UTC date-times for everything that gets persisted.

Invariants:
    - Output is always timezone-aware UTC, or None
    - Naive inputs are interpreted as UTC
    - Date-only values ("YYYY-MM-DD" or date objects) become midnight UTC
    - Empty strings count as absent

Design Decisions:
    - Pure functions, no IO: used by schemas (validation) and stats (comparison)
    - SQLite returns naive datetimes even for timezone=True columns, so every
      comparison goes through as_utc() first
"""

from datetime import date, datetime, time, timedelta, timezone


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def normalize_datetime(value: object) -> datetime | None:
    """Normalize a raw date/date-time value. Raises ValueError on garbage."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return as_utc(datetime.fromisoformat(text))
        except ValueError:
            return datetime.combine(
                date.fromisoformat(text), time.min, tzinfo=timezone.utc,
            )
    raise ValueError(f"expected a date or date-time, got {type(value).__name__}")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# Widest expiring-window lookup in either direction (about 100 years)
MAX_WINDOW_DAYS = 36500


def cutoff_after_days(days: int, now: datetime | None = None) -> datetime:
    """now + days, in UTC."""
    return as_utc(now or utc_now()) + timedelta(days=days)


def is_expiring_by(expiry: datetime | None, cutoff: datetime) -> bool:
    """True when an expiry is set and falls on or before cutoff."""
    if expiry is None:
        return False
    return as_utc(expiry) <= as_utc(cutoff)
