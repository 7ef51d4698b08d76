from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from ..core.exceptions import ValidationError


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format")


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def week_dates(anchor: date) -> list[date]:
    """The seven dates of the Sunday-started week containing ``anchor``."""
    start = anchor - timedelta(days=(anchor.weekday() + 1) % 7)
    return [start + timedelta(days=i) for i in range(7)]
