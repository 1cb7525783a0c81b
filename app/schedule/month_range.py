"""
Month range resolution.

Turns a ``(year, month)`` pair into the inclusive date range used by the
calendar range queries.  Dates are rendered from their discrete
year/month/day components, never through a timezone-aware conversion, so a
date cannot shift across midnight.
"""

from __future__ import annotations

import calendar
import datetime

from pydantic import BaseModel, ConfigDict

from app.schedule.errors import ValidationError

MIN_YEAR = 1000
MAX_YEAR = 9999


class MonthRange(BaseModel):
    """Inclusive ``[start, end]`` calendar date range."""

    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date

    def as_strings(self) -> tuple[str, str]:
        return format_local_date(self.start), format_local_date(self.end)

    def __contains__(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end


def format_local_date(day: datetime.date) -> str:
    """Render ``YYYY-MM-DD`` from the date's own components."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def validate_year_month(year: int, month: int) -> None:
    """Raise :class:`ValidationError` unless ``(year, month)`` is a valid calendar month."""
    for name, value in (("year", year), ("month", month)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValidationError(f"year must be a 4-digit year, got {year}")
    if not 1 <= month <= 12:
        raise ValidationError(f"month must be within 1..12, got {month}")


def next_month(year: int, month: int) -> tuple[int, int]:
    """The month after ``(year, month)``; December rolls over to January."""
    validate_year_month(year, month)
    return (year + 1, 1) if month == 12 else (year, month + 1)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """The month before ``(year, month)``; January rolls back to December."""
    validate_year_month(year, month)
    return (year - 1, 12) if month == 1 else (year, month - 1)


def first_of_month(year: int, month: int) -> datetime.date:
    validate_year_month(year, month)
    return datetime.date(year, month, 1)


def next_month_start(year: int, month: int) -> datetime.date:
    """First day of the following month, the exclusive upper boundary of ``(year, month)``."""
    next_year, following = next_month(year, month)
    if next_year > MAX_YEAR:
        raise ValidationError(f"no month follows {year:04d}-{month:02d}")
    return datetime.date(next_year, following, 1)


def last_of_month(year: int, month: int) -> datetime.date:
    """Last day of the month, the day before the next month starts."""
    validate_year_month(year, month)
    _, length = calendar.monthrange(year, month)
    return datetime.date(year, month, length)


def resolve_month_range(year: int, month: int) -> MonthRange:
    """Inclusive range covering every day of ``(year, month)``."""
    return MonthRange(start=first_of_month(year, month), end=last_of_month(year, month))


def resolve_week_range(day: datetime.date) -> MonthRange:
    """Monday-to-Sunday range containing ``day``."""
    start = day - datetime.timedelta(days=day.weekday())
    return MonthRange(start=start, end=start + datetime.timedelta(days=6))


def month_days(year: int, month: int) -> list[datetime.date]:
    """Every date of ``(year, month)`` in order."""
    validate_year_month(year, month)
    _, length = calendar.monthrange(year, month)
    return [datetime.date(year, month, day) for day in range(1, length + 1)]
