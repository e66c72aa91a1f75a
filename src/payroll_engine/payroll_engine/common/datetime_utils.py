from __future__ import annotations

import calendar
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterator

from ..core.constants import MINUTES_PER_HOUR
from ..core.exceptions import ValidationError
from .validators import require_year_month


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError as exc:
        raise ValidationError(f"Invalid time (expected HH:MM): {value!r}") from exc


def month_bounds(year: int, month: int) -> tuple[date, date]:
    require_year_month(year, month)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def iter_month_dates(year: int, month: int) -> Iterator[date]:
    start, end = month_bounds(year, month)
    for day in range(start.day, end.day + 1):
        yield date(year, month, day)


def shift_hours_between(start: time, end: time) -> Decimal:
    """Shift length in hours; an end before the start means an overnight shift."""
    start_minutes = start.hour * 60 + start.minute
    end_minutes = end.hour * 60 + end.minute
    diff = end_minutes - start_minutes
    if diff < 0:
        diff += 24 * 60
    return Decimal(diff) / MINUTES_PER_HOUR
