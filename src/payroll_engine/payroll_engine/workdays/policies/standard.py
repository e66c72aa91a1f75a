from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from .base import WeeklyOffPolicy


@dataclass(frozen=True)
class StandardWeeklyOff(WeeklyOffPolicy):
    """Saturday and Sunday off."""

    def is_weekly_off(self, day: date) -> bool:
        return day.weekday() in (calendar.SATURDAY, calendar.SUNDAY)

    def describe(self) -> str:
        return "Standard (Saturday + Sunday)"
