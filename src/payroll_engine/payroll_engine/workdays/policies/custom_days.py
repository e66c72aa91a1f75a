from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ...core.exceptions import ValidationError
from .base import WeeklyOffPolicy


@dataclass(frozen=True)
class CustomDaysWeeklyOff(WeeklyOffPolicy):
    """Any set of weekdays off (Python numbering: Monday=0 ... Sunday=6)."""

    days: frozenset[int]

    def __post_init__(self):
        bad = [d for d in self.days if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 6]
        if bad:
            raise ValidationError(f"Invalid weekday(s) for weekly off: {sorted(map(repr, bad))}")
        object.__setattr__(self, "days", frozenset(self.days))

    def is_weekly_off(self, day: date) -> bool:
        return day.weekday() in self.days

    def describe(self) -> str:
        if not self.days:
            return "Custom (no weekly off)"
        return "Custom (" + ", ".join(calendar.day_name[d] for d in sorted(self.days)) + ")"
