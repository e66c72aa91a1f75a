from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    """Organization holiday (supplied by the holiday-management collaborator)."""

    date: date
    name: str
    category: Optional[str] = None


@dataclass(frozen=True)
class WorkingDaysSummary:
    """Derived per (year, month, policy, holidays); never persisted."""

    year: int
    month: int
    total_days_in_month: int
    weekend_count: int
    holiday_count: int
    working_days: int
    weekend_dates: frozenset[date] = field(default_factory=frozenset)
    holiday_dates: frozenset[date] = field(default_factory=frozenset)
    clamped: bool = False

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "totalDaysInMonth": self.total_days_in_month,
            "weekends": self.weekend_count,
            "holidays": self.holiday_count,
            "workingDays": self.working_days,
        }
