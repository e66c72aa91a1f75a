from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ..common.datetime_utils import iter_month_dates, month_bounds
from .model import Holiday, WorkingDaysSummary
from .policies.base import WeeklyOffPolicy

logger = logging.getLogger(__name__)


def weekend_dates(year: int, month: int, policy: WeeklyOffPolicy) -> frozenset[date]:
    """Dates of the month that ``policy`` marks as weekly off."""
    return frozenset(day for day in iter_month_dates(year, month) if policy.is_weekly_off(day))


class WorkingDaysCalculator:
    """Working days = days in month - weekly offs - holidays not already on a weekly off."""

    def summarize(
        self,
        year: int,
        month: int,
        policy: WeeklyOffPolicy,
        holidays: Iterable[Holiday] = (),
    ) -> WorkingDaysSummary:
        start, end = month_bounds(year, month)
        total_days = end.day

        weekends = weekend_dates(year, month, policy)
        counted = [h for h in holidays if start <= h.date <= end and h.date not in weekends]
        holiday_dates = frozenset(h.date for h in counted)
        if len(holiday_dates) != len(counted):
            logger.warning(
                "Holiday list for %04d-%02d has %d entries on %d distinct dates",
                year,
                month,
                len(counted),
                len(holiday_dates),
            )

        working_days = total_days - len(weekends) - len(counted)
        clamped = False
        if working_days < 0:
            logger.warning(
                "Working days for %04d-%02d computed as %d (days=%d weekends=%d holidays=%d); clamping to 0",
                year,
                month,
                working_days,
                total_days,
                len(weekends),
                len(counted),
            )
            working_days = 0
            clamped = True

        return WorkingDaysSummary(
            year=year,
            month=month,
            total_days_in_month=total_days,
            weekend_count=len(weekends),
            holiday_count=len(counted),
            working_days=working_days,
            weekend_dates=weekends,
            holiday_dates=holiday_dates,
            clamped=clamped,
        )
