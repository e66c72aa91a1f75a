from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError
from .model import AttendanceCalculationSettings, AttendanceDay, AttendanceSummary, Violation


class AttendanceAggregator:
    """Reduce a month of AttendanceDay records into payroll counts.

    Present counts 1, Half Day counts ``half_day_multiplier`` toward present
    days, approved leave counts 1 only when ``include_leaves`` is on.
    Pending / Not Marked never count as present.
    """

    def __init__(self, settings: Optional[AttendanceCalculationSettings] = None):
        self._settings = settings or AttendanceCalculationSettings()

    def aggregate(
        self,
        days: Iterable[AttendanceDay],
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> AttendanceSummary:
        if (year is None) != (month is None):
            raise ValidationError("year and month must be given together")
        bounds = month_bounds(year, month) if year is not None else None

        present = Decimal("0")
        absent = half_days = leaves = violation_free = 0
        violations: list[Violation] = []
        seen: set = set()

        for day in sorted(days, key=lambda d: d.date):
            if bounds and not bounds[0] <= day.date <= bounds[1]:
                continue
            if day.date in seen:
                raise ValidationError(f"Duplicate attendance record for {day.date.isoformat()}")
            seen.add(day.date)
            if day.late_minutes < 0 or day.early_minutes < 0:
                raise ValidationError(f"Negative late/early minutes on {day.date.isoformat()}")

            status = day.status
            if status == DayStatus.PRESENT:
                present += 1
            elif status == DayStatus.HALF_DAY:
                half_days += 1
                present += self._settings.half_day_multiplier
            elif status == DayStatus.ABSENT:
                absent += 1
            elif status == DayStatus.ON_LEAVE:
                leaves += 1
                if day.leave_approved and self._settings.include_leaves:
                    present += 1

            if day.has_violation:
                violations.append(
                    Violation(date=day.date, late_minutes=day.late_minutes, early_minutes=day.early_minutes)
                )
            elif status in (DayStatus.PRESENT, DayStatus.HALF_DAY):
                violation_free += 1

        return AttendanceSummary(
            present_days=present,
            absent_days=absent,
            half_day_count=half_days,
            leave_days=leaves,
            violation_free_days=violation_free,
            violations=tuple(violations),
        )
