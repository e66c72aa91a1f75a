from __future__ import annotations

from decimal import Decimal

from ...attendance.model import Violation
from ...core.constants import MINUTES_PER_HOUR
from .base import FineStrategy


class ShiftBasedFineStrategy(FineStrategy):
    """Fine = (daily salary / shift hours) x (minutes / 60).

    Early-exit minutes are fined only when the policy turns on ``fine_early_exits``.
    """

    def fine(self, violation: Violation, *, daily_salary: Decimal, shift_hours: Decimal) -> Decimal:
        minutes = violation.late_minutes
        if self._policy.fine_early_exits:
            minutes += violation.early_minutes
        if minutes <= 0:
            return Decimal("0")
        hourly_rate = daily_salary / shift_hours
        return hourly_rate * Decimal(minutes) / MINUTES_PER_HOUR
