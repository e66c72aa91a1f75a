from __future__ import annotations

from decimal import Decimal

from ...attendance.model import Violation
from ...core.constants import MINUTES_PER_HOUR
from .base import FineStrategy


class FixedPerHourFineStrategy(FineStrategy):
    """Legacy flat rate: fine per hour x (minutes / 60)."""

    def fine(self, violation: Violation, *, daily_salary: Decimal, shift_hours: Decimal) -> Decimal:
        minutes = violation.late_minutes
        if self._policy.fine_early_exits:
            minutes += violation.early_minutes
        if minutes <= 0:
            return Decimal("0")
        return self._policy.fine_per_hour * Decimal(minutes) / MINUTES_PER_HOUR
