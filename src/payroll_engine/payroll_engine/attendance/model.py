from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from typing import Optional

from ..common.money import to_decimal
from ..core.constants import DEFAULT_HALF_DAY_MULTIPLIER
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceDay:
    """Domain entity: one employee's attendance for one date (read-only input)."""

    date: date
    status: DayStatus
    punch_in: Optional[time] = None
    punch_out: Optional[time] = None
    late_minutes: int = 0
    early_minutes: int = 0
    leave_approved: bool = False

    @property
    def has_violation(self) -> bool:
        return self.late_minutes > 0 or self.early_minutes > 0


@dataclass(frozen=True)
class Violation:
    date: date
    late_minutes: int = 0
    early_minutes: int = 0


@dataclass(frozen=True)
class AttendanceCalculationSettings:
    """Organization attendance-calculation switches (owned by settings, passed in)."""

    include_leaves: bool = False
    half_day_multiplier: Decimal = DEFAULT_HALF_DAY_MULTIPLIER

    def __post_init__(self):
        object.__setattr__(self, "half_day_multiplier", to_decimal(self.half_day_multiplier, "halfDayMultiplier"))
        if not Decimal("0") <= self.half_day_multiplier <= Decimal("1"):
            raise ValidationError("halfDayMultiplier must be between 0 and 1")


@dataclass(frozen=True)
class AttendanceSummary:
    present_days: Decimal
    absent_days: int
    half_day_count: int
    leave_days: int
    violation_free_days: int
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    @property
    def late_days(self) -> int:
        return sum(1 for v in self.violations if v.late_minutes > 0)

    @property
    def early_days(self) -> int:
        return sum(1 for v in self.violations if v.early_minutes > 0)
