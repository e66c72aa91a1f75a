from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import to_decimal
from ..core.enums import FineMethod, FineMultiplier, FixedAmountUnit, SalaryBasis, ViolationKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class FineRule:
    multiplier: FineMultiplier
    applies_to: ViolationKind = ViolationKind.BOTH
    fixed_amount: Optional[Decimal] = None
    fixed_amount_unit: FixedAmountUnit = FixedAmountUnit.FIXED

    def __post_init__(self):
        object.__setattr__(self, "multiplier", FineMultiplier(self.multiplier))
        object.__setattr__(self, "applies_to", ViolationKind(self.applies_to))
        object.__setattr__(self, "fixed_amount_unit", FixedAmountUnit(self.fixed_amount_unit))
        if self.fixed_amount is not None:
            object.__setattr__(self, "fixed_amount", to_decimal(self.fixed_amount, "fixedAmount"))
        if self.multiplier == FineMultiplier.FIXED_AMOUNT:
            if self.fixed_amount is None or self.fixed_amount < 0:
                raise ValidationError("Fixed amount fine rule needs a non-negative fixedAmount")

    def matches(self, kind: ViolationKind) -> bool:
        return self.applies_to == ViolationKind.BOTH or self.applies_to == kind


@dataclass(frozen=True)
class FinePolicy:
    enabled: bool = False
    apply_to_payroll: bool = True
    method: FineMethod = FineMethod.SHIFT_BASED
    rules: tuple[FineRule, ...] = field(default_factory=tuple)
    shift_hours: Optional[Decimal] = None
    fine_early_exits: bool = False
    grace_minutes: int = 0
    fine_per_hour: Optional[Decimal] = None
    salary_basis: SalaryBasis = SalaryBasis.MONTHLY_GROSS

    def __post_init__(self):
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "method", FineMethod(self.method))
        object.__setattr__(self, "salary_basis", SalaryBasis(self.salary_basis))
        if self.shift_hours is not None:
            object.__setattr__(self, "shift_hours", to_decimal(self.shift_hours, "shiftHours"))
        if self.fine_per_hour is not None:
            object.__setattr__(self, "fine_per_hour", to_decimal(self.fine_per_hour, "finePerHour"))
        if isinstance(self.grace_minutes, bool) or not isinstance(self.grace_minutes, int):
            raise ValidationError("graceTimeMinutes must be a whole number")
        if self.shift_hours is not None and self.shift_hours <= 0:
            raise ValidationError("shiftHours must be greater than 0")
        if self.grace_minutes < 0:
            raise ValidationError("graceTimeMinutes must not be negative")
        if self.method == FineMethod.FIXED_PER_HOUR and (self.fine_per_hour is None or self.fine_per_hour < 0):
            raise ValidationError("fixedPerHour fine method needs a non-negative finePerHour")

    @property
    def effective_salary_basis(self) -> SalaryBasis:
        # Shift-based fines always come from the monthly gross, never the prorated one.
        if self.method == FineMethod.SHIFT_BASED:
            return SalaryBasis.MONTHLY_GROSS
        return self.salary_basis


@dataclass(frozen=True)
class DailyFine:
    date: date
    late_minutes: int
    early_minutes: int
    amount: Decimal


@dataclass(frozen=True)
class FineSummary:
    total: Decimal
    applied_to_payroll: bool
    daily: tuple[DailyFine, ...] = field(default_factory=tuple)

    @property
    def payroll_deduction(self) -> Decimal:
        return self.total if self.applied_to_payroll else Decimal("0")

    @property
    def late_days(self) -> int:
        return sum(1 for d in self.daily if d.amount > 0 and d.late_minutes > 0)

    @property
    def total_late_minutes(self) -> int:
        return sum(d.late_minutes for d in self.daily if d.amount > 0)

    @property
    def early_days(self) -> int:
        return sum(1 for d in self.daily if d.amount > 0 and d.early_minutes > 0)

    @property
    def total_early_minutes(self) -> int:
        return sum(d.early_minutes for d in self.daily if d.amount > 0)
