from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...attendance.model import Violation
from ...core.constants import MINUTES_PER_HOUR
from ...core.enums import FineMultiplier, FixedAmountUnit, ViolationKind
from ..model import FineRule
from .base import FineStrategy

_SALARY_FACTORS = {
    FineMultiplier.ONE_X_SALARY: Decimal("1"),
    FineMultiplier.TWO_X_SALARY: Decimal("2"),
    FineMultiplier.THREE_X_SALARY: Decimal("3"),
    FineMultiplier.HALF_DAY: Decimal("0.5"),
    FineMultiplier.FULL_DAY: Decimal("1"),
}


class RuleBasedFineStrategy(FineStrategy):
    """Configured rules, evaluated in order; the first rule matching the violation kind wins.

    Late arrival and early exit on the same day are separate events and their
    fines are summed.
    """

    def fine(self, violation: Violation, *, daily_salary: Decimal, shift_hours: Decimal) -> Decimal:
        total = Decimal("0")
        for kind, minutes in (
            (ViolationKind.LATE_ARRIVAL, violation.late_minutes),
            (ViolationKind.EARLY_EXIT, violation.early_minutes),
        ):
            if minutes <= 0:
                continue
            rule = self.first_matching(kind)
            if rule is not None:
                total += self.rule_amount(rule, minutes=minutes, daily_salary=daily_salary)
        return total

    def first_matching(self, kind: ViolationKind) -> Optional[FineRule]:
        return next((r for r in self._policy.rules if r.matches(kind)), None)

    @staticmethod
    def rule_amount(rule: FineRule, *, minutes: int, daily_salary: Decimal) -> Decimal:
        if rule.multiplier != FineMultiplier.FIXED_AMOUNT:
            return _SALARY_FACTORS[rule.multiplier] * daily_salary

        amount = rule.fixed_amount
        if rule.fixed_amount_unit == FixedAmountUnit.PER_MINUTE:
            return amount * Decimal(minutes)
        if rule.fixed_amount_unit == FixedAmountUnit.PER_HOUR:
            return amount * Decimal(minutes) / MINUTES_PER_HOUR
        return amount
