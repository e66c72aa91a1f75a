from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ..attendance.model import Violation
from ..common.money import round_money, sum_money, to_decimal
from ..core.constants import DEFAULT_SHIFT_HOURS
from ..core.enums import SalaryBasis
from ..core.exceptions import ValidationError
from ..salary.proration import daily_rate
from .factory import FineStrategyFactory
from .model import DailyFine, FinePolicy, FineSummary

logger = logging.getLogger(__name__)


class FineEngine:
    def __init__(self, policy: FinePolicy, *, strategy_factory: Optional[FineStrategyFactory] = None):
        self._policy = policy
        self._strategy = (strategy_factory or FineStrategyFactory()).for_policy(policy)

    @property
    def policy(self) -> FinePolicy:
        return self._policy

    def daily_salary(self, *, monthly_gross: Decimal, prorated_gross: Decimal, working_days: int) -> Decimal:
        if self._policy.effective_salary_basis == SalaryBasis.PRORATED_GROSS:
            return daily_rate(prorated_gross, working_days)
        return daily_rate(monthly_gross, working_days)

    def resolve_shift_hours(self, shift_hours=None) -> Decimal:
        if shift_hours is not None:
            hours = to_decimal(shift_hours, "shift hours")
        elif self._policy.shift_hours is not None:
            hours = self._policy.shift_hours
        else:
            hours = DEFAULT_SHIFT_HOURS
        if hours <= 0:
            raise ValidationError("shift hours must be greater than 0")
        return hours

    def _past_grace(self, violation: Violation) -> Violation:
        # Grace covers late arrival only; early exits are fined from the first minute.
        if violation.late_minutes > self._policy.grace_minutes:
            return violation
        return Violation(date=violation.date, late_minutes=0, early_minutes=violation.early_minutes)

    def fine_for_day(self, violation: Violation, daily_salary, shift_hours=None) -> Decimal:
        return self._daily(violation, to_decimal(daily_salary, "daily salary"), self.resolve_shift_hours(shift_hours)).amount

    def _daily(self, violation: Violation, daily_salary: Decimal, hours: Decimal) -> DailyFine:
        if violation.late_minutes < 0 or violation.early_minutes < 0:
            raise ValidationError(f"Negative late/early minutes on {violation.date.isoformat()}")
        effective = self._past_grace(violation)
        amount = Decimal("0.00")
        if self._policy.enabled and (effective.late_minutes > 0 or effective.early_minutes > 0):
            amount = round_money(self._strategy.fine(effective, daily_salary=daily_salary, shift_hours=hours))
        return DailyFine(
            date=violation.date,
            late_minutes=effective.late_minutes,
            early_minutes=effective.early_minutes,
            amount=amount,
        )

    def fine_for_month(self, violations: Iterable[Violation], daily_salary, shift_hours=None) -> FineSummary:
        salary = to_decimal(daily_salary, "daily salary")
        hours = self.resolve_shift_hours(shift_hours)
        daily = tuple(self._daily(v, salary, hours) for v in violations)
        summary = FineSummary(
            total=sum_money(d.amount for d in daily),
            applied_to_payroll=self._policy.enabled and self._policy.apply_to_payroll,
            daily=daily,
        )
        if summary.total > 0:
            logger.debug(
                "Fines: %s over %d day(s), method=%s, applied_to_payroll=%s",
                summary.total,
                sum(1 for d in daily if d.amount > 0),
                self._policy.method.value,
                summary.applied_to_payroll,
            )
        return summary
