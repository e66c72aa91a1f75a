from __future__ import annotations

from decimal import Decimal

from ..common.money import round_money, sum_money, to_decimal
from ..core.enums import ComponentKind
from ..core.exceptions import NoSalaryStructure, ValidationError
from ..workdays.model import WorkingDaysSummary
from .model import ProratedComponent, ProrationResult, SalaryStructure

_ZERO = Decimal("0")
_ONE = Decimal("1")


def attendance_ratio(present_days: Decimal, working_days: int) -> Decimal:
    """min(1, present / working); 0 when the month has no working days."""
    if working_days <= 0:
        return _ZERO
    return min(_ONE, present_days / Decimal(working_days))


def daily_rate(monthly_gross: Decimal, working_days: int) -> Decimal:
    if working_days <= 0:
        return _ZERO
    return to_decimal(monthly_gross, "monthly gross") / Decimal(working_days)


def loss_of_pay(rate: Decimal, absent_days) -> Decimal:
    absent = to_decimal(absent_days, "absent days")
    if absent < 0:
        raise ValidationError("absent days must not be negative")
    return round_money(rate * absent)


class SalaryProrationEngine:
    """Scale each component by the attendance ratio.

    Every component is rounded on its own, and totals are sums of the rounded
    components, so the breakdown always adds up to the reported gross/net.
    """

    def prorate(
        self,
        structure: SalaryStructure,
        summary: WorkingDaysSummary,
        present_days,
    ) -> ProrationResult:
        if structure is None or structure.is_empty:
            raise NoSalaryStructure("Salary structure has no components")

        present = to_decimal(present_days, "present days")
        if present < 0:
            raise ValidationError("present days must not be negative")

        degenerate = summary.working_days <= 0
        ratio = attendance_ratio(present, summary.working_days)

        components = tuple(
            ProratedComponent(
                name=c.name,
                kind=c.kind,
                monthly_amount=c.monthly_amount,
                prorated_amount=round_money(c.monthly_amount * ratio),
            )
            for c in structure.components
        )

        gross = sum_money(c.prorated_amount for c in components if c.kind == ComponentKind.EARNING)
        deductions = sum_money(c.prorated_amount for c in components if c.kind == ComponentKind.DEDUCTION)

        return ProrationResult(
            attendance_ratio=ratio,
            prorated_gross=gross,
            prorated_deductions=deductions,
            prorated_net=gross - deductions,
            components=components,
            degenerate_month=degenerate,
        )
