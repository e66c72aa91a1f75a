from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..attendance.model import AttendanceCalculationSettings, AttendanceSummary
from ..fines.model import FinePolicy, FineSummary
from ..salary.model import ProrationResult
from ..workdays.model import WorkingDaysSummary
from ..workdays.policies.base import WeeklyOffPolicy
from ..workdays.policies.standard import StandardWeeklyOff


@dataclass(frozen=True)
class OrganizationPolicy:
    """Everything the engine needs from organization settings, passed explicitly."""

    weekly_off: WeeklyOffPolicy = field(default_factory=StandardWeeklyOff)
    fine_policy: FinePolicy = field(default_factory=FinePolicy)
    attendance: AttendanceCalculationSettings = field(default_factory=AttendanceCalculationSettings)


@dataclass(frozen=True)
class PayrollComputationResult:
    year: int
    month: int
    working_days: WorkingDaysSummary
    attendance: AttendanceSummary
    proration: ProrationResult
    fines: FineSummary
    daily_salary: Decimal
    loss_of_pay: Decimal
    net_after_fines: Decimal
    employee_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "period": f"{self.year:04d}-{self.month:02d}",
            "workingDays": self.working_days.to_dict(),
            "attendance": {
                "presentDays": str(self.attendance.present_days),
                "absentDays": self.attendance.absent_days,
                "halfDays": self.attendance.half_day_count,
                "leaveDays": self.attendance.leave_days,
                "violationFreeDays": self.attendance.violation_free_days,
            },
            "attendanceRatio": str(self.proration.attendance_ratio),
            "degenerateMonth": self.proration.degenerate_month,
            "components": [
                {
                    "name": c.name,
                    "type": c.kind.value,
                    "monthlyAmount": str(c.monthly_amount),
                    "proratedAmount": str(c.prorated_amount),
                }
                for c in self.proration.components
            ],
            "proratedGross": str(self.proration.prorated_gross),
            "proratedNet": str(self.proration.prorated_net),
            "dailySalary": str(self.daily_salary),
            "lossOfPay": str(self.loss_of_pay),
            "fines": {
                "total": str(self.fines.total),
                "appliedToPayroll": self.fines.applied_to_payroll,
                "lateDays": self.fines.late_days,
                "totalLateMinutes": self.fines.total_late_minutes,
                "earlyDays": self.fines.early_days,
                "totalEarlyMinutes": self.fines.total_early_minutes,
            },
            "netAfterFines": str(self.net_after_fines),
        }


@dataclass(frozen=True)
class EmployeeFailure:
    employee_id: int
    error_type: str
    message: str


@dataclass(frozen=True)
class PayrollRunReport:
    year: int
    month: int
    results: tuple[PayrollComputationResult, ...] = field(default_factory=tuple)
    failures: tuple[EmployeeFailure, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.failures
