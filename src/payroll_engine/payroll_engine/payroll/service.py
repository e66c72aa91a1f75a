from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.model import AttendanceDay
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..core.constants import DEFAULT_MAX_WORKERS
from ..core.exceptions import DomainError, NoAttendanceData, NoSalaryStructure
from ..fines.engine import FineEngine
from ..salary.model import SalaryStructure
from ..salary.proration import SalaryProrationEngine, daily_rate, loss_of_pay
from ..salary.repository import SalaryRepository
from ..workdays.calculator import WorkingDaysCalculator
from ..workdays.model import Holiday
from ..workdays.repository import HolidayRepository
from .model import EmployeeFailure, OrganizationPolicy, PayrollComputationResult, PayrollRunReport
from .repository import PolicyRepository

logger = logging.getLogger(__name__)


def compute_payroll(
    *,
    structure: SalaryStructure,
    attendance: Iterable[AttendanceDay],
    holidays: Iterable[Holiday],
    policy: OrganizationPolicy,
    year: int,
    month: int,
    employee_id: Optional[int] = None,
) -> PayrollComputationResult:
    """One employee, one month. Pure: no I/O, no clock, no shared state."""
    working = WorkingDaysCalculator().summarize(year, month, policy.weekly_off, holidays)
    summary = AttendanceAggregator(policy.attendance).aggregate(attendance, year=year, month=month)
    proration = SalaryProrationEngine().prorate(structure, working, summary.present_days)

    fine_engine = FineEngine(policy.fine_policy)
    daily_salary = fine_engine.daily_salary(
        monthly_gross=structure.gross_monthly,
        prorated_gross=proration.prorated_gross,
        working_days=working.working_days,
    )
    fines = fine_engine.fine_for_month(summary.violations, daily_salary)

    return PayrollComputationResult(
        employee_id=employee_id,
        year=year,
        month=month,
        working_days=working,
        attendance=summary,
        proration=proration,
        fines=fines,
        daily_salary=daily_salary,
        loss_of_pay=loss_of_pay(daily_rate(structure.gross_monthly, working.working_days), summary.absent_days),
        net_after_fines=proration.prorated_net - fines.payroll_deduction,
    )


class PayrollService:
    """Fetches inputs from the providers and runs the pure engine per employee."""

    def __init__(
        self,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        policies: PolicyRepository,
        *,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._salaries = salaries
        self._attendance = attendance
        self._holidays = holidays
        self._policies = policies
        self._max_workers = max(1, int(max_workers))

    def compute_for_employee(
        self,
        employee_id: int,
        year: int,
        month: int,
        *,
        policy: Optional[OrganizationPolicy] = None,
        holidays: Optional[Sequence[Holiday]] = None,
    ) -> PayrollComputationResult:
        start, end = month_bounds(year, month)

        structure = self._salaries.get_salary_structure(employee_id)
        if structure is None or structure.is_empty:
            raise NoSalaryStructure(f"No salary structure for employee {employee_id}")

        days = self._attendance.get_attendance(employee_id, start, end)
        if not days:
            raise NoAttendanceData(f"No attendance for employee {employee_id} in {year:04d}-{month:02d}")

        if policy is None:
            policy = self._policies.get_organization_policy()
        if holidays is None:
            holidays = self._holidays.get_holidays(year)

        return compute_payroll(
            structure=structure,
            attendance=days,
            holidays=holidays,
            policy=policy,
            year=year,
            month=month,
            employee_id=employee_id,
        )

    def run(
        self,
        employee_ids: Iterable[int],
        year: int,
        month: int,
        *,
        max_workers: Optional[int] = None,
    ) -> PayrollRunReport:
        """Compute a month for many employees on a bounded worker pool.

        A failing employee is recorded in ``failures``; the rest still run.
        """
        month_bounds(year, month)
        employee_ids = list(dict.fromkeys(employee_ids))
        policy = self._policies.get_organization_policy()
        holidays = tuple(self._holidays.get_holidays(year))
        workers = max(1, int(max_workers or self._max_workers))

        def _one(employee_id: int):
            try:
                return self.compute_for_employee(employee_id, year, month, policy=policy, holidays=holidays)
            except DomainError as exc:
                logger.error("Payroll %04d-%02d employee %s: %s", year, month, employee_id, exc)
                return EmployeeFailure(employee_id=employee_id, error_type=type(exc).__name__, message=str(exc))
            except Exception as exc:
                logger.exception("Payroll %04d-%02d employee %s failed unexpectedly", year, month, employee_id)
                return EmployeeFailure(employee_id=employee_id, error_type=type(exc).__name__, message=str(exc))

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="payroll") as pool:
            outcomes = list(pool.map(_one, employee_ids))

        results = tuple(o for o in outcomes if isinstance(o, PayrollComputationResult))
        failures = tuple(o for o in outcomes if isinstance(o, EmployeeFailure))
        logger.info(
            "Payroll run %04d-%02d: %d computed, %d failed (workers=%d)",
            year,
            month,
            len(results),
            len(failures),
            workers,
        )
        return PayrollRunReport(year=year, month=month, results=results, failures=failures)
