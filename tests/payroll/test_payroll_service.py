from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.attendance.model import AttendanceDay
from src.payroll_engine.payroll_engine.core.enums import ComponentKind, DayStatus
from src.payroll_engine.payroll_engine.core.exceptions import NoAttendanceData, NoSalaryStructure, ValidationError
from src.payroll_engine.payroll_engine.fines.model import FinePolicy
from src.payroll_engine.payroll_engine.payroll.model import OrganizationPolicy
from src.payroll_engine.payroll_engine.payroll.service import PayrollService, compute_payroll
from src.payroll_engine.payroll_engine.salary.model import SalaryComponent, SalaryStructure
from src.payroll_engine.payroll_engine.workdays.model import Holiday

# Weekdays of January 2025 except the 1st (holiday).
WORKDAYS = [2, 3, 6, 7, 8, 9, 10, 13, 14, 15, 16, 17, 20, 21, 22, 23, 24, 27, 28, 29, 30, 31]


def _structure():
    return SalaryStructure.from_components(
        [
            SalaryComponent("Basic Salary", Decimal("22000"), ComponentKind.EARNING),
            SalaryComponent("Employee PF", Decimal("1000"), ComponentKind.DEDUCTION),
        ]
    )


def _attendance():
    days = []
    for d in WORKDAYS:
        if d in (30, 31):
            days.append(AttendanceDay(date=date(2025, 1, d), status=DayStatus.ABSENT))
        elif d == 6:
            days.append(AttendanceDay(date=date(2025, 1, d), status=DayStatus.PRESENT, late_minutes=30))
        else:
            days.append(AttendanceDay(date=date(2025, 1, d), status=DayStatus.PRESENT))
    return days


def _policy(**fine_kw):
    return OrganizationPolicy(fine_policy=FinePolicy(enabled=True, **fine_kw))


class FakeSalaryRepo:
    def __init__(self, structures):
        self._structures = structures

    def get_salary_structure(self, employee_id):
        value = self._structures.get(employee_id)
        if isinstance(value, Exception):
            raise value
        return value


class FakeAttendanceRepo:
    def __init__(self, days_by_employee):
        self._days = days_by_employee
        self.calls = []

    def get_attendance(self, employee_id, start, end):
        self.calls.append((employee_id, start, end))
        return self._days.get(employee_id, [])


class FakeHolidayRepo:
    def __init__(self, holidays):
        self._holidays = holidays
        self.calls = 0

    def get_holidays(self, year):
        self.calls += 1
        return [h for h in self._holidays if h.date.year == year]


class FakePolicyRepo:
    def __init__(self, policy):
        self._policy = policy
        self.calls = 0

    def get_organization_policy(self):
        self.calls += 1
        return self._policy


HOLIDAYS = [Holiday(date=date(2025, 1, 1), name="New Year")]


def test_compute_payroll_end_to_end():
    result = compute_payroll(
        structure=_structure(),
        attendance=_attendance(),
        holidays=HOLIDAYS,
        policy=_policy(),
        year=2025,
        month=1,
        employee_id=7,
    )

    assert result.working_days.working_days == 22
    assert result.attendance.present_days == Decimal("20")
    assert result.attendance.absent_days == 2
    assert result.proration.prorated_gross == Decimal("20000.00")
    assert result.proration.prorated_deductions == Decimal("909.09")
    assert result.proration.prorated_net == Decimal("19090.91")
    assert result.daily_salary == Decimal("1000")
    assert result.loss_of_pay == Decimal("2000.00")
    assert result.fines.total == Decimal("55.56")
    assert result.net_after_fines == Decimal("19035.35")

    payload = result.to_dict()
    assert payload["employeeId"] == 7
    assert payload["period"] == "2025-01"
    assert payload["netAfterFines"] == "19035.35"
    assert payload["workingDays"]["workingDays"] == 22


def test_fines_not_applied_leave_net_untouched():
    result = compute_payroll(
        structure=_structure(),
        attendance=_attendance(),
        holidays=HOLIDAYS,
        policy=_policy(apply_to_payroll=False),
        year=2025,
        month=1,
    )
    assert result.fines.total == Decimal("55.56")
    assert result.net_after_fines == result.proration.prorated_net


def _service(**kw):
    salaries = FakeSalaryRepo({1: _structure(), 2: None, 3: _structure(), 4: RuntimeError("db down")})
    attendance = FakeAttendanceRepo({1: _attendance(), 4: _attendance()})
    holidays = FakeHolidayRepo(HOLIDAYS)
    policies = FakePolicyRepo(_policy())
    return PayrollService(salaries, attendance, holidays, policies, **kw), attendance, holidays, policies


def test_compute_for_employee_reads_month_range():
    service, attendance, _, _ = _service()
    result = service.compute_for_employee(1, 2025, 1)

    assert result.employee_id == 1
    assert attendance.calls == [(1, date(2025, 1, 1), date(2025, 1, 31))]


def test_compute_for_employee_missing_data():
    service, _, _, _ = _service()
    with pytest.raises(NoSalaryStructure):
        service.compute_for_employee(2, 2025, 1)
    with pytest.raises(NoAttendanceData):
        service.compute_for_employee(3, 2025, 1)


def test_empty_structure_is_missing():
    salaries = FakeSalaryRepo({1: SalaryStructure.from_components([])})
    service = PayrollService(salaries, FakeAttendanceRepo({}), FakeHolidayRepo([]), FakePolicyRepo(_policy()))
    with pytest.raises(NoSalaryStructure):
        service.compute_for_employee(1, 2025, 1)


def test_run_isolates_failures():
    service, _, holidays, policies = _service(max_workers=3)
    report = service.run([1, 2, 3, 4, 1], 2025, 1)

    assert [r.employee_id for r in report.results] == [1]
    failures = {f.employee_id: f.error_type for f in report.failures}
    assert failures == {2: "NoSalaryStructure", 3: "NoAttendanceData", 4: "RuntimeError"}
    assert not report.ok
    assert policies.calls == 1
    assert holidays.calls == 1


def test_run_all_good():
    service, _, _, _ = _service()
    report = service.run([1], 2025, 1, max_workers=1)
    assert report.ok
    assert report.results[0].net_after_fines == Decimal("19035.35")


def test_run_rejects_bad_month():
    service, _, _, _ = _service()
    with pytest.raises(ValidationError):
        service.run([1], 2025, 13)
