from datetime import date
from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.attendance.aggregator import AttendanceAggregator
from src.payroll_engine.payroll_engine.attendance.model import AttendanceCalculationSettings, AttendanceDay
from src.payroll_engine.payroll_engine.core.enums import DayStatus
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError


def _day(d, status, **kw):
    return AttendanceDay(date=date(2025, 1, d), status=status, **kw)


def test_counts_present_absent_half_and_leave():
    days = [
        _day(2, DayStatus.PRESENT),
        _day(3, DayStatus.PRESENT, late_minutes=12),
        _day(6, DayStatus.HALF_DAY),
        _day(7, DayStatus.ABSENT),
        _day(8, DayStatus.ON_LEAVE, leave_approved=True),
        _day(9, DayStatus.PENDING),
        _day(10, DayStatus.NOT_MARKED),
    ]
    summary = AttendanceAggregator().aggregate(days, year=2025, month=1)

    assert summary.present_days == Decimal("2.5")
    assert summary.absent_days == 1
    assert summary.half_day_count == 1
    assert summary.leave_days == 1
    assert summary.violation_free_days == 2
    assert [v.date for v in summary.violations] == [date(2025, 1, 3)]
    assert summary.late_days == 1
    assert summary.early_days == 0


def test_approved_leave_counts_when_included():
    settings = AttendanceCalculationSettings(include_leaves=True, half_day_multiplier=Decimal("0.5"))
    days = [
        _day(2, DayStatus.ON_LEAVE, leave_approved=True),
        _day(3, DayStatus.ON_LEAVE, leave_approved=False),
    ]
    summary = AttendanceAggregator(settings).aggregate(days)

    assert summary.present_days == Decimal("1")
    assert summary.leave_days == 2


def test_custom_half_day_multiplier():
    settings = AttendanceCalculationSettings(half_day_multiplier=Decimal("0.75"))
    summary = AttendanceAggregator(settings).aggregate([_day(2, DayStatus.HALF_DAY)])
    assert summary.present_days == Decimal("0.75")


def test_half_day_multiplier_out_of_range():
    with pytest.raises(ValidationError):
        AttendanceCalculationSettings(half_day_multiplier=Decimal("1.5"))


def test_records_outside_month_are_skipped():
    days = [_day(31, DayStatus.PRESENT), AttendanceDay(date=date(2025, 2, 1), status=DayStatus.PRESENT)]
    summary = AttendanceAggregator().aggregate(days, year=2025, month=1)
    assert summary.present_days == Decimal("1")


def test_duplicate_date_raises():
    with pytest.raises(ValidationError):
        AttendanceAggregator().aggregate([_day(2, DayStatus.PRESENT), _day(2, DayStatus.ABSENT)])


def test_negative_minutes_raise():
    with pytest.raises(ValidationError):
        AttendanceAggregator().aggregate([_day(2, DayStatus.PRESENT, late_minutes=-5)])


def test_year_without_month_raises():
    with pytest.raises(ValidationError):
        AttendanceAggregator().aggregate([], year=2025)


def test_float_half_day_multiplier_is_coerced():
    settings = AttendanceCalculationSettings(half_day_multiplier=0.5)
    assert settings.half_day_multiplier == Decimal("0.5")

    summary = AttendanceAggregator(settings).aggregate([_day(2, DayStatus.PRESENT), _day(3, DayStatus.HALF_DAY)])
    assert summary.present_days == Decimal("1.5")
