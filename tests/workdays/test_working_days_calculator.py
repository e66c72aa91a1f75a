import logging
from datetime import date

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.workdays.calculator import WorkingDaysCalculator, weekend_dates
from src.payroll_engine.payroll_engine.workdays.model import Holiday
from src.payroll_engine.payroll_engine.workdays.policies.custom_days import CustomDaysWeeklyOff
from src.payroll_engine.payroll_engine.workdays.policies.standard import StandardWeeklyOff


def test_january_2025_standard_has_23_working_days():
    summary = WorkingDaysCalculator().summarize(2025, 1, StandardWeeklyOff())

    assert summary.total_days_in_month == 31
    assert summary.weekend_count == 8
    assert summary.holiday_count == 0
    assert summary.working_days == 23
    assert not summary.clamped


def test_holiday_on_weekday_is_subtracted():
    holidays = [Holiday(date=date(2025, 1, 1), name="New Year")]
    summary = WorkingDaysCalculator().summarize(2025, 1, StandardWeeklyOff(), holidays)

    assert summary.holiday_count == 1
    assert summary.working_days == 22
    assert summary.holiday_dates == frozenset({date(2025, 1, 1)})


def test_holiday_on_weekend_is_not_double_counted():
    holidays = [Holiday(date=date(2025, 1, 4), name="Saturday Festival")]
    summary = WorkingDaysCalculator().summarize(2025, 1, StandardWeeklyOff(), holidays)

    assert summary.holiday_count == 0
    assert summary.working_days == 23


def test_holidays_outside_month_are_ignored():
    holidays = [Holiday(date=date(2025, 2, 3), name="Other month")]
    summary = WorkingDaysCalculator().summarize(2025, 1, StandardWeeklyOff(), holidays)
    assert summary.working_days == 23


def test_february_leap_year():
    summary = WorkingDaysCalculator().summarize(2024, 2, StandardWeeklyOff())
    assert summary.total_days_in_month == 29
    assert summary.working_days == 21


def test_weekend_dates_helper():
    days = weekend_dates(2025, 1, StandardWeeklyOff())
    assert date(2025, 1, 4) in days
    assert len(days) == 8


def test_negative_working_days_clamped_with_warning(caplog):
    # Weekly off on Monday..Saturday leaves Sundays only; duplicate holiday entries push below zero.
    policy = CustomDaysWeeklyOff(days=frozenset({0, 1, 2, 3, 4, 5}))
    sunday = date(2025, 1, 5)
    holidays = [Holiday(date=sunday, name=f"dup {i}") for i in range(6)]

    with caplog.at_level(logging.WARNING):
        summary = WorkingDaysCalculator().summarize(2025, 1, policy, holidays)

    assert summary.weekend_count == 27
    assert summary.holiday_count == 6
    assert summary.working_days == 0
    assert summary.clamped
    assert "clamping to 0" in caplog.text


@pytest.mark.parametrize("year, month", [(2025, 0), (2025, 13), (0, 5)])
def test_invalid_year_month(year, month):
    with pytest.raises(ValidationError):
        WorkingDaysCalculator().summarize(year, month, StandardWeeklyOff())


def test_months_are_one_based():
    # 1 = January ... 12 = December; 0 is not a month.
    with pytest.raises(ValidationError):
        weekend_dates(2025, 0, StandardWeeklyOff())

    december = WorkingDaysCalculator().summarize(2025, 12, StandardWeeklyOff())
    assert december.total_days_in_month == 31
    assert december.working_days == 23
    assert min(weekend_dates(2025, 12, StandardWeeklyOff())) == date(2025, 12, 6)

    november = WorkingDaysCalculator().summarize(2025, 11, StandardWeeklyOff())
    assert november.total_days_in_month == 30
