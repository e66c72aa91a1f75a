import pytest

from src.payroll_engine.payroll_engine.core.enums import SaturdayParity
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.workdays.factory import WeeklyOffPolicyFactory, js_weekday_to_python
from src.payroll_engine.payroll_engine.workdays.policies.custom_days import CustomDaysWeeklyOff
from src.payroll_engine.payroll_engine.workdays.policies.odd_even_saturday import OddEvenSaturdayWeeklyOff
from src.payroll_engine.payroll_engine.workdays.policies.standard import StandardWeeklyOff


def test_js_weekday_mapping():
    assert js_weekday_to_python(0) == 6  # Sunday
    assert js_weekday_to_python(1) == 0  # Monday
    assert js_weekday_to_python(6) == 5  # Saturday


def test_empty_settings_are_standard():
    assert isinstance(WeeklyOffPolicyFactory().from_settings(None), StandardWeeklyOff)


def test_odd_even_saturday_with_parity():
    policy = WeeklyOffPolicyFactory().from_settings({"weeklyOffPattern": "oddEvenSaturday", "saturdayParity": "even"})
    assert isinstance(policy, OddEvenSaturdayWeeklyOff)
    assert policy.parity == SaturdayParity.EVEN


def test_custom_pattern_from_weekly_holidays():
    policy = WeeklyOffPolicyFactory().from_settings(
        {"weeklyOffPattern": "custom", "weeklyHolidays": [{"day": 5, "name": "Friday"}, {"day": 0, "name": "Sunday"}]}
    )
    assert isinstance(policy, CustomDaysWeeklyOff)
    assert policy.days == frozenset({4, 6})


def test_standard_with_weekly_holidays_uses_those_days():
    policy = WeeklyOffPolicyFactory().from_settings({"weeklyOffPattern": "standard", "weeklyHolidays": [0]})
    assert isinstance(policy, CustomDaysWeeklyOff)
    assert policy.days == frozenset({6})


def test_unknown_pattern_raises():
    with pytest.raises(ValidationError):
        WeeklyOffPolicyFactory().from_settings({"weeklyOffPattern": "fourDayWeek"})


def test_bad_weekday_raises():
    with pytest.raises(ValidationError):
        WeeklyOffPolicyFactory().from_settings({"weeklyOffPattern": "custom", "weeklyHolidays": [{"day": 9}]})
