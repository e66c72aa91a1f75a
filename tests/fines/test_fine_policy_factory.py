from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.enums import (
    FineMethod,
    FineMultiplier,
    FixedAmountUnit,
    SalaryBasis,
    ViolationKind,
)
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.fines.factory import FinePolicyFactory, FineStrategyFactory
from src.payroll_engine.payroll_engine.fines.model import FinePolicy, FineRule
from src.payroll_engine.payroll_engine.fines.strategies.fixed_per_hour import FixedPerHourFineStrategy
from src.payroll_engine.payroll_engine.fines.strategies.rule_based import RuleBasedFineStrategy
from src.payroll_engine.payroll_engine.fines.strategies.shift_based import ShiftBasedFineStrategy


def test_missing_settings_disable_fines():
    policy = FinePolicyFactory().from_settings(None)
    assert policy == FinePolicy(enabled=False)


def test_custom_rules_from_settings():
    policy = FinePolicyFactory().from_settings(
        {
            "enabled": True,
            "calculationMethod": "custom",
            "graceTimeMinutes": 5,
            "salaryBasis": "proratedGross",
            "fineRules": [
                {"type": "2xSalary", "applyTo": "lateArrival"},
                {"type": "custom", "customAmount": "75", "customAmountUnit": "perHour"},
            ],
        }
    )
    assert policy.enabled and policy.apply_to_payroll
    assert policy.method == FineMethod.RULE_BASED
    assert policy.grace_minutes == 5
    assert policy.salary_basis == SalaryBasis.PRORATED_GROSS
    first, second = policy.rules
    assert first.multiplier == FineMultiplier.TWO_X_SALARY
    assert first.applies_to == ViolationKind.LATE_ARRIVAL
    assert second.multiplier == FineMultiplier.FIXED_AMOUNT
    assert second.applies_to == ViolationKind.BOTH
    assert second.fixed_amount == Decimal("75")
    assert second.fixed_amount_unit == FixedAmountUnit.PER_HOUR


def test_shift_hours_from_start_and_end_times():
    policy = FinePolicyFactory().from_settings(
        {"enabled": True, "calculationMethod": "shiftBased", "shiftStartTime": "22:00", "shiftEndTime": "06:30"}
    )
    assert policy.shift_hours == Decimal("8.5")


def test_apply_fines_false():
    policy = FinePolicyFactory().from_settings({"enabled": True, "applyFines": False})
    assert policy.enabled
    assert not policy.apply_to_payroll


def test_unknown_values_raise():
    with pytest.raises(ValidationError):
        FinePolicyFactory().from_settings({"enabled": True, "calculationMethod": "percent"})
    with pytest.raises(ValidationError):
        FinePolicyFactory().from_settings({"enabled": True, "fineRules": [{"type": "10xSalary"}]})


def test_strategy_factory():
    factory = FineStrategyFactory()
    assert isinstance(factory.for_policy(FinePolicy()), ShiftBasedFineStrategy)
    assert isinstance(factory.for_policy(FinePolicy(method=FineMethod.RULE_BASED)), RuleBasedFineStrategy)
    assert isinstance(
        factory.for_policy(FinePolicy(method=FineMethod.FIXED_PER_HOUR, fine_per_hour=Decimal("10"))),
        FixedPerHourFineStrategy,
    )


def test_non_numeric_grace_minutes_is_a_validation_error():
    with pytest.raises(ValidationError):
        FinePolicyFactory().from_settings({"enabled": True, "graceTimeMinutes": "ten"})
    assert FinePolicyFactory().from_settings({"enabled": True, "graceTimeMinutes": "15"}).grace_minutes == 15


def test_rule_without_apply_to_matches_direct_construction():
    parsed = FinePolicyFactory().from_settings({"enabled": True, "fineRules": [{"type": "halfDay"}]}).rules[0]
    assert parsed == FineRule(FineMultiplier.HALF_DAY)
