from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm, shift_hours_between
from ..common.money import to_decimal
from ..core.enums import FineMethod, FineMultiplier, FixedAmountUnit, SalaryBasis, ViolationKind
from ..core.exceptions import ValidationError
from .model import FinePolicy, FineRule
from .strategies.base import FineStrategy
from .strategies.fixed_per_hour import FixedPerHourFineStrategy
from .strategies.rule_based import RuleBasedFineStrategy
from .strategies.shift_based import ShiftBasedFineStrategy

_METHOD_ALIASES = {
    "shiftBased": FineMethod.SHIFT_BASED,
    "custom": FineMethod.RULE_BASED,
    "ruleBased": FineMethod.RULE_BASED,
    "fixedPerHour": FineMethod.FIXED_PER_HOUR,
}


@dataclass
class FineStrategyFactory:
    """Factory Pattern: choose the fine strategy for a policy."""

    def for_policy(self, policy: FinePolicy) -> FineStrategy:
        if policy.method == FineMethod.RULE_BASED:
            return RuleBasedFineStrategy(policy)
        if policy.method == FineMethod.FIXED_PER_HOUR:
            return FixedPerHourFineStrategy(policy)
        return ShiftBasedFineStrategy(policy)


def _enum(enum_cls, raw: Any, field_name: str):
    try:
        return enum_cls(raw)
    except ValueError as exc:
        raise ValidationError(f"Unknown {field_name}: {raw!r}") from exc


def _optional_decimal(value: Any, field_name: str):
    if value is None or value == "":
        return None
    return to_decimal(value, field_name)


def _whole_minutes(value: Any, field_name: str) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a whole number of minutes: {value!r}") from exc


@dataclass
class FinePolicyFactory:
    """Build a FinePolicy from ``settings.payroll.fineCalculation``.

    Expected shape::

        {"enabled": true, "applyFines": true,
         "calculationMethod": "shiftBased" | "custom" | "fixedPerHour",
         "fineRules": [{"type": "2xSalary", "applyTo": "lateArrival"},
                       {"type": "custom", "customAmount": 50, "customAmountUnit": "fixed", "applyTo": "both"}],
         "graceTimeMinutes": 10, "finePerHour": 100,
         "shiftHours": 9,  # or "shiftStartTime": "09:30", "shiftEndTime": "18:30"
         "fineEarlyExits": false, "salaryBasis": "monthlyGross"}
    """

    def from_settings(self, settings: Optional[Mapping[str, Any]]) -> FinePolicy:
        if not settings:
            return FinePolicy(enabled=False)

        raw_method = settings.get("calculationMethod") or settings.get("calculationType") or "shiftBased"
        method = _METHOD_ALIASES.get(str(raw_method))
        if method is None:
            raise ValidationError(f"Unknown fine calculationMethod: {raw_method!r}")

        raw_rules = settings.get("fineRules") or []
        if not isinstance(raw_rules, list):
            raise ValidationError("fineRules must be a list")

        return FinePolicy(
            enabled=settings.get("enabled") is True,
            apply_to_payroll=settings.get("applyFines") is not False,
            method=method,
            rules=tuple(self._rule(r) for r in raw_rules),
            shift_hours=self._shift_hours(settings),
            fine_early_exits=bool(settings.get("fineEarlyExits", False)),
            grace_minutes=_whole_minutes(settings.get("graceTimeMinutes"), "graceTimeMinutes"),
            fine_per_hour=_optional_decimal(settings.get("finePerHour"), "finePerHour"),
            salary_basis=_enum(SalaryBasis, settings.get("salaryBasis") or SalaryBasis.MONTHLY_GROSS.value, "salaryBasis"),
        )

    @staticmethod
    def _shift_hours(settings: Mapping[str, Any]):
        hours = _optional_decimal(settings.get("shiftHours"), "shiftHours")
        if hours is None and settings.get("shiftStartTime") and settings.get("shiftEndTime"):
            hours = shift_hours_between(parse_hhmm(settings["shiftStartTime"]), parse_hhmm(settings["shiftEndTime"]))
        return hours

    @staticmethod
    def _rule(raw: Mapping[str, Any]) -> FineRule:
        if not isinstance(raw, Mapping):
            raise ValidationError("Each fine rule must be an object")
        return FineRule(
            multiplier=_enum(FineMultiplier, raw.get("type"), "fine rule type"),
            applies_to=_enum(ViolationKind, raw.get("applyTo") or ViolationKind.BOTH.value, "fine rule applyTo"),
            fixed_amount=_optional_decimal(raw.get("customAmount"), "customAmount"),
            fixed_amount_unit=_enum(
                FixedAmountUnit, raw.get("customAmountUnit") or FixedAmountUnit.FIXED.value, "customAmountUnit"
            ),
        )
