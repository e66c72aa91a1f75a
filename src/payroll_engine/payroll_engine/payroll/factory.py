from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceCalculationSettings
from ..common.money import to_decimal
from ..core.constants import DEFAULT_HALF_DAY_MULTIPLIER
from ..fines.factory import FinePolicyFactory
from ..workdays.factory import WeeklyOffPolicyFactory
from .model import OrganizationPolicy


@dataclass
class OrganizationPolicyFactory:
    """Build an OrganizationPolicy from the company settings document.

    Reads ``business`` (weekly off) and ``payroll.fineCalculation`` /
    ``payroll.attendanceCalculation``; anything missing falls back to defaults.
    """

    weekly_off_factory: WeeklyOffPolicyFactory = field(default_factory=WeeklyOffPolicyFactory)
    fine_factory: FinePolicyFactory = field(default_factory=FinePolicyFactory)

    def from_settings(self, settings: Optional[Mapping[str, Any]]) -> OrganizationPolicy:
        settings = settings or {}
        payroll = settings.get("payroll") or {}
        attendance = payroll.get("attendanceCalculation") or {}

        return OrganizationPolicy(
            weekly_off=self.weekly_off_factory.from_settings(settings.get("business")),
            fine_policy=self.fine_factory.from_settings(payroll.get("fineCalculation")),
            attendance=AttendanceCalculationSettings(
                include_leaves=bool(attendance.get("includeLeaves", False)),
                half_day_multiplier=to_decimal(
                    attendance.get("halfDayMultiplier", DEFAULT_HALF_DAY_MULTIPLIER), "halfDayMultiplier"
                ),
            ),
        )
