from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.enums import SaturdayParity
from ..core.exceptions import ValidationError
from .policies.base import WeeklyOffPolicy
from .policies.custom_days import CustomDaysWeeklyOff
from .policies.odd_even_saturday import OddEvenSaturdayWeeklyOff
from .policies.standard import StandardWeeklyOff


def js_weekday_to_python(day: int) -> int:
    """Settings store weekdays as Sunday=0 ... Saturday=6; Python uses Monday=0 ... Sunday=6."""
    if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6:
        raise ValidationError(f"Invalid weekday in weeklyHolidays: {day!r}")
    return (day - 1) % 7


@dataclass
class WeeklyOffPolicyFactory:
    """Factory Pattern: build the weekly-off strategy from business settings.

    Expected shape::

        {"weeklyOffPattern": "standard" | "oddEvenSaturday" | "custom",
         "weeklyHolidays": [{"day": 0, "name": "Sunday"}, ...],
         "saturdayParity": "odd" | "even"}
    """

    def from_settings(self, settings: Mapping[str, Any] | None) -> WeeklyOffPolicy:
        settings = settings or {}
        pattern = str(settings.get("weeklyOffPattern") or "standard")
        weekly_holidays = settings.get("weeklyHolidays")

        if pattern == "oddEvenSaturday":
            raw_parity = str(settings.get("saturdayParity") or SaturdayParity.ODD.value).lower()
            try:
                parity = SaturdayParity(raw_parity)
            except ValueError as exc:
                raise ValidationError(f"Unknown saturdayParity: {raw_parity!r}") from exc
            return OddEvenSaturdayWeeklyOff(parity=parity)

        if pattern == "custom" or (pattern == "standard" and weekly_holidays):
            if not isinstance(weekly_holidays, list):
                raise ValidationError("weeklyHolidays must be a list for a custom weekly-off pattern")
            days = frozenset(js_weekday_to_python(self._day_of(item)) for item in weekly_holidays)
            return CustomDaysWeeklyOff(days=days)

        if pattern == "standard":
            return StandardWeeklyOff()

        raise ValidationError(f"Unknown weeklyOffPattern: {pattern!r}")

    @staticmethod
    def _day_of(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item.get("day")
        return item
