from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from ...core.enums import SaturdayParity
from .base import WeeklyOffPolicy


def saturday_ordinal(day: date) -> int:
    """1 for the first Saturday of the month, 2 for the second, ..."""
    return 1 + (day.day - 1) // 7


@dataclass(frozen=True)
class OddEvenSaturdayWeeklyOff(WeeklyOffPolicy):
    """Every Sunday plus the Saturdays whose ordinal matches ``parity``.

    ODD takes the 1st/3rd/5th Saturdays off, EVEN the 2nd/4th.
    """

    parity: SaturdayParity = SaturdayParity.ODD

    def is_weekly_off(self, day: date) -> bool:
        weekday = day.weekday()
        if weekday == calendar.SUNDAY:
            return True
        if weekday != calendar.SATURDAY:
            return False
        is_odd = saturday_ordinal(day) % 2 == 1
        return is_odd if self.parity == SaturdayParity.ODD else not is_odd

    def describe(self) -> str:
        which = "1st/3rd/5th" if self.parity == SaturdayParity.ODD else "2nd/4th"
        return f"Odd/Even Saturday ({which} Saturday + Sunday)"
