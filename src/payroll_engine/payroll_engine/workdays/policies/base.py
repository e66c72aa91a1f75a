from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class WeeklyOffPolicy(ABC):
    """Strategy Pattern: decides which calendar dates are weekly off."""

    @abstractmethod
    def is_weekly_off(self, day: date) -> bool:
        raise NotImplementedError

    @abstractmethod
    def describe(self) -> str:
        raise NotImplementedError
