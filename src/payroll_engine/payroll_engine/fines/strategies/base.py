from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...attendance.model import Violation
from ..model import FinePolicy


class FineStrategy(ABC):
    """Strategy Pattern: how a single day's violation turns into money.

    Returns the unrounded amount; the engine applies grace time beforehand
    and rounds afterwards.
    """

    def __init__(self, policy: FinePolicy):
        self._policy = policy

    @abstractmethod
    def fine(self, violation: Violation, *, daily_salary: Decimal, shift_hours: Decimal) -> Decimal:
        raise NotImplementedError
