from __future__ import annotations

from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def get_holidays(self, year: int) -> Sequence[Holiday]:
        raise NotImplementedError
