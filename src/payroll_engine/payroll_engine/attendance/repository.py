from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceDay


class AttendanceRepository(Protocol):
    def get_attendance(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceDay]:
        """Attendance days for ``employee_id`` between ``start`` and ``end`` inclusive."""

        raise NotImplementedError
