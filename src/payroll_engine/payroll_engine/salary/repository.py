from __future__ import annotations

from typing import Optional, Protocol

from .model import SalaryStructure


class SalaryRepository(Protocol):
    def get_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        raise NotImplementedError
