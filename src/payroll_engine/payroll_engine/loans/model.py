from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.validators import require_non_negative, require_positive, require_positive_int


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    tenure_months: int
    annual_interest_rate_pct: Decimal = Decimal("0")

    def __post_init__(self):
        object.__setattr__(self, "principal", require_positive(self.principal, "principal"))
        object.__setattr__(self, "tenure_months", require_positive_int(self.tenure_months, "tenure months"))
        object.__setattr__(
            self,
            "annual_interest_rate_pct",
            require_non_negative(self.annual_interest_rate_pct, "annual interest rate"),
        )


@dataclass(frozen=True)
class ScheduleEntry:
    month: int
    installment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal
