from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from ..common.money import sum_money
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import ComponentKind
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SalaryComponent:
    name: str
    monthly_amount: Decimal
    kind: ComponentKind

    def __post_init__(self):
        object.__setattr__(self, "name", require_non_empty(self.name, "component name"))
        object.__setattr__(self, "monthly_amount", require_non_negative(self.monthly_amount, f"{self.name} amount"))
        object.__setattr__(self, "kind", ComponentKind(self.kind))


def _totals(components: Iterable[SalaryComponent]) -> tuple[Decimal, Decimal]:
    components = list(components)
    gross = sum_money(c.monthly_amount for c in components if c.kind == ComponentKind.EARNING)
    deductions = sum_money(c.monthly_amount for c in components if c.kind == ComponentKind.DEDUCTION)
    return gross, gross - deductions


@dataclass(frozen=True)
class SalaryStructure:
    """A month's salary components; a revision replaces the whole structure.

    gross_monthly == sum(earnings); net_monthly == gross_monthly - sum(deductions).
    """

    components: tuple[SalaryComponent, ...]
    gross_monthly: Decimal
    net_monthly: Decimal

    def __post_init__(self):
        object.__setattr__(self, "components", tuple(self.components))
        gross, net = _totals(self.components)
        if gross != self.gross_monthly or net != self.net_monthly:
            raise ValidationError(
                f"Salary structure totals do not match components (gross {self.gross_monthly} vs {gross}, "
                f"net {self.net_monthly} vs {net})"
            )

    @classmethod
    def from_components(cls, components: Iterable[SalaryComponent]) -> "SalaryStructure":
        components = tuple(components)
        gross, net = _totals(components)
        return cls(components=components, gross_monthly=gross, net_monthly=net)

    @property
    def is_empty(self) -> bool:
        return not self.components


@dataclass(frozen=True)
class ProratedComponent:
    name: str
    kind: ComponentKind
    monthly_amount: Decimal
    prorated_amount: Decimal


@dataclass(frozen=True)
class ProrationResult:
    attendance_ratio: Decimal
    prorated_gross: Decimal
    prorated_deductions: Decimal
    prorated_net: Decimal
    components: tuple[ProratedComponent, ...] = field(default_factory=tuple)
    degenerate_month: bool = False
