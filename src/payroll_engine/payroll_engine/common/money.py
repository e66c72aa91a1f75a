from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

from ..core.constants import CENT
from ..core.exceptions import ValidationError


def to_decimal(value: Any, field_name: str = "value") -> Decimal:
    """Convert user/DB input to Decimal without going through binary float."""
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid amount")
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"{field_name} is not a valid amount: {value!r}") from exc


def round_money(value: Decimal) -> Decimal:
    """Round to currency precision, half-up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal("0"))
