from __future__ import annotations

from decimal import Decimal

from ..common.money import round_money
from ..core.constants import MONTHS_PER_YEAR
from .model import LoanTerms, ScheduleEntry

_HUNDRED = Decimal("100")


def monthly_rate(terms: LoanTerms) -> Decimal:
    return terms.annual_interest_rate_pct / _HUNDRED / MONTHS_PER_YEAR


def calculate_installment(terms: LoanTerms) -> Decimal:
    """Fixed monthly installment (EMI), rounded half-up to currency precision.

    Zero interest is straight-line; otherwise P * r * (1+r)^n / ((1+r)^n - 1).
    """
    if terms.annual_interest_rate_pct == 0:
        return round_money(terms.principal / terms.tenure_months)

    r = monthly_rate(terms)
    growth = (1 + r) ** terms.tenure_months
    return round_money(terms.principal * r * growth / (growth - 1))


def build_schedule(terms: LoanTerms) -> list[ScheduleEntry]:
    """Month-by-month split of each installment into interest and principal.

    The last month pays off whatever balance is left, so principal portions
    always add up to the original principal.
    """
    installment = calculate_installment(terms)
    r = monthly_rate(terms)
    balance = terms.principal
    entries: list[ScheduleEntry] = []

    for month in range(1, terms.tenure_months + 1):
        interest = round_money(balance * r)
        if month == terms.tenure_months:
            principal = balance
        else:
            principal = max(Decimal("0"), min(installment - interest, balance))
        balance = balance - principal
        entries.append(
            ScheduleEntry(
                month=month,
                installment=principal + interest,
                principal_portion=principal,
                interest_portion=interest,
                remaining_balance=balance,
            )
        )
    return entries
