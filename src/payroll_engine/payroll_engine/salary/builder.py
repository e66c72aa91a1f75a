"""Salary structure from base inputs.

Only the base inputs are stored; every derived figure is recomputed here.

1. Fixed gross   = basic + DA + HRA + special allowance
2. Gross         = fixed gross + employer PF (% of basic) + employer ESI (% of fixed gross)
3. Net           = gross - employee PF (% of basic) - employee ESI (% of gross)
4. Annual gross  = gross x 12
5. Incentive     = % of annual gross
6. Benefits      = gratuity (% of basic x 12) + statutory bonus (% of basic x 12) + medical insurance
7. CTC           = annual gross + incentive + benefits + mobile allowance (employee deductions excluded)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import round_money
from ..common.validators import require_non_negative, require_positive
from ..core.constants import MONTHS_PER_YEAR
from ..core.enums import ComponentKind
from .model import SalaryComponent, SalaryStructure

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class SalaryStructureInputs:
    basic_salary: Decimal
    dearness_allowance: Decimal = _ZERO
    house_rent_allowance: Decimal = _ZERO
    special_allowance: Decimal = _ZERO
    employer_pf_rate: Decimal = _ZERO
    employer_esi_rate: Decimal = _ZERO
    employee_pf_rate: Decimal = _ZERO
    employee_esi_rate: Decimal = _ZERO
    incentive_rate: Decimal = _ZERO
    gratuity_rate: Decimal = _ZERO
    statutory_bonus_rate: Decimal = _ZERO
    medical_insurance_amount: Decimal = _ZERO
    mobile_allowance: Decimal = _ZERO
    mobile_allowance_yearly: bool = False


@dataclass(frozen=True)
class AnnualFigures:
    annual_gross: Decimal
    annual_incentive: Decimal
    annual_gratuity: Decimal
    annual_statutory_bonus: Decimal
    medical_insurance: Decimal
    total_annual_benefits: Decimal
    annual_mobile_allowance: Decimal
    annual_net: Decimal
    total_ctc: Decimal


@dataclass(frozen=True)
class BuiltSalaryStructure:
    structure: SalaryStructure
    gross_fixed: Decimal
    annual: AnnualFigures


def _pct(base: Decimal, rate: Decimal) -> Decimal:
    return round_money(base * rate / _HUNDRED)


def build_salary_structure(inputs: SalaryStructureInputs) -> BuiltSalaryStructure:
    basic = require_positive(inputs.basic_salary, "basic salary")
    da = require_non_negative(inputs.dearness_allowance, "dearness allowance")
    hra = require_non_negative(inputs.house_rent_allowance, "house rent allowance")
    special = require_non_negative(inputs.special_allowance, "special allowance")
    rates = {
        name: require_non_negative(getattr(inputs, name), name.replace("_", " "))
        for name in (
            "employer_pf_rate",
            "employer_esi_rate",
            "employee_pf_rate",
            "employee_esi_rate",
            "incentive_rate",
            "gratuity_rate",
            "statutory_bonus_rate",
        )
    }

    gross_fixed = basic + da + hra + special
    employer_pf = _pct(basic, rates["employer_pf_rate"])
    employer_esi = _pct(gross_fixed, rates["employer_esi_rate"])
    gross = gross_fixed + employer_pf + employer_esi

    employee_pf = _pct(basic, rates["employee_pf_rate"])
    employee_esi = _pct(gross, rates["employee_esi_rate"])

    candidates = [
        ("Basic Salary", basic, ComponentKind.EARNING),
        ("Dearness Allowance", da, ComponentKind.EARNING),
        ("House Rent Allowance", hra, ComponentKind.EARNING),
        ("Special Allowance", special, ComponentKind.EARNING),
        ("Employer PF", employer_pf, ComponentKind.EARNING),
        ("Employer ESI", employer_esi, ComponentKind.EARNING),
        ("Employee PF", employee_pf, ComponentKind.DEDUCTION),
        ("Employee ESI", employee_esi, ComponentKind.DEDUCTION),
    ]
    # Basic always stays; zero-valued extras are left off the payslip.
    components = [
        SalaryComponent(name=name, monthly_amount=amount, kind=kind)
        for name, amount, kind in candidates
        if name == "Basic Salary" or amount > 0
    ]
    structure = SalaryStructure.from_components(components)

    annual_gross = structure.gross_monthly * MONTHS_PER_YEAR
    annual_basic = basic * MONTHS_PER_YEAR
    incentive = _pct(annual_gross, rates["incentive_rate"])
    gratuity = _pct(annual_basic, rates["gratuity_rate"])
    bonus = _pct(annual_basic, rates["statutory_bonus_rate"])
    medical = require_non_negative(inputs.medical_insurance_amount, "medical insurance amount")
    benefits = gratuity + bonus + medical

    mobile = require_non_negative(inputs.mobile_allowance, "mobile allowance")
    annual_mobile = mobile if inputs.mobile_allowance_yearly else mobile * MONTHS_PER_YEAR

    annual = AnnualFigures(
        annual_gross=annual_gross,
        annual_incentive=incentive,
        annual_gratuity=gratuity,
        annual_statutory_bonus=bonus,
        medical_insurance=medical,
        total_annual_benefits=benefits,
        annual_mobile_allowance=annual_mobile,
        annual_net=structure.net_monthly * MONTHS_PER_YEAR,
        total_ctc=annual_gross + incentive + benefits + annual_mobile,
    )
    return BuiltSalaryStructure(structure=structure, gross_fixed=gross_fixed, annual=annual)
