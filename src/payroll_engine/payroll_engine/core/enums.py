from __future__ import annotations

from enum import Enum


class ComponentKind(str, Enum):
    """Salary component side: adds to gross or is taken out of it."""

    EARNING = "earning"
    DEDUCTION = "deduction"


class DayStatus(str, Enum):
    """Attendance status of a single day as captured upstream."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    ON_LEAVE = "On Leave"
    PENDING = "Pending"
    NOT_MARKED = "Not Marked"


class SaturdayParity(str, Enum):
    """Which Saturdays are weekly off in the odd/even pattern."""

    ODD = "odd"
    EVEN = "even"


class FineMethod(str, Enum):
    SHIFT_BASED = "shiftBased"
    RULE_BASED = "custom"
    FIXED_PER_HOUR = "fixedPerHour"


class FineMultiplier(str, Enum):
    ONE_X_SALARY = "1xSalary"
    TWO_X_SALARY = "2xSalary"
    THREE_X_SALARY = "3xSalary"
    HALF_DAY = "halfDay"
    FULL_DAY = "fullDay"
    FIXED_AMOUNT = "custom"


class FixedAmountUnit(str, Enum):
    FIXED = "fixed"
    PER_HOUR = "perHour"
    PER_MINUTE = "perMinute"


class ViolationKind(str, Enum):
    LATE_ARRIVAL = "lateArrival"
    EARLY_EXIT = "earlyExit"
    BOTH = "both"


class SalaryBasis(str, Enum):
    """Gross figure used to derive the daily salary for fines."""

    MONTHLY_GROSS = "monthlyGross"
    PRORATED_GROSS = "proratedGross"
