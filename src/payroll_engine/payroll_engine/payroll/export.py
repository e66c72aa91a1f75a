from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .model import PayrollRunReport

REGISTER_COLUMNS = [
    "Employee",
    "Working Days",
    "Present Days",
    "Absent Days",
    "Attendance Ratio",
    "Prorated Gross",
    "Prorated Deductions",
    "Prorated Net",
    "Fines",
    "Fines Applied",
    "Net After Fines",
    "Degenerate Month",
]


def payroll_register_frame(report: PayrollRunReport) -> pd.DataFrame:
    """One row per computed employee. Money stays Decimal (object dtype) so nothing is rounded twice."""
    data = []
    for r in report.results:
        data.append(
            {
                "Employee": r.employee_id,
                "Working Days": r.working_days.working_days,
                "Present Days": r.attendance.present_days,
                "Absent Days": r.attendance.absent_days,
                "Attendance Ratio": round(float(r.proration.attendance_ratio), 4),
                "Prorated Gross": r.proration.prorated_gross,
                "Prorated Deductions": r.proration.prorated_deductions,
                "Prorated Net": r.proration.prorated_net,
                "Fines": r.fines.total,
                "Fines Applied": r.fines.applied_to_payroll,
                "Net After Fines": r.net_after_fines,
                "Degenerate Month": r.proration.degenerate_month,
            }
        )
    return pd.DataFrame(data, columns=REGISTER_COLUMNS)


def failures_frame(report: PayrollRunReport) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Employee": f.employee_id, "Error": f.error_type, "Message": f.message} for f in report.failures],
        columns=["Employee", "Error", "Message"],
    )


def export_payroll_register(
    report: PayrollRunReport,
    path: Optional[Union[str, Path]] = None,
) -> Union[Path, io.BytesIO]:
    """Write the register (and failures, if any) to .xlsx; in memory when ``path`` is None."""
    output: Union[Path, io.BytesIO] = Path(path) if path is not None else io.BytesIO()
    sheet = f"Payroll {report.year:04d}-{report.month:02d}"

    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        frame = payroll_register_frame(report)
        for col in ("Prorated Gross", "Prorated Deductions", "Prorated Net", "Fines", "Net After Fines", "Present Days"):
            frame[col] = frame[col].map(float)
        frame.to_excel(writer, index=False, sheet_name=sheet)
        if report.failures:
            failures_frame(report).to_excel(writer, index=False, sheet_name="Failures")

    if isinstance(output, io.BytesIO):
        output.seek(0)
    return output
