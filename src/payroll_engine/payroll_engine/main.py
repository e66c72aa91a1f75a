from __future__ import annotations

import argparse
import importlib
import json
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container
from .core.exceptions import DomainError
from .loans.amortizer import build_schedule, calculate_installment
from .loans.model import LoanTerms
from .logging_config import configure_logging
from .payroll.export import export_payroll_register


def _load_settings():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    return settings


def _cmd_run(args: argparse.Namespace) -> int:
    settings = _load_settings()
    container = build_container(
        db_config=settings.DB_CONFIG,
        company_id=int(getattr(settings, "COMPANY_ID", 1)),
        max_workers=int(getattr(settings, "PAYROLL_MAX_WORKERS", 4)),
    )
    report = container.payroll_service.run(args.employee, args.year, args.month, max_workers=args.workers)

    print(json.dumps([r.to_dict() for r in report.results], indent=2, ensure_ascii=False))
    for failure in report.failures:
        print(f"FAILED employee={failure.employee_id} {failure.error_type}: {failure.message}")

    if args.out:
        path = export_payroll_register(report, args.out)
        print(f"OK: Payroll register written to {path}")
    return 0 if report.ok else 1


def _cmd_loan(args: argparse.Namespace) -> int:
    terms = LoanTerms(principal=args.principal, tenure_months=args.tenure, annual_interest_rate_pct=args.rate)
    print(f"Installment: {calculate_installment(terms)}")
    if args.schedule:
        print(f"{'Month':>5} {'Installment':>14} {'Principal':>14} {'Interest':>12} {'Balance':>14}")
        for e in build_schedule(terms):
            print(
                f"{e.month:>5} {e.installment:>14} {e.principal_portion:>14} "
                f"{e.interest_portion:>12} {e.remaining_balance:>14}"
            )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="payroll-engine", description="Payroll and loan calculations")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Compute a month's payroll for one or more employees")
    run.add_argument("--year", type=int, required=True)
    run.add_argument("--month", type=int, required=True, help="1-12")
    run.add_argument("--employee", type=int, action="append", required=True, help="repeat for several employees")
    run.add_argument("--workers", type=int, default=None)
    run.add_argument("--out", default=None, help="write the payroll register to this .xlsx file")
    run.set_defaults(handler=_cmd_run)

    loan = sub.add_parser("loan", help="Loan installment and amortization schedule")
    loan.add_argument("--principal", required=True)
    loan.add_argument("--tenure", type=int, required=True, help="months")
    loan.add_argument("--rate", default="0", help="annual interest rate, percent")
    loan.add_argument("--schedule", action="store_true")
    loan.set_defaults(handler=_cmd_loan)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except DomainError as exc:
        raise SystemExit(f"Error: {exc}")


if __name__ == "__main__":
    raise SystemExit(main())
