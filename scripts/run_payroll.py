"""Run a month's payroll from the command line.

    python scripts/run_payroll.py run --year 2025 --month 1 --employee 7 --employee 9 --out register.xlsx
    python scripts/run_payroll.py loan --principal 120000 --tenure 12 --rate 10.5 --schedule
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.payroll_engine.payroll_engine.main import main

if __name__ == "__main__":
    raise SystemExit(main())
