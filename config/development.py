import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

COMPANY_ID = int(os.getenv("COMPANY_ID", "1"))

# Employees computed in parallel during a payroll run
PAYROLL_MAX_WORKERS = int(os.getenv("PAYROLL_MAX_WORKERS", "4"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
