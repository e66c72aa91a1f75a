"""Payroll Engine package.

Feature modules (workdays, attendance, salary, fines, loans, payroll) hold pure
calculation code; MySQL repositories and the container wire them to storage.
"""
