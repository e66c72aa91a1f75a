class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingDataError(DomainError):
    """Raised when an upstream provider has nothing for the requested employee/month."""


class NoSalaryStructure(MissingDataError):
    """Raised when an employee has no (or an empty) salary structure."""


class NoAttendanceData(MissingDataError):
    """Raised when an employee has no attendance records for the month."""
