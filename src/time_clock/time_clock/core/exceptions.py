class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when an employee code or admin credentials are invalid."""


class InvalidReportTypeError(ValidationError):
    """Raised when a report type is not daily, weekly, monthly or custom."""


class InvalidDateError(ValidationError):
    """Raised when a value is not a well-formed calendar date."""


class SessionAlreadyOpenError(DomainError):
    """Raised when an employee clocks in while a session is still open."""


class NoReportDataError(DomainError):
    """Raised when a report range holds no attendance rows."""


class PersistenceError(Exception):
    """Opaque wrapper for storage failures (connection loss, constraint violation)."""
