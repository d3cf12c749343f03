class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeFormatError(ValidationError):
    """Raised when a clock-time string cannot be parsed."""


class NotFoundError(DomainError):
    """Raised when a teacher, timetable entry or student has no record."""


class AuthenticationError(DomainError):
    """Raised when there is no signed-in identity or credentials are invalid."""


class PersistenceError(DomainError):
    """Raised when a fetch or write against storage fails.

    Transient: the caller may resubmit, nothing is retried automatically.
    """
