class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee or incident id does not exist."""


class BackupFormatError(DomainError):
    """Raised when a backup document cannot be parsed; nothing is restored."""
