class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidIdentifier(ValidationError):
    """Raised when a badge id is not exactly 4 decimal digits."""


class UnknownEmployee(ValidationError):
    """Raised when a well-formed badge id is not in the employee directory."""


class StorageFailure(DomainError):
    """Raised when the pause document or the directory cannot be read or written."""


class StoreBusy(StorageFailure):
    """Raised when too many updates are already waiting for the pause store."""
