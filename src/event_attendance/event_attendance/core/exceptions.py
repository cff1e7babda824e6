class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, blank or of the wrong type."""


class StorageError(DomainError):
    """Raised when the attendance document cannot be written."""
