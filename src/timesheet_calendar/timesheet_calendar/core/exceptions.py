class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(DomainError):
    """Raised when the durable storage slot cannot be written."""
