class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed or out of range."""


class ConflictError(DomainError):
    """Raised when storage rejects a duplicate event for the same day."""


class InternalError(DomainError):
    """Raised when storage or another collaborator fails."""
