class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(ValidationError):
    """Raised when a log entry does not exist or belongs to another user."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
