class DomainError(Exception):
    """Base exception for business rule violations."""


class FormatError(DomainError):
    """Raised when an imported CSV or export document is structurally unreadable."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a stored import session does not exist."""
