"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class AggregateNotFoundError(DomainError):
    """Raised when a Want (or the user it references) does not exist."""


class InvalidContentError(DomainError):
    """Raised when uploaded bytes do not match any recognizable file type."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, network, etc.)."""
