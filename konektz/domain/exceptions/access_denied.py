"""
AccessDeniedError - Raised when a request carries no credentials at all.
Maps to: HTTP 403 Forbidden
"""

from konektz.domain.exceptions.base import DomainError


class AccessDeniedError(DomainError):
    """Raised when user lacks permission to access a resource"""

    default_message = "Access denied"


class MissingTokenError(AccessDeniedError):
    default_message = "Missing token"
