"""
DomainValidationError - Raised when a business rule is violated.
Maps to: HTTP 400 Bad Request
"""

from konektz.domain.exceptions.base import DomainError


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    default_message = "Validation failed"


class SelfConversationError(DomainValidationError):
    default_message = "Cannot create a conversation with yourself"


class EmptyContentError(DomainValidationError):
    default_message = "content is required"
