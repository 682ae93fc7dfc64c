"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from konektz.domain.exceptions.base import DomainError
from konektz.domain.exceptions.entity_not_found import EntityNotFoundError
from konektz.domain.exceptions.access_denied import AccessDeniedError, MissingTokenError
from konektz.domain.exceptions.authentication import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from konektz.domain.exceptions.conflict import ConflictError
from konektz.domain.exceptions.storage_unavailable import StorageUnavailableError
from konektz.domain.exceptions.validation_error import (
    DomainValidationError,
    EmptyContentError,
    SelfConversationError,
)

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "AccessDeniedError",
    "MissingTokenError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "ConflictError",
    "StorageUnavailableError",
    "DomainValidationError",
    "SelfConversationError",
    "EmptyContentError",
]
