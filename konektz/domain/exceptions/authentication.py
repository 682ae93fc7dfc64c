"""
AuthenticationError - Raised when presented credentials are rejected.
Maps to: HTTP 401 Unauthorized
"""

from konektz.domain.exceptions.base import DomainError


class AuthenticationError(DomainError):
    default_message = "Unauthorized"


class InvalidCredentialsError(AuthenticationError):
    default_message = "Invalid email or password"


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid token"


class ExpiredTokenError(AuthenticationError):
    default_message = "Token expired"
