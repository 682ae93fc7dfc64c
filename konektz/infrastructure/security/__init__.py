"""Security - credential hashing and token signing."""

from konektz.infrastructure.security.jwt_credential_verifier import (
    JwtCredentialVerifier,
    translate_token_error,
)

__all__ = [
    "JwtCredentialVerifier",
    "translate_token_error",
]
