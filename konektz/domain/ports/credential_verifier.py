"""
Credential Verifier Port - password hashing and bearer tokens.
Implementation: konektz/infrastructure/security/jwt_credential_verifier.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class TokenClaims:
    id: UserId
    email: UserEmail


class CredentialVerifier(ABC):
    @abstractmethod
    def hash_password(self, password: str) -> str: ...

    @abstractmethod
    def verify_password(self, password: str, password_hash: str) -> bool:
        """Never raises on a mismatch, only returns False."""
        ...

    @abstractmethod
    def issue_token(self, user_id: UserId, email: UserEmail) -> str: ...

    @abstractmethod
    def verify_token(self, token: str) -> TokenClaims:
        """Raises InvalidTokenError or ExpiredTokenError."""
        ...
