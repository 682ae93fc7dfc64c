"""
Authentication Dependency for FastAPI (the auth gate).

- Extracts the bearer token from the Authorization header
- No header / no bearer value      → MissingTokenError (403)
- Bad signature or malformed token → InvalidTokenError (401)
- Expired token                    → ExpiredTokenError (401)
- Returns AuthUser and stores it on request.state.user

The principal is trusted from the signed claims alone: there is no database
lookup, so a token stays valid until it expires even if its user is gone.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from konektz.domain.exceptions import MissingTokenError
from konektz.domain.ports.credential_verifier import CredentialVerifier
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AuthUser:
    id: UserId
    email: UserEmail


security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        MissingTokenError, InvalidTokenError, ExpiredTokenError
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    verifier: CredentialVerifier = request.app.state.credential_verifier
    claims = verifier.verify_token(credentials.credentials)

    user = AuthUser(id=claims.id, email=claims.email)
    request.state.user = user
    return user
