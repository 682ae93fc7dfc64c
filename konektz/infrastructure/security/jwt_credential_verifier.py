"""
JWT Credential Verifier.

- Passwords are hashed with werkzeug's salted one-way hashes
- Tokens are HS256 JWTs carrying {id, email, iat, exp}
- PyJWT failures are translated here into the domain's token errors so no
  caller ever sees a jwt exception
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from konektz.domain.exceptions import ExpiredTokenError, InvalidTokenError
from konektz.domain.ports.credential_verifier import CredentialVerifier, TokenClaims
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_TTL = timedelta(days=7)


def translate_token_error(exc: jwt.PyJWTError) -> InvalidTokenError | ExpiredTokenError:
    """Map a PyJWT failure onto the error taxonomy."""
    if isinstance(exc, jwt.ExpiredSignatureError):
        return ExpiredTokenError()
    return InvalidTokenError()


class JwtCredentialVerifier(CredentialVerifier):
    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    def hash_password(self, password: str) -> str:
        return generate_password_hash(password)

    def verify_password(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # Unknown hash method stored in the row
            logger.warning("Stored password hash could not be parsed")
            return False

    def issue_token(self, user_id: UserId, email: UserEmail) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user_id.value,
            "email": email.value,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenClaims:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id", "email"]},
            )
        except jwt.PyJWTError as e:
            logger.debug(f"JWT decode failed: {e}")
            raise translate_token_error(e) from e

        try:
            return TokenClaims(
                id=UserId(str(claims["id"])),
                email=UserEmail(str(claims["email"])),
            )
        except ValueError as e:
            raise InvalidTokenError() from e
