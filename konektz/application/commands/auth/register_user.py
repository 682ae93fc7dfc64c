"""
Register User Command.

- Username and email are trimmed; email is lowercased
- A taken username or email is a ConflictError, whether caught by the
  pre-check or by the unique constraints when two registrations race
"""

import logging
from dataclasses import dataclass
from typing import Optional

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.entities.user import User
from konektz.domain.exceptions import ConflictError, DomainValidationError
from konektz.domain.ports.credential_verifier import CredentialVerifier
from konektz.domain.ports.repositories import UserRepository
from konektz.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command[User]):
    username: Optional[str]
    email: Optional[str]
    password: Optional[str]


class RegisterUserHandler(CommandHandler[User]):
    def __init__(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
    ):
        self._user_repository = user_repository
        self._credential_verifier = credential_verifier

    async def execute(self, command: RegisterUserCommand) -> User:
        username = (command.username or "").strip()
        raw_email = (command.email or "").strip()
        if not username or not raw_email or not command.password:
            raise DomainValidationError("username, email and password are required")

        try:
            email = UserEmail(raw_email)
        except ValueError as e:
            raise DomainValidationError("email is not valid") from e

        if await self._user_repository.exists(username, email):
            raise ConflictError()

        user = User.create(
            username=username,
            email=email,
            password_hash=self._credential_verifier.hash_password(command.password),
        )
        await self._user_repository.add(user)
        logger.info(f"Registered user {user.id.value}")
        return user
