"""Login User Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.entities.user import User
from konektz.domain.exceptions import DomainValidationError, InvalidCredentialsError
from konektz.domain.ports.credential_verifier import CredentialVerifier
from konektz.domain.ports.repositories import UserRepository
from konektz.domain.value_objects.user_email import UserEmail

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    token: str


@dataclass(frozen=True)
class LoginUserCommand(Command[LoginResult]):
    email: Optional[str]
    password: Optional[str]


class LoginUserHandler(CommandHandler[LoginResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
    ):
        self._user_repository = user_repository
        self._credential_verifier = credential_verifier

    async def execute(self, command: LoginUserCommand) -> LoginResult:
        if not (command.email or "").strip() or not command.password:
            raise DomainValidationError("email and password are required")

        try:
            email = UserEmail(command.email)
        except ValueError as e:
            raise InvalidCredentialsError() from e

        user = await self._user_repository.get_by_email(email)
        if not user or not self._credential_verifier.verify_password(
            command.password, user.password_hash
        ):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()

        token = self._credential_verifier.issue_token(user.id, user.email)
        return LoginResult(user=user, token=token)
