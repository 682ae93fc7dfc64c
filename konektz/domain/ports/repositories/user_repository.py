"""
User Repository Port - Interface for user persistence.
Implementation: konektz/infrastructure/persistence/sqlalchemy_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from konektz.domain.entities.user import User
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: UserEmail) -> Optional[User]: ...

    @abstractmethod
    async def exists(self, username: str, email: UserEmail) -> bool:
        """True when either the username or the email is already taken."""
        ...

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user. Raises ConflictError on a duplicate."""
        ...
