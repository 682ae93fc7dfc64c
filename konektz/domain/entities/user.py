"""
User Entity - A registered account.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from konektz.domain.exceptions import DomainValidationError
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId


@dataclass
class User:
    id: UserId
    username: str
    email: UserEmail
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        if not self.username or not self.username.strip():
            raise DomainValidationError("username cannot be empty")

    @classmethod
    def create(cls, username: str, email: UserEmail, password_hash: str) -> User:
        """Factory method to create a new User with a generated ID and timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=UserId.generate(),
            username=username.strip(),
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
