"""
SQLAlchemy User Repository Implementation.

- Implements UserRepository port from domain layer
- Maps between UserRecord rows and User entities
- Unique violations on username/email surface as ConflictError
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from konektz.domain.entities.user import User
from konektz.domain.ports.repositories import UserRepository
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.user_id import UserId
from konektz.infrastructure.persistence.database import storage_errors
from konektz.infrastructure.persistence.models import UserRecord


class SqlAlchemyUserRepository(UserRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: UserRecord) -> User:
        """Map database row to domain entity."""
        return User(
            id=UserId(record.id),
            username=record.username,
            email=UserEmail(record.email),
            password_hash=record.password,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        async with storage_errors(self._session):
            record = await self._session.get(UserRecord, user_id.value)
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: UserEmail) -> Optional[User]:
        async with storage_errors(self._session):
            result = await self._session.execute(
                select(UserRecord).where(UserRecord.email == email.value)
            )
            record = result.scalar_one_or_none()
        return self._to_entity(record) if record else None

    async def exists(self, username: str, email: UserEmail) -> bool:
        async with storage_errors(self._session):
            result = await self._session.execute(
                select(UserRecord.id)
                .where(
                    or_(UserRecord.username == username, UserRecord.email == email.value)
                )
                .limit(1)
            )
            return result.first() is not None

    async def add(self, user: User) -> None:
        async with storage_errors(self._session):
            self._session.add(
                UserRecord(
                    id=user.id.value,
                    username=user.username,
                    email=user.email.value,
                    password=user.password_hash,
                    created_at=user.created_at,
                    updated_at=user.updated_at,
                )
            )
            await self._session.commit()
