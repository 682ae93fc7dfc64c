"""
SQLAlchemy Message Repository Implementation.

- Implements MessageRepository port from domain layer
- Messages are returned oldest first with the sender's username attached
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from konektz.domain.entities.message import Message
from konektz.domain.ports.repositories.message_repository import MessageRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.message_id import MessageId
from konektz.domain.value_objects.user_id import UserId
from konektz.infrastructure.persistence.database import storage_errors
from konektz.infrastructure.persistence.models import MessageRecord, UserRecord


class SqlAlchemyMessageRepository(MessageRepository):
    """Handles persistence of Message entities."""

    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: MessageRecord, sender_name: str) -> Message:
        return Message(
            id=MessageId(record.id),
            conversation_id=ConversationId(record.conversation_id),
            sender_id=UserId(record.sender_id),
            content=record.content,
            created_at=record.created_at,
            updated_at=record.updated_at,
            sender_name=sender_name,
        )

    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        async with storage_errors(self._session):
            result = await self._session.execute(
                select(MessageRecord, UserRecord.username)
                .join(UserRecord, UserRecord.id == MessageRecord.sender_id)
                .where(MessageRecord.conversation_id == conversation_id.value)
                .order_by(MessageRecord.created_at.asc())
            )
            rows = result.all()
        return [self._to_entity(record, username) for record, username in rows]

    async def add(self, message: Message) -> Message:
        async with storage_errors(self._session):
            self._session.add(
                MessageRecord(
                    id=message.id.value,
                    conversation_id=message.conversation_id.value,
                    sender_id=message.sender_id.value,
                    content=message.content,
                    created_at=message.created_at,
                    updated_at=message.updated_at,
                )
            )
            await self._session.commit()

            sender_name = await self._session.scalar(
                select(UserRecord.username).where(
                    UserRecord.id == message.sender_id.value
                )
            )

        message.sender_name = sender_name
        return message
