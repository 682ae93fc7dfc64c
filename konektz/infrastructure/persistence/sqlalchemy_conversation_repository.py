"""
SQLAlchemy Conversation Repository Implementation.

Guidelines:
- Implements ConversationRepository port from domain layer
- Pair lookups go through pair_key, so (A, B) and (B, A) hit the same row
- Flag changes are compare-and-set on the version column: the write only
  lands if nobody else changed the row since it was read
- Destroying a conversation removes its messages in the same transaction
"""

import logging
from typing import Optional

from sqlalchemy import and_, case, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from konektz.domain.entities.conversation import Conversation, ConversationSummary
from konektz.domain.ports.repositories import ConversationRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.participant_pair import ParticipantPair
from konektz.domain.value_objects.user_id import UserId
from konektz.infrastructure.persistence.database import storage_errors
from konektz.infrastructure.persistence.models import (
    ConversationRecord,
    MessageRecord,
    UserRecord,
)

logger = logging.getLogger(__name__)


class SqlAlchemyConversationRepository(ConversationRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, record: ConversationRecord) -> Conversation:
        """Map database row to domain entity."""
        return Conversation(
            id=ConversationId(record.id),
            participant_one_id=UserId(record.participant_one_id),
            participant_two_id=UserId(record.participant_two_id),
            created_at=record.created_at,
            deleted_by_one=record.deleted_by_one,
            deleted_by_two=record.deleted_by_two,
            version=record.version,
        )

    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]:
        async with storage_errors(self._session):
            record = await self._session.get(
                ConversationRecord, conversation_id.value, populate_existing=True
            )
        return self._to_entity(record) if record else None

    async def get_by_pair(self, pair: ParticipantPair) -> Optional[Conversation]:
        async with storage_errors(self._session):
            result = await self._session.execute(
                select(ConversationRecord)
                .where(ConversationRecord.pair_key == pair.key)
                .execution_options(populate_existing=True)
            )
            record = result.scalar_one_or_none()
        return self._to_entity(record) if record else None

    async def add(self, conversation: Conversation) -> None:
        async with storage_errors(self._session):
            self._session.add(
                ConversationRecord(
                    id=conversation.id.value,
                    participant_one_id=conversation.participant_one_id.value,
                    participant_two_id=conversation.participant_two_id.value,
                    pair_key=conversation.pair.key,
                    deleted_by_one=conversation.deleted_by_one,
                    deleted_by_two=conversation.deleted_by_two,
                    version=conversation.version,
                    created_at=conversation.created_at,
                )
            )
            await self._session.commit()

    async def list_summaries(self, user_id: UserId) -> list[ConversationSummary]:
        uid = user_id.value
        other_id = case(
            (
                ConversationRecord.participant_one_id == uid,
                ConversationRecord.participant_two_id,
            ),
            else_=ConversationRecord.participant_one_id,
        )
        conversations_stmt = (
            select(
                ConversationRecord.id.label("conversation_id"),
                UserRecord.id.label("participant_id"),
                UserRecord.username.label("participant_name"),
            )
            .join(UserRecord, UserRecord.id == other_id)
            .where(
                or_(
                    and_(
                        ConversationRecord.participant_one_id == uid,
                        ConversationRecord.deleted_by_one.is_(False),
                    ),
                    and_(
                        ConversationRecord.participant_two_id == uid,
                        ConversationRecord.deleted_by_two.is_(False),
                    ),
                )
            )
            .order_by(ConversationRecord.created_at.desc(), ConversationRecord.id.desc())
        )

        async with storage_errors(self._session):
            rows = (await self._session.execute(conversations_stmt)).all()
            latest = await self._latest_messages([row.conversation_id for row in rows])

        summaries = []
        for row in rows:
            last_content, last_time = latest.get(row.conversation_id, (None, None))
            summaries.append(
                ConversationSummary(
                    conversation_id=ConversationId(row.conversation_id),
                    participant_id=UserId(row.participant_id),
                    participant_name=row.participant_name,
                    last_message=last_content,
                    last_message_time=last_time,
                )
            )
        return summaries

    async def _latest_messages(self, conversation_ids: list[str]) -> dict:
        """conversation_id -> (content, created_at) of its newest message."""
        if not conversation_ids:
            return {}

        ranked = (
            select(
                MessageRecord.conversation_id,
                MessageRecord.content,
                MessageRecord.created_at,
                func.row_number()
                .over(
                    partition_by=MessageRecord.conversation_id,
                    order_by=MessageRecord.created_at.desc(),
                )
                .label("position"),
            )
            .where(MessageRecord.conversation_id.in_(conversation_ids))
            .subquery()
        )
        result = await self._session.execute(
            select(ranked.c.conversation_id, ranked.c.content, ranked.c.created_at).where(
                ranked.c.position == 1
            )
        )
        return {
            row.conversation_id: (row.content, row.created_at) for row in result.all()
        }

    async def save_flags(self, conversation: Conversation) -> bool:
        async with storage_errors(self._session):
            result = await self._session.execute(
                update(ConversationRecord)
                .where(
                    ConversationRecord.id == conversation.id.value,
                    ConversationRecord.version == conversation.version,
                )
                .values(
                    deleted_by_one=conversation.deleted_by_one,
                    deleted_by_two=conversation.deleted_by_two,
                    version=ConversationRecord.version + 1,
                )
                .execution_options(synchronize_session=False)
            )
            await self._session.commit()

        if result.rowcount != 1:
            logger.info(f"Stale flags for conversation {conversation.id.value}")
            return False
        conversation.version += 1
        return True

    async def destroy(self, conversation: Conversation) -> bool:
        async with storage_errors(self._session):
            await self._session.execute(
                delete(MessageRecord)
                .where(MessageRecord.conversation_id == conversation.id.value)
                .execution_options(synchronize_session=False)
            )
            result = await self._session.execute(
                delete(ConversationRecord)
                .where(
                    ConversationRecord.id == conversation.id.value,
                    ConversationRecord.version == conversation.version,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                # Keep the messages; someone changed the row under us
                await self._session.rollback()
                logger.info(f"Stale delete for conversation {conversation.id.value}")
                return False
            await self._session.commit()
        return True
