"""
Message Entity - A single message in a conversation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from konektz.domain.exceptions import EmptyContentError
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.message_id import MessageId
from konektz.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    conversation_id: ConversationId
    sender_id: UserId
    content: str
    created_at: datetime
    updated_at: datetime
    sender_name: Optional[str] = None

    def __post_init__(self):
        if not self.content or not self.content.strip():
            raise EmptyContentError()

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        sender_id: UserId,
        content: Optional[str],
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        text = (content or "").strip()
        if not text:
            raise EmptyContentError()

        now = datetime.now(timezone.utc)
        return cls(
            id=MessageId.generate(),
            conversation_id=conversation_id,
            sender_id=sender_id,
            content=text,
            created_at=now,
            updated_at=now,
        )
