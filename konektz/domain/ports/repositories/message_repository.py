"""
Message Repository Port - Interface for message persistence.
Implementation: konektz/infrastructure/persistence/sqlalchemy_message_repository.py
"""

from abc import ABC, abstractmethod

from konektz.domain.entities.message import Message
from konektz.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_conversation(
        self, conversation_id: ConversationId
    ) -> list[Message]:
        """All messages oldest first, with sender_name filled in."""
        ...

    @abstractmethod
    async def add(self, message: Message) -> Message:
        """Insert and return the message with sender_name filled in."""
        ...
