"""
Conversation Repository Port - Interface for conversation persistence.
Implementation: konektz/infrastructure/persistence/sqlalchemy_conversation_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from konektz.domain.entities.conversation import Conversation, ConversationSummary
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.participant_pair import ParticipantPair
from konektz.domain.value_objects.user_id import UserId


class ConversationRepository(ABC):
    @abstractmethod
    async def get_by_id(
        self, conversation_id: ConversationId
    ) -> Optional[Conversation]: ...

    @abstractmethod
    async def get_by_pair(self, pair: ParticipantPair) -> Optional[Conversation]:
        """Find the conversation for an unordered pair, whatever its flags."""
        ...

    @abstractmethod
    async def add(self, conversation: Conversation) -> None:
        """Insert a new conversation. Raises ConflictError if the pair exists."""
        ...

    @abstractmethod
    async def list_summaries(self, user_id: UserId) -> list[ConversationSummary]:
        """Conversations visible to user_id, newest first."""
        ...

    @abstractmethod
    async def save_flags(self, conversation: Conversation) -> bool:
        """
        Persist the deleted flags if the stored version still matches
        conversation.version. Returns False when another writer got there first.
        """
        ...

    @abstractmethod
    async def destroy(self, conversation: Conversation) -> bool:
        """
        Delete the conversation and its messages if the stored version still
        matches. Returns False when another writer got there first.
        """
        ...
