"""
Conversation Entity - A direct-message thread between exactly two users.

Each participant has their own "deleted" flag. A conversation is visible to a
participant while their flag is false. Once both participants have deleted it
the row is destroyed instead of being kept with both flags set.

    ACTIVE ──hide(one)──▶ HIDDEN_BY_ONE ──hide(two)──▶ DELETED
      │                        │
      └──hide(two)──▶ HIDDEN_BY_TWO ──hide(one)──▶ DELETED

restore() moves a hidden state back to ACTIVE for the restoring participant.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from konektz.domain.exceptions import EntityNotFoundError
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.participant_pair import ParticipantPair
from konektz.domain.value_objects.user_id import UserId


class ConversationState(str, Enum):
    ACTIVE = "active"
    HIDDEN_BY_ONE = "hidden_by_one"
    HIDDEN_BY_TWO = "hidden_by_two"
    DELETED = "deleted"


@dataclass
class Conversation:
    id: ConversationId
    participant_one_id: UserId
    participant_two_id: UserId
    created_at: datetime
    deleted_by_one: bool = False
    deleted_by_two: bool = False
    version: int = 0

    def __post_init__(self):
        if self.participant_one_id == self.participant_two_id:
            raise ValueError("A conversation needs two distinct participants")

    @classmethod
    def create(cls, initiator_id: UserId, other_id: UserId) -> Conversation:
        """Factory method to start a conversation; both flags start false."""
        return cls(
            id=ConversationId.generate(),
            participant_one_id=initiator_id,
            participant_two_id=other_id,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def pair(self) -> ParticipantPair:
        return ParticipantPair(self.participant_one_id, self.participant_two_id)

    @property
    def state(self) -> ConversationState:
        if self.deleted_by_one and self.deleted_by_two:
            return ConversationState.DELETED
        if self.deleted_by_one:
            return ConversationState.HIDDEN_BY_ONE
        if self.deleted_by_two:
            return ConversationState.HIDDEN_BY_TWO
        return ConversationState.ACTIVE

    def is_participant(self, user_id: UserId) -> bool:
        return user_id in self.pair

    def is_hidden_for(self, user_id: UserId) -> bool:
        self._require_participant(user_id)
        if user_id == self.participant_one_id:
            return self.deleted_by_one
        return self.deleted_by_two

    def is_visible_to(self, user_id: UserId) -> bool:
        return self.is_participant(user_id) and not self.is_hidden_for(user_id)

    def hide_for(self, user_id: UserId) -> bool:
        """
        Set the caller's deleted flag.

        Returns:
            True when the other participant had already deleted the
            conversation, meaning it must now be destroyed.
        """
        if not self.is_visible_to(user_id):
            raise EntityNotFoundError("Conversation not found")

        if user_id == self.participant_one_id:
            self.deleted_by_one = True
        else:
            self.deleted_by_two = True
        return self.state is ConversationState.DELETED

    def restore_for(self, user_id: UserId) -> None:
        if not self.is_participant(user_id) or not self.is_hidden_for(user_id):
            raise EntityNotFoundError(
                "Conversation not found or has not been deleted by you"
            )

        if user_id == self.participant_one_id:
            self.deleted_by_one = False
        else:
            self.deleted_by_two = False

    def _require_participant(self, user_id: UserId) -> None:
        if not self.is_participant(user_id):
            raise EntityNotFoundError("Conversation not found")


@dataclass
class ConversationSummary:
    """A conversation as one participant sees it in their inbox."""

    conversation_id: ConversationId
    participant_id: UserId
    participant_name: str
    last_message: Optional[str] = None
    last_message_time: Optional[datetime] = None
