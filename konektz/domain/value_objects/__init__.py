"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from konektz.domain.value_objects.user_id import UserId
from konektz.domain.value_objects.user_email import UserEmail
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.message_id import MessageId
from konektz.domain.value_objects.participant_pair import ParticipantPair

__all__ = [
    "UserId",
    "UserEmail",
    "ConversationId",
    "MessageId",
    "ParticipantPair",
]
