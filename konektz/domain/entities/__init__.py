"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from konektz.domain.entities.conversation import (
    Conversation,
    ConversationState,
    ConversationSummary,
)
from konektz.domain.entities.message import Message
from konektz.domain.entities.user import User

__all__ = [
    "Conversation",
    "ConversationState",
    "ConversationSummary",
    "Message",
    "User",
]
