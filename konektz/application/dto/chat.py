"""Chat DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from konektz.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to the client (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    conversation_id: str
    sender_id: str
    sender_name: Optional[str] = None
    content: str
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_id=message.sender_id.value,
            sender_name=message.sender_name,
            content=message.content,
            created_at=message.created_at,
        )


class SentMessageDTO(MessageDTO):
    """A freshly stored message, which also reports updatedAt."""

    updated_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "SentMessageDTO":
        return cls(
            id=message.id.value,
            conversation_id=message.conversation_id.value,
            sender_id=message.sender_id.value,
            sender_name=message.sender_name,
            content=message.content,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
