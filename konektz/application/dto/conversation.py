"""Conversation DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from konektz.domain.entities.conversation import ConversationSummary


class ConversationRefDTO(BaseModel):
    id: str


class ConversationSummaryDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    conversation_id: str
    participant_id: str
    participant_name: str
    last_message: Optional[str] = None
    last_message_time: Optional[datetime] = None

    @classmethod
    def from_entity(cls, summary: ConversationSummary) -> "ConversationSummaryDTO":
        return cls(
            conversation_id=summary.conversation_id.value,
            participant_id=summary.participant_id.value,
            participant_name=summary.participant_name,
            last_message=summary.last_message,
            last_message_time=summary.last_message_time,
        )
