"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py         → MessageDTO, SentMessageDTO
- conversation.py → ConversationRefDTO, ConversationSummaryDTO
- user.py         → PublicUserDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from konektz.application.dto.chat import MessageDTO, SentMessageDTO
from konektz.application.dto.conversation import ConversationRefDTO, ConversationSummaryDTO
from konektz.application.dto.user import PublicUserDTO

__all__ = [
    "MessageDTO",
    "SentMessageDTO",
    "ConversationRefDTO",
    "ConversationSummaryDTO",
    "PublicUserDTO",
]
