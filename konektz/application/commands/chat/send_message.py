"""
SendMessage Command - Append a message to a conversation.

Handler:
1. Load conversation from repo
2. Verify the sender is one of its two participants (delete flags ignored)
3. Trim and validate the content
4. Save the message and return it with the sender's username
"""

import logging
from dataclasses import dataclass
from typing import Optional

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.entities.message import Message
from konektz.domain.exceptions import EntityNotFoundError
from konektz.domain.ports.repositories.conversation_repository import ConversationRepository
from konektz.domain.ports.repositories.message_repository import MessageRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    conversation_id: ConversationId
    user_id: UserId
    content: Optional[str]


class SendMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, command: SendMessageCommand) -> Message:
        conversation = await self._conv_repo.get_by_id(command.conversation_id)
        if not conversation or not conversation.is_participant(command.user_id):
            raise EntityNotFoundError("Conversation not found")

        message = Message.create(
            conversation_id=conversation.id,
            sender_id=command.user_id,
            content=command.content,
        )
        saved = await self._msg_repo.add(message)
        logger.debug(f"Stored message {saved.id.value} in {conversation.id.value}")
        return saved
