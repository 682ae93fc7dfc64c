"""Restore Conversation Command - undo the caller's own delete."""

import logging
from dataclasses import dataclass

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.entities.conversation import Conversation
from konektz.domain.exceptions import ConflictError, EntityNotFoundError
from konektz.domain.ports.repositories import ConversationRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5


@dataclass(frozen=True)
class RestoreConversationCommand(Command[Conversation]):
    conversation_id: ConversationId
    user_id: UserId


class RestoreConversationHandler(CommandHandler[Conversation]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: RestoreConversationCommand) -> Conversation:
        for attempt in range(1, MAX_ATTEMPTS + 1):
            conversation = await self._conversation_repository.get_by_id(
                command.conversation_id
            )
            if not conversation:
                raise EntityNotFoundError(
                    "Conversation not found or has not been deleted by you"
                )

            conversation.restore_for(command.user_id)
            if await self._conversation_repository.save_flags(conversation):
                logger.info(f"Restored conversation {conversation.id.value}")
                return conversation

            logger.debug(f"Retrying restore of {conversation.id.value} (attempt {attempt})")

        raise ConflictError("Conversation is being modified, please retry")
