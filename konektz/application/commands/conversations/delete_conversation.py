"""
Delete Conversation Command.

Deleting hides the conversation for the caller only. If the other
participant had already deleted it, the conversation and its messages are
destroyed instead. The write is compare-and-set, so when both participants
delete at the same moment one of them re-reads the row, sees the other's flag
and destroys it.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.exceptions import ConflictError, EntityNotFoundError
from konektz.domain.ports.repositories import ConversationRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5


class DeleteOutcome(str, Enum):
    HIDDEN = "hidden"
    DESTROYED = "destroyed"


@dataclass(frozen=True)
class DeleteConversationCommand(Command[DeleteOutcome]):
    conversation_id: ConversationId
    user_id: UserId


class DeleteConversationHandler(CommandHandler[DeleteOutcome]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: DeleteConversationCommand) -> DeleteOutcome:
        for attempt in range(1, MAX_ATTEMPTS + 1):
            conversation = await self._conversation_repository.get_by_id(
                command.conversation_id
            )
            if not conversation:
                raise EntityNotFoundError("Conversation not found")

            if conversation.hide_for(command.user_id):
                if await self._conversation_repository.destroy(conversation):
                    logger.info(f"Destroyed conversation {conversation.id.value}")
                    return DeleteOutcome.DESTROYED
            elif await self._conversation_repository.save_flags(conversation):
                return DeleteOutcome.HIDDEN

            logger.debug(f"Retrying delete of {conversation.id.value} (attempt {attempt})")

        raise ConflictError("Conversation is being modified, please retry")
