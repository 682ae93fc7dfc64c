"""
Find Or Create Conversation Command.

Resolves the single conversation between the caller and another user:
- The caller cannot start a conversation with themselves
- The other user must exist
- An existing conversation for the pair is returned as-is, even if one side
  has deleted it (flags are left untouched)
- Otherwise a new conversation is inserted. When two requests race for the
  same pair, the loser's insert hits the pair-key constraint and it returns
  the winner's row instead. Any other conflict propagates.
"""

import logging
from dataclasses import dataclass

from konektz.application.common.interfaces import Command, CommandHandler
from konektz.domain.entities.conversation import Conversation
from konektz.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    SelfConversationError,
)
from konektz.domain.ports.repositories import ConversationRepository, UserRepository
from konektz.domain.value_objects.participant_pair import (
    PAIR_KEY_CONSTRAINT,
    ParticipantPair,
)
from konektz.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class ConversationResolution:
    conversation: Conversation
    created: bool


@dataclass(frozen=True)
class FindOrCreateConversationCommand(Command[ConversationResolution]):
    user_id: UserId
    participant_id: UserId


class FindOrCreateConversationHandler(CommandHandler[ConversationResolution]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
    ):
        self._conversation_repository = conversation_repository
        self._user_repository = user_repository

    async def execute(
        self, command: FindOrCreateConversationCommand
    ) -> ConversationResolution:
        if command.participant_id == command.user_id:
            raise SelfConversationError()

        participant = await self._user_repository.get_by_id(command.participant_id)
        if not participant:
            raise EntityNotFoundError("User not found")

        pair = ParticipantPair(command.user_id, command.participant_id)
        existing = await self._conversation_repository.get_by_pair(pair)
        if existing:
            return ConversationResolution(conversation=existing, created=False)

        conversation = Conversation.create(
            initiator_id=command.user_id, other_id=command.participant_id
        )
        try:
            await self._conversation_repository.add(conversation)
        except ConflictError as e:
            if e.constraint is not None and e.constraint != PAIR_KEY_CONSTRAINT:
                raise
            winner = await self._conversation_repository.get_by_pair(pair)
            if winner is None:
                raise
            logger.info(f"Conversation for {pair} created concurrently, reusing it")
            return ConversationResolution(conversation=winner, created=False)

        logger.info(f"Created conversation {conversation.id.value}")
        return ConversationResolution(conversation=conversation, created=True)
