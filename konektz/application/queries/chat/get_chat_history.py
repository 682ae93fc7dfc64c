"""
GetChatHistory Query - all messages of a conversation, oldest first.

Any participant may read the history, including one who has deleted the
conversation on their side; only non-participants get a 404.
"""

from dataclasses import dataclass

from konektz.application.common.interfaces import Query, QueryHandler
from konektz.domain.entities.message import Message
from konektz.domain.exceptions import EntityNotFoundError
from konektz.domain.ports.repositories import ConversationRepository, MessageRepository
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetChatHistoryQuery(Query[list[Message]]):
    conversation_id: ConversationId
    user_id: UserId


class GetChatHistoryHandler(QueryHandler[list[Message]]):
    def __init__(
        self,
        conv_repo: ConversationRepository,
        msg_repo: MessageRepository,
    ):
        self._conv_repo = conv_repo
        self._msg_repo = msg_repo

    async def execute(self, query: GetChatHistoryQuery) -> list[Message]:
        conversation = await self._conv_repo.get_by_id(query.conversation_id)
        if not conversation or not conversation.is_participant(query.user_id):
            raise EntityNotFoundError("Conversation not found")

        return await self._msg_repo.get_by_conversation(conversation.id)
