"""List Conversations Query - the caller's inbox."""

from dataclasses import dataclass
from konektz.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from konektz.application.common.interfaces import Query, QueryHandler
from konektz.domain.entities.conversation import ConversationSummary
from konektz.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationSummary]]):
    user_id: UserId


class ListConversationsHandler(QueryHandler[list[ConversationSummary]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, query: ListConversationsQuery) -> list[ConversationSummary]:
        return await self._conversation_repository.list_summaries(query.user_id)
