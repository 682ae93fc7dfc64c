"""
Base interfaces for the command/query handlers.

Usage:
    @dataclass(frozen=True)
    class RestoreConversationCommand(Command[Conversation]):
        conversation_id: ConversationId
        user_id: UserId

    class RestoreConversationHandler(CommandHandler[Conversation]):
        def __init__(self, conversation_repository: ConversationRepository):
            self._conversation_repository = conversation_repository

        async def execute(self, command: RestoreConversationCommand) -> Conversation:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for write operations"""


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Run the command and return its result"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read operations"""


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Run the query and return its result"""
        ...
