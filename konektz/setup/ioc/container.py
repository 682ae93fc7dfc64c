"""
Dishka DI Container Setup.

- Registers all dependencies (database, repositories, handlers, verifier)
- Maps abstract ports to concrete implementations
- Manages lifecycle:
  Scope.APP     = one Database / CredentialVerifier per process
  Scope.REQUEST = one AsyncSession (and the repositories on top of it) per request

Flow:
  Container → Database → AsyncSession → SqlAlchemyConversationRepository
                                               ↓
                     FindOrCreateConversationHandler (sees ConversationRepository)
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession

from konektz.application.commands.auth import LoginUserHandler, RegisterUserHandler
from konektz.application.commands.chat import SendMessageHandler
from konektz.application.commands.conversations import (
    DeleteConversationHandler,
    FindOrCreateConversationHandler,
    RestoreConversationHandler,
)
from konektz.application.queries.chat import GetChatHistoryHandler
from konektz.application.queries.conversations import ListConversationsHandler
from konektz.config.settings import Config
from konektz.domain.ports.credential_verifier import CredentialVerifier
from konektz.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
    UserRepository,
)
from konektz.infrastructure.persistence import (
    Database,
    SqlAlchemyConversationRepository,
    SqlAlchemyMessageRepository,
    SqlAlchemyUserRepository,
)


class AppProvider(Provider):
    """
    Application dependency provider.

    Built by the entry point with the active config and the credential
    verifier it already uses for the auth gate.
    """

    def __init__(self, config: type[Config], credential_verifier: CredentialVerifier):
        super().__init__()
        self._config = config
        self._credential_verifier = credential_verifier

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_database(self) -> AsyncIterable[Database]:
        """
        Provide the Database (singleton, app-scoped).

        The engine is disposed when the container closes on shutdown.
        """
        database = Database(
            self._config.DATABASE_URL,
            echo=self._config.DB_ECHO,
            pool_size=self._config.DB_POOL_SIZE,
        )
        if self._config.DB_AUTO_CREATE:
            await database.create_schema()
        yield database
        await database.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(self, database: Database) -> AsyncIterable[AsyncSession]:
        async with database.session() as session:
            yield session

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_credential_verifier(self) -> CredentialVerifier:
        return self._credential_verifier

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return SqlAlchemyUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, session: AsyncSession) -> ConversationRepository:
        """
        Provide ConversationRepository implementation.

        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (SqlAlchemyConversationRepository)
        """
        return SqlAlchemyConversationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        return SqlAlchemyMessageRepository(session)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_register_user_handler(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
    ) -> RegisterUserHandler:
        return RegisterUserHandler(user_repository, credential_verifier)

    @provide(scope=Scope.REQUEST)
    def get_login_user_handler(
        self,
        user_repository: UserRepository,
        credential_verifier: CredentialVerifier,
    ) -> LoginUserHandler:
        return LoginUserHandler(user_repository, credential_verifier)

    @provide(scope=Scope.REQUEST)
    def get_find_or_create_conversation_handler(
        self,
        conversation_repository: ConversationRepository,
        user_repository: UserRepository,
    ) -> FindOrCreateConversationHandler:
        return FindOrCreateConversationHandler(conversation_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> DeleteConversationHandler:
        return DeleteConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_restore_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> RestoreConversationHandler:
        return RestoreConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> SendMessageHandler:
        return SendMessageHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_chat_history_handler(
        self,
        conversation_repository: ConversationRepository,
        message_repository: MessageRepository,
    ) -> GetChatHistoryHandler:
        return GetChatHistoryHandler(
            conv_repo=conversation_repository,
            msg_repo=message_repository,
        )


def create_container(
    config: type[Config], credential_verifier: CredentialVerifier
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application instance.
    """
    return make_async_container(AppProvider(config, credential_verifier))
