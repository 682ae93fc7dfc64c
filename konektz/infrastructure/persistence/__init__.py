"""
Persistence Layer - Database implementations.

Contains SQLAlchemy repository implementations for domain ports.
"""

from konektz.infrastructure.persistence.database import (
    Database,
    storage_errors,
    translate_storage_error,
)
from konektz.infrastructure.persistence.sqlalchemy_conversation_repository import (
    SqlAlchemyConversationRepository,
)
from konektz.infrastructure.persistence.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from konektz.infrastructure.persistence.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)

__all__ = [
    "Database",
    "storage_errors",
    "translate_storage_error",
    "SqlAlchemyConversationRepository",
    "SqlAlchemyMessageRepository",
    "SqlAlchemyUserRepository",
]
