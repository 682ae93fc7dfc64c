"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (SQLAlchemy, etc.)

Infrastructure layer provides implementations.
"""

from konektz.domain.ports.repositories.conversation_repository import ConversationRepository
from konektz.domain.ports.repositories.message_repository import MessageRepository
from konektz.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "ConversationRepository",
    "MessageRepository",
    "UserRepository",
]
