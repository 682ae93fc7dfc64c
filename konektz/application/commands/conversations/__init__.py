"""Conversation commands."""

from .delete_conversation import (
    DeleteConversationCommand,
    DeleteConversationHandler,
    DeleteOutcome,
)
from .find_or_create_conversation import (
    ConversationResolution,
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
)
from .restore_conversation import RestoreConversationCommand, RestoreConversationHandler

__all__ = [
    "ConversationResolution",
    "FindOrCreateConversationCommand",
    "FindOrCreateConversationHandler",
    "DeleteConversationCommand",
    "DeleteConversationHandler",
    "DeleteOutcome",
    "RestoreConversationCommand",
    "RestoreConversationHandler",
]
