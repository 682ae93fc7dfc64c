"""Chat queries."""

from konektz.application.queries.chat.get_chat_history import (
    GetChatHistoryQuery,
    GetChatHistoryHandler,
)

__all__ = [
    "GetChatHistoryQuery",
    "GetChatHistoryHandler",
]
