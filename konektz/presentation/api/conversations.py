"""
Conversations API Router - direct conversations and their messages.

- Every endpoint requires a bearer token (get_current_user)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business logic to Application layer handlers
- Domain errors propagate to the handlers in presentation/errors.py

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional, Union

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from konektz.application.commands.chat import SendMessageCommand, SendMessageHandler
from konektz.application.commands.conversations import (
    DeleteConversationCommand,
    DeleteConversationHandler,
    FindOrCreateConversationCommand,
    FindOrCreateConversationHandler,
    RestoreConversationCommand,
    RestoreConversationHandler,
)
from konektz.application.dto.chat import MessageDTO, SentMessageDTO
from konektz.application.dto.conversation import (
    ConversationRefDTO,
    ConversationSummaryDTO,
)
from konektz.application.queries.chat import GetChatHistoryHandler, GetChatHistoryQuery
from konektz.application.queries.conversations import (
    ListConversationsHandler,
    ListConversationsQuery,
)
from konektz.domain.exceptions import DomainValidationError, EntityNotFoundError
from konektz.domain.value_objects.conversation_id import ConversationId
from konektz.domain.value_objects.user_id import UserId
from konektz.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateConversationRequest(BaseModel):
    """Request body for starting (or finding) a conversation."""

    participant_id: Optional[Union[str, int]] = None


class CreateConversationResponse(BaseModel):
    status: str = "success"
    conversation: ConversationRefDTO


class ListConversationsResponse(BaseModel):
    status: str = "success"
    conversations: list[ConversationSummaryDTO]


class StatusMessageResponse(BaseModel):
    status: str = "success"
    message: str


class SendMessageRequest(BaseModel):
    content: Optional[str] = None


class SendMessageResponse(BaseModel):
    status: str = "success"
    message: SentMessageDTO


class ListMessagesResponse(BaseModel):
    status: str = "success"
    messages: list[MessageDTO]


def _conversation_id(raw: str) -> ConversationId:
    """Malformed ids cannot name an existing conversation."""
    try:
        return ConversationId(raw)
    except ValueError as e:
        raise EntityNotFoundError("Conversation not found") from e


def _participant_id(raw: Optional[Union[str, int]]) -> UserId:
    if raw is None or str(raw).strip() == "":
        raise DomainValidationError("participant_id is required")
    try:
        return UserId(str(raw).strip())
    except ValueError as e:
        raise EntityNotFoundError("User not found") from e


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=ListConversationsResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the conversations the current user has not deleted."""
    summaries = await handler.execute(ListConversationsQuery(user_id=current_user.id))
    return ListConversationsResponse(
        conversations=[ConversationSummaryDTO.from_entity(s) for s in summaries]
    )


@router.post(
    "",
    response_model=CreateConversationResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    request: CreateConversationRequest,
    response: Response,
    handler: FromDishka[FindOrCreateConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Start a conversation with another user.

    201 with the new id, or 200 with the id of the conversation that already
    exists between the two users.
    """
    resolution = await handler.execute(
        FindOrCreateConversationCommand(
            user_id=current_user.id,
            participant_id=_participant_id(request.participant_id),
        )
    )
    if not resolution.created:
        response.status_code = status.HTTP_200_OK

    return CreateConversationResponse(
        conversation=ConversationRefDTO(id=resolution.conversation.id.value)
    )


@router.delete(
    "/{conversation_id}",
    response_model=StatusMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_conversation(
    conversation_id: str,
    handler: FromDishka[DeleteConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Delete the conversation for the current user."""
    outcome = await handler.execute(
        DeleteConversationCommand(
            conversation_id=_conversation_id(conversation_id),
            user_id=current_user.id,
        )
    )
    logger.info(f"Conversation {conversation_id} delete by {current_user.id}: {outcome.value}")
    return StatusMessageResponse(message="Conversation deleted")


@router.post(
    "/{conversation_id}/restore",
    response_model=StatusMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def restore_conversation(
    conversation_id: str,
    handler: FromDishka[RestoreConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Undo the current user's delete."""
    await handler.execute(
        RestoreConversationCommand(
            conversation_id=_conversation_id(conversation_id),
            user_id=current_user.id,
        )
    )
    return StatusMessageResponse(message="Conversation restored")


@router.get(
    "/{conversation_id}/messages",
    response_model=ListMessagesResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_messages(
    conversation_id: str,
    handler: FromDishka[GetChatHistoryHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """All messages of the conversation, oldest first."""
    messages = await handler.execute(
        GetChatHistoryQuery(
            conversation_id=_conversation_id(conversation_id),
            user_id=current_user.id,
        )
    )
    return ListMessagesResponse(messages=[MessageDTO.from_entity(m) for m in messages])


@router.post(
    "/{conversation_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Send a message as the current user."""
    message = await handler.execute(
        SendMessageCommand(
            conversation_id=_conversation_id(conversation_id),
            user_id=current_user.id,
            content=request.content,
        )
    )
    return SendMessageResponse(message=SentMessageDTO.from_entity(message))
