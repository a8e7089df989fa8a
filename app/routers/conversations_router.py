"""Conversation API: list, read messages, send, delete (per user)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from fastapi_pagination import LimitOffsetParams
from sqlalchemy.orm import Session

from app.auth.identity import CurrentUser, get_current_user
from app.commands.messaging import (
    DeleteConversationCommand,
    GetMessagesCommand,
    SendMessageCommand,
)
from app.constants.ids import MAX_ID
from app.db import get_db
from app.schemas.common import AckResponse
from app.schemas.conversation import (
    ConversationListResponse,
    ConversationListRow,
    MessageCreate,
    MessageListResponse,
    MessageRead,
    MessageResponse,
)
from app.services.conversation_service import ConversationService

conversations_router = APIRouter(prefix="/conversations", tags=["Conversation"])


@conversations_router.get("", response_model=ConversationListResponse)
def list_conversations(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ConversationListResponse:
    """Conversations the caller has not deleted, most recently active first."""
    rows = ConversationService(db).list_for_user(current_user.id)
    return ConversationListResponse(
        conversations=[ConversationListRow(**row) for row in rows]
    )


@conversations_router.get(
    "/{conversation_id}/messages", response_model=MessageListResponse
)
def get_messages(
    conversation_id: int = Path(gt=0, le=MAX_ID),
    params: LimitOffsetParams = Depends(),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageListResponse:
    """
    Page through visible messages (oldest first within the page). The other
    participant's messages are marked read.
    """
    messages = GetMessagesCommand(db).execute(
        conversation_id, current_user.id, limit=params.limit, offset=params.offset
    )
    return MessageListResponse(
        messages=[MessageRead.model_validate(m) for m in messages],
        limit=params.limit,
        offset=params.offset,
    )


@conversations_router.post(
    "/{conversation_id}/send", response_model=MessageResponse, status_code=201
)
def send_message(
    data: MessageCreate,
    conversation_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MessageResponse:
    message = SendMessageCommand(db).execute(
        conversation_id, current_user.id, data.content, data.message_type
    )
    return MessageResponse(message=MessageRead.model_validate(message))


@conversations_router.post("/{conversation_id}/delete", response_model=AckResponse)
def delete_conversation(
    conversation_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AckResponse:
    """Hide the conversation for the caller only."""
    DeleteConversationCommand(db).execute(conversation_id, current_user.id)
    return AckResponse(message="Conversation deleted")
