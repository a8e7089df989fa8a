"""Pydantic schemas for conversations and messages."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from app.schemas.common import Envelope


class ConversationRead(BaseModel):
    """Response schema for a conversation row (canonical pair)."""

    id: int
    user1_id: int
    user2_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ConversationListRow(BaseModel):
    """A conversation as seen by one participant."""

    id: int
    other_user_id: int
    other_user_email: str | None = None
    created_at: datetime
    updated_at: datetime


class MessageCreate(BaseModel):
    """Request schema for posting a message. Blank content is rejected by the
    send command.
    """

    content: str | None = Field(None, max_length=10000)
    message_type: str | None = Field(
        None,
        max_length=50,
        validation_alias=AliasChoices("type", "messageType", "message_type"),
    )

    model_config = {"extra": "forbid"}


class MessageRead(BaseModel):
    id: int
    conversation_id: int
    sender_id: int
    sender_email: str | None = None
    content: str
    message_type: str
    is_read: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ConversationResponse(Envelope):
    conversation: ConversationRead


class ConversationListResponse(Envelope):
    conversations: list[ConversationListRow]


class MessageResponse(Envelope):
    message: MessageRead


class MessageListResponse(Envelope):
    messages: list[MessageRead]
    limit: int
    offset: int
