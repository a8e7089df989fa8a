"""Pydantic schemas for chat invitations."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from app.constants.ids import MAX_ID
from app.constants.statuses import InvitationStatus
from app.schemas.common import Envelope


class InvitationCreate(BaseModel):
    """Request schema for inviting another user to chat."""

    receiver_id: int = Field(
        ...,
        gt=0,
        le=MAX_ID,
        validation_alias=AliasChoices("receiverId", "receiver_id"),
    )

    model_config = {"extra": "forbid"}


class InvitationRead(BaseModel):
    """Response schema for an invitation, with both parties' emails."""

    id: int
    sender_id: int
    receiver_id: int
    status: InvitationStatus
    sender_email: str | None = None
    receiver_email: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class InvitationResponse(Envelope):
    invitation: InvitationRead


class InvitationListResponse(Envelope):
    invitations: list[InvitationRead]
