"""Pydantic schemas for the directed contact list."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from app.constants.ids import MAX_ID
from app.schemas.common import Envelope


class ContactCreate(BaseModel):
    """Request schema for adding a contact (owner is the caller)."""

    contact_user_id: int = Field(
        ...,
        gt=0,
        le=MAX_ID,
        validation_alias=AliasChoices("contactUserId", "contact_user_id"),
    )

    model_config = {"extra": "forbid"}


class ContactRead(BaseModel):
    """A contact edge with the contact's identity."""

    id: int
    user_id: int
    contact_user_id: int
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ContactResponse(Envelope):
    contact: ContactRead


class ContactListResponse(Envelope):
    contacts: list[ContactRead]
