"""Contacts API: the caller's outgoing contact edges."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.auth.identity import CurrentUser, get_current_user
from app.commands.location import AddContactCommand, RemoveContactCommand
from app.constants.ids import MAX_ID
from app.db import get_db
from app.schemas.common import AckResponse
from app.schemas.contact import (
    ContactCreate,
    ContactListResponse,
    ContactRead,
    ContactResponse,
)
from app.services.contact_service import ContactService

contacts_router = APIRouter(prefix="/contacts", tags=["Contact"])


@contacts_router.post("", response_model=ContactResponse, status_code=201)
def add_contact(
    data: ContactCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ContactResponse:
    """Add a contact. Adding the same user again keeps one edge."""
    contact = AddContactCommand(db).execute(current_user.id, data.contact_user_id)
    return ContactResponse(contact=ContactRead.model_validate(contact))


@contacts_router.get("", response_model=ContactListResponse)
def list_contacts(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ContactListResponse:
    contacts = ContactService(db).list_contacts(current_user.id)
    return ContactListResponse(
        contacts=[ContactRead.model_validate(c) for c in contacts]
    )


@contacts_router.delete("/{contact_id}", response_model=AckResponse)
def remove_contact(
    contact_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AckResponse:
    RemoveContactCommand(db).execute(contact_id, current_user.id)
    return AckResponse(message="Contact removed")
