"""Chat invitation API: send, list, accept, decline, cancel."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.auth.identity import CurrentUser, get_current_user
from app.commands.messaging import (
    AcceptInvitationCommand,
    CancelInvitationCommand,
    DeclineInvitationCommand,
    SendInvitationCommand,
)
from app.constants.ids import MAX_ID
from app.db import get_db
from app.schemas.conversation import ConversationRead, ConversationResponse
from app.schemas.invitation import (
    InvitationCreate,
    InvitationListResponse,
    InvitationRead,
    InvitationResponse,
)
from app.services.invitation_service import InvitationService

invitations_router = APIRouter(prefix="/invitations", tags=["Invitation"])


@invitations_router.post("", response_model=InvitationResponse, status_code=201)
def send_invitation(
    data: InvitationCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> InvitationResponse:
    """Invite a user to chat. Re-inviting resets the invitation to pending."""
    invitation = SendInvitationCommand(db).execute(current_user.id, data.receiver_id)
    return InvitationResponse(invitation=InvitationRead.model_validate(invitation))


@invitations_router.get("/pending", response_model=InvitationListResponse)
def list_pending_invitations(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> InvitationListResponse:
    """Pending invitations received by the caller, newest first."""
    invitations = InvitationService(db).get_pending_received(current_user.id)
    return InvitationListResponse(
        invitations=[InvitationRead.model_validate(i) for i in invitations]
    )


@invitations_router.get("/sent", response_model=InvitationListResponse)
def list_sent_invitations(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> InvitationListResponse:
    """Pending invitations sent by the caller, newest first."""
    invitations = InvitationService(db).get_pending_sent(current_user.id)
    return InvitationListResponse(
        invitations=[InvitationRead.model_validate(i) for i in invitations]
    )


@invitations_router.post(
    "/{invitation_id}/accept", response_model=ConversationResponse
)
def accept_invitation(
    invitation_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> ConversationResponse:
    """Accept an invitation and return the pair's conversation."""
    conversation = AcceptInvitationCommand(db).execute(invitation_id, current_user.id)
    return ConversationResponse(
        conversation=ConversationRead.model_validate(conversation)
    )


@invitations_router.post(
    "/{invitation_id}/decline", response_model=InvitationResponse
)
def decline_invitation(
    invitation_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> InvitationResponse:
    invitation = DeclineInvitationCommand(db).execute(invitation_id, current_user.id)
    return InvitationResponse(invitation=InvitationRead.model_validate(invitation))


@invitations_router.post("/{invitation_id}/cancel", response_model=InvitationResponse)
def cancel_invitation(
    invitation_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> InvitationResponse:
    invitation = CancelInvitationCommand(db).execute(invitation_id, current_user.id)
    return InvitationResponse(invitation=InvitationRead.model_validate(invitation))
