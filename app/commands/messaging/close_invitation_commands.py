"""Commands for the two ways a pending invitation is closed without a conversation."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.constants.statuses import InvitationStatus
from app.exceptions import NotFoundError, PermissionDeniedError, StateError
from app.models.invitation import ChatInvitation
from app.services.invitation_service import InvitationService


class DeclineInvitationCommand(BaseCommand):
    """Receiver declines a pending invitation."""

    def execute(self, invitation_id: int, acting_user_id: int) -> ChatInvitation:
        with self.transaction():
            invitations = InvitationService(self.db)
            invitation = invitations.get_invitation(invitation_id, for_update=True)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            if invitation.receiver_id != acting_user_id:
                raise PermissionDeniedError(
                    "You do not have permission to decline this invitation"
                )
            if not invitation.is_pending:
                raise StateError("Only pending invitations can be declined")
            invitations.set_status(invitation, InvitationStatus.DECLINED)

        self.logger.info("Invitation %s declined by %s", invitation_id, acting_user_id)
        return invitation


class CancelInvitationCommand(BaseCommand):
    """Sender withdraws a pending invitation."""

    def execute(self, invitation_id: int, acting_user_id: int) -> ChatInvitation:
        with self.transaction():
            invitations = InvitationService(self.db)
            invitation = invitations.get_invitation(invitation_id, for_update=True)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            if invitation.sender_id != acting_user_id:
                raise PermissionDeniedError(
                    "You do not have permission to cancel this invitation"
                )
            if not invitation.is_pending:
                raise StateError("Only pending invitations can be canceled")
            invitations.set_status(invitation, InvitationStatus.CANCELED)

        self.logger.info("Invitation %s canceled by %s", invitation_id, acting_user_id)
        return invitation
