"""Command to send (or re-send) a chat invitation."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.exceptions import NotFoundError, ValidationError
from app.models.invitation import ChatInvitation
from app.services.invitation_service import InvitationService
from app.services.user_service import UserService


class SendInvitationCommand(BaseCommand):
    """
    Upsert a pending invitation from sender to receiver.

    Re-sending after any prior outcome (declined, canceled, accepted) resets
    the same row to pending.
    """

    def execute(self, sender_id: int, receiver_id: int) -> ChatInvitation:
        if sender_id == receiver_id:
            raise ValidationError("Cannot send invitation to yourself")

        with self.transaction():
            if not UserService(self.db).user_exists(receiver_id):
                raise NotFoundError("User not found")
            invitation = InvitationService(self.db).upsert_pending(
                sender_id, receiver_id
            )

        self.logger.info(
            "Invitation %s pending: %s -> %s", invitation.id, sender_id, receiver_id
        )
        return invitation
