"""Command to accept a chat invitation and open the pair's conversation."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.constants.statuses import InvitationStatus
from app.exceptions import NotFoundError, PermissionDeniedError, StateError
from app.models.conversation import Conversation
from app.services.conversation_service import ConversationService
from app.services.invitation_service import InvitationService


class AcceptInvitationCommand(BaseCommand):
    """
    Mark the invitation accepted and get-or-create the canonical conversation,
    in one transaction.

    Accepting an already accepted invitation returns the existing conversation.
    The invitation row is locked so concurrent accepts serialise; the
    conversation pair's unique constraint plus ON CONFLICT DO NOTHING keeps a
    single conversation row either way.
    """

    def execute(self, invitation_id: int, acting_user_id: int) -> Conversation:
        with self.transaction():
            invitations = InvitationService(self.db)
            invitation = invitations.get_invitation(invitation_id, for_update=True)
            if invitation is None:
                raise NotFoundError("Invitation not found")
            if invitation.receiver_id != acting_user_id:
                raise PermissionDeniedError(
                    "You do not have permission to accept this invitation"
                )
            if invitation.status not in (
                InvitationStatus.PENDING,
                InvitationStatus.ACCEPTED,
            ):
                raise StateError(
                    f"Invitation is {invitation.status} and can no longer be accepted"
                )

            if invitation.status == InvitationStatus.PENDING:
                invitations.set_status(invitation, InvitationStatus.ACCEPTED)
            conversation, created = ConversationService(
                self.db
            ).get_or_create_for_pair(invitation.sender_id, invitation.receiver_id)

        self.logger.info(
            "Invitation %s accepted by %s; conversation %s (%s)",
            invitation_id,
            acting_user_id,
            conversation.id,
            "created" if created else "existing",
            extra={
                "invitation_id": invitation_id,
                "conversation_id": conversation.id,
            },
        )
        return conversation
