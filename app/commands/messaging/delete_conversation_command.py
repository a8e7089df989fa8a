"""Command to hide a conversation for the acting participant only."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.exceptions import PermissionDeniedError
from app.services.conversation_service import ConversationService


class DeleteConversationCommand(BaseCommand):
    def execute(self, conversation_id: int, user_id: int) -> bool:
        """
        Add a soft-delete mark for user_id. Idempotent: an existing mark keeps
        its original timestamp. Returns True if a new mark was written.
        """
        with self.transaction():
            conversations = ConversationService(self.db)
            if conversations.get_for_participant(conversation_id, user_id) is None:
                raise PermissionDeniedError(
                    "You do not have access to this conversation"
                )
            created = conversations.mark_deleted(conversation_id, user_id)

        self.logger.info(
            "Conversation %s deleted for %s%s",
            conversation_id,
            user_id,
            "" if created else " (already deleted)",
            extra={"user_id": user_id, "conversation_id": conversation_id},
        )
        return created
