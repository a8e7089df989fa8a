"""Command to read a page of messages; reading marks the counterpart's messages read."""

from __future__ import annotations

from typing import List

from app.commands.base import BaseCommand
from app.exceptions import PermissionDeniedError
from app.models.message import Message
from app.services.conversation_service import ConversationService
from app.services.message_service import MessageService


class GetMessagesCommand(BaseCommand):
    def execute(
        self,
        conversation_id: int,
        user_id: int,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Message]:
        """
        Return the visible page (oldest first) and mark every unread message
        from the other participant as read, in one transaction.

        Raises:
            PermissionDeniedError: user_id is not a participant.
        """
        with self.transaction():
            conversation = ConversationService(self.db).get_for_participant(
                conversation_id, user_id
            )
            if conversation is None:
                raise PermissionDeniedError(
                    "You do not have access to this conversation"
                )
            messages = MessageService(self.db)
            page = messages.get_visible_messages(
                conversation_id, user_id, limit=limit, offset=offset
            )
            marked = messages.mark_read_from_counterpart(conversation_id, user_id)

        if marked:
            self.logger.debug(
                "Marked %d messages read in conversation %s for %s",
                marked,
                conversation_id,
                user_id,
            )
        return page
