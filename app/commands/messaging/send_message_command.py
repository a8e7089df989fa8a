"""Command to post a message to a conversation."""

from __future__ import annotations

from typing import Optional

from app.commands.base import BaseCommand
from app.constants.statuses import DEFAULT_MESSAGE_TYPE
from app.exceptions import PermissionDeniedError, ValidationError
from app.models.message import Message
from app.services.conversation_service import ConversationService
from app.services.message_service import MessageService


class SendMessageCommand(BaseCommand):
    """
    Post a message as one transaction:

    1. clear the other participant's soft-delete mark, so the conversation
       reappears for them;
    2. insert the message;
    3. bump the conversation's updated_at.

    The sender's own mark is left alone; only counterpart activity undoes a
    deletion.
    """

    def execute(
        self,
        conversation_id: int,
        user_id: int,
        content: str,
        message_type: Optional[str] = None,
    ) -> Message:
        if content is None or not content.strip():
            raise ValidationError("Message content is required")

        with self.transaction():
            conversations = ConversationService(self.db)
            conversation = conversations.get_for_participant(conversation_id, user_id)
            if conversation is None:
                raise PermissionDeniedError(
                    "You do not have access to this conversation"
                )
            other_user_id = conversation.other_participant(user_id)
            if conversations.clear_deletion_mark(conversation_id, other_user_id):
                self.logger.info(
                    "Conversation %s restored for %s", conversation_id, other_user_id
                )
            message = MessageService(self.db).create_message(
                conversation_id,
                user_id,
                content,
                message_type or DEFAULT_MESSAGE_TYPE,
            )
            conversations.touch(conversation)

        return message
