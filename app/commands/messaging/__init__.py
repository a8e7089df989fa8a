from app.commands.messaging.accept_invitation_command import AcceptInvitationCommand
from app.commands.messaging.close_invitation_commands import (
    CancelInvitationCommand,
    DeclineInvitationCommand,
)
from app.commands.messaging.delete_conversation_command import (
    DeleteConversationCommand,
)
from app.commands.messaging.get_messages_command import GetMessagesCommand
from app.commands.messaging.send_invitation_command import SendInvitationCommand
from app.commands.messaging.send_message_command import SendMessageCommand

__all__ = [
    "AcceptInvitationCommand",
    "CancelInvitationCommand",
    "DeclineInvitationCommand",
    "DeleteConversationCommand",
    "GetMessagesCommand",
    "SendInvitationCommand",
    "SendMessageCommand",
]
