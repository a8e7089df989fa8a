from app.models.contact import UserContact
from app.models.conversation import Conversation, ConversationDeletedBy
from app.models.invitation import ChatInvitation
from app.models.location import LocationAlert, LocationSnapshot
from app.models.message import Message
from app.models.user import User

__all__ = [
    "ChatInvitation",
    "Conversation",
    "ConversationDeletedBy",
    "LocationAlert",
    "LocationSnapshot",
    "Message",
    "User",
    "UserContact",
]
