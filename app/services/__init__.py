from app.services.contact_service import ContactService
from app.services.conversation_service import ConversationService
from app.services.health_service import HealthService
from app.services.invitation_service import InvitationService
from app.services.location_alert_service import LocationAlertService
from app.services.location_service import LocationService
from app.services.message_service import MessageService
from app.services.user_service import UserService

__all__ = [
    "ContactService",
    "ConversationService",
    "HealthService",
    "InvitationService",
    "LocationAlertService",
    "LocationService",
    "MessageService",
    "UserService",
]
