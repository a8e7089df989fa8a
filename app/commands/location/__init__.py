from app.commands.location.contact_commands import (
    AddContactCommand,
    RemoveContactCommand,
)
from app.commands.location.send_alert_command import SendAlertCommand
from app.commands.location.stop_alert_command import StopAlertCommand
from app.commands.location.update_location_command import UpdateLocationCommand

__all__ = [
    "AddContactCommand",
    "RemoveContactCommand",
    "SendAlertCommand",
    "StopAlertCommand",
    "UpdateLocationCommand",
]
