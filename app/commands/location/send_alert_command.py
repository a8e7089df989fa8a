"""Command to start a location alert towards a contact."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.exceptions import PermissionDeniedError
from app.models.location import LocationAlert
from app.services.contact_service import ContactService
from app.services.location_alert_service import LocationAlertService
from app.services.location_service import LocationService


class SendAlertCommand(BaseCommand):
    """
    Replace the sender's active alert to one contact with a new one.

    Steps, all in one transaction:

    1. lock the sender -> contact edge (no edge: PermissionDeniedError, nothing
       written);
    2. deactivate the currently active alert for the pair, if any;
    3. insert the new active alert;
    4. upsert the sender's location snapshot with the alert coordinates.

    The edge lock serialises concurrent alerts for the same pair. The partial
    unique index on active alerts rejects whatever slips past it.
    """

    def execute(
        self,
        sender_id: int,
        contact_user_id: int,
        latitude: float,
        longitude: float,
    ) -> LocationAlert:
        with self.transaction():
            edge = ContactService(self.db).get_edge(
                sender_id, contact_user_id, for_update=True
            )
            if edge is None:
                self.logger.warning(
                    "Alert from %s rejected: %s is not a contact",
                    sender_id,
                    contact_user_id,
                )
                raise PermissionDeniedError("This user is not in your contacts")

            alerts = LocationAlertService(self.db)
            superseded = alerts.deactivate_active(sender_id, contact_user_id)
            alert = alerts.create_alert(sender_id, contact_user_id)
            LocationService(self.db).upsert_snapshot(
                sender_id, latitude, longitude, set_accuracy=False
            )

        self.logger.info(
            "Alert %s active: %s -> %s%s",
            alert.id,
            sender_id,
            contact_user_id,
            " (superseded previous)" if superseded else "",
            extra={"user_id": sender_id, "alert_id": alert.id},
        )
        return alert
