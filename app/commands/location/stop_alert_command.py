"""Command to end a location alert."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.exceptions import NotFoundError, PermissionDeniedError
from app.models.location import LocationAlert
from app.services.location_alert_service import LocationAlertService


class StopAlertCommand(BaseCommand):
    def execute(self, alert_id: int, caller_id: int) -> LocationAlert:
        """
        Deactivate an alert owned by caller_id. Stopping an inactive alert
        returns it unchanged.
        """
        with self.transaction():
            alerts = LocationAlertService(self.db)
            alert = alerts.get_alert(alert_id, for_update=True)
            if alert is None:
                raise NotFoundError("Alert not found")
            if alert.user_id != caller_id:
                raise PermissionDeniedError(
                    "You do not have permission to stop this alert"
                )
            if not alert.is_active:
                return alert
            alerts.deactivate(alert)

        self.logger.info("Alert %s stopped by %s", alert_id, caller_id)
        return alert
