"""Command to record the caller's current location."""

from __future__ import annotations

from typing import Optional

from app.commands.base import BaseCommand
from app.models.location import LocationSnapshot
from app.services.location_service import LocationService


class UpdateLocationCommand(BaseCommand):
    def execute(
        self,
        user_id: int,
        latitude: float,
        longitude: float,
        accuracy: Optional[float] = None,
    ) -> LocationSnapshot:
        with self.transaction():
            snapshot = LocationService(self.db).upsert_snapshot(
                user_id, latitude, longitude, accuracy
            )

        self.logger.debug("Location updated for %s", user_id)
        return snapshot
