"""Per-user location snapshot (current state, one row per user)."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.models.location import LocationSnapshot
from app.models.mixins import utcnow
from app.utils.db.upsert import upsert_insert


class LocationService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def upsert_snapshot(
        self,
        user_id: int,
        latitude: float,
        longitude: float,
        accuracy: Optional[float] = None,
        *,
        set_accuracy: bool = True,
    ) -> LocationSnapshot:
        """
        Overwrite the user's snapshot in place.

        With set_accuracy=False an existing accuracy value is preserved; alerts
        carry coordinates only.
        """
        now = utcnow()
        stmt = upsert_insert(self.db, LocationSnapshot).values(
            user_id=user_id,
            latitude=latitude,
            longitude=longitude,
            accuracy=accuracy,
            created_at=now,
            updated_at=now,
        )
        update_set = {"latitude": latitude, "longitude": longitude, "updated_at": now}
        if set_accuracy:
            update_set["accuracy"] = accuracy
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"], set_=update_set
        ).returning(LocationSnapshot)
        return self.db.scalars(
            stmt, execution_options={"populate_existing": True}
        ).one()
