"""Location alert state: activation, deactivation and the receiver's incoming view."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from app.constants.statuses import AlertStatus
from app.models.location import LocationAlert, LocationSnapshot
from app.models.mixins import utcnow
from app.models.user import User


class LocationAlertService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_alert(
        self, alert_id: int, for_update: bool = False
    ) -> Optional[LocationAlert]:
        query = self.db.query(LocationAlert).filter(LocationAlert.id == alert_id)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def deactivate_active(self, sender_id: int, contact_user_id: int) -> int:
        """Deactivate the active alert from sender to contact. Returns rows updated."""
        now = utcnow()
        return (
            self.db.query(LocationAlert)
            .filter(
                LocationAlert.user_id == sender_id,
                LocationAlert.contact_user_id == contact_user_id,
                LocationAlert.alert_status == AlertStatus.ACTIVE.value,
            )
            .update(
                {
                    LocationAlert.alert_status: AlertStatus.INACTIVE.value,
                    LocationAlert.ended_at: now,
                    LocationAlert.updated_at: now,
                },
                synchronize_session=False,
            )
        )

    def create_alert(self, sender_id: int, contact_user_id: int) -> LocationAlert:
        now = utcnow()
        alert = LocationAlert(
            user_id=sender_id,
            contact_user_id=contact_user_id,
            alert_status=AlertStatus.ACTIVE.value,
            started_at=now,
            created_at=now,
            updated_at=now,
        )
        self.db.add(alert)
        self.db.flush()
        return alert

    def deactivate(self, alert: LocationAlert) -> LocationAlert:
        now = utcnow()
        alert.alert_status = AlertStatus.INACTIVE.value
        alert.ended_at = now
        alert.updated_at = now
        self.db.flush()
        return alert

    def get_incoming(self, viewer_id: int) -> List[Dict[str, Any]]:
        """
        Active alerts addressed to viewer_id with the sender's identity and latest
        snapshot. Senders without a snapshot yield null location fields.
        Newest alert first.
        """
        rows = (
            self.db.query(
                LocationAlert.id.label("alert_id"),
                User.id.label("user_id"),
                User.email,
                User.first_name,
                User.last_name,
                LocationSnapshot.latitude,
                LocationSnapshot.longitude,
                LocationSnapshot.accuracy,
                LocationAlert.started_at,
                LocationSnapshot.updated_at.label("location_updated_at"),
            )
            .select_from(LocationAlert)
            .join(User, User.id == LocationAlert.user_id)
            .outerjoin(LocationSnapshot, LocationSnapshot.user_id == LocationAlert.user_id)
            .filter(
                LocationAlert.contact_user_id == viewer_id,
                LocationAlert.alert_status == AlertStatus.ACTIVE.value,
            )
            .order_by(LocationAlert.started_at.desc(), LocationAlert.id.desc())
            .all()
        )
        return [dict(row._mapping) for row in rows]
