"""Location alert and location snapshot models."""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    text,
)

from app.constants.statuses import AlertStatus
from app.db import Base
from app.models.mixins import TimestampMixin, utcnow

ACTIVE_ALERT_PREDICATE = text("alert_status = 'active'")


class LocationAlert(Base, TimestampMixin):
    """Alert from user_id (sender) to contact_user_id (receiver).

    A partial unique index allows a single active row per ordered pair.
    """

    __tablename__ = "location_alerts"
    __table_args__ = (
        Index(
            "uq_location_alerts_active_pair",
            "user_id",
            "contact_user_id",
            unique=True,
            postgresql_where=ACTIVE_ALERT_PREDICATE,
            sqlite_where=ACTIVE_ALERT_PREDICATE,
        ),
        Index("ix_location_alerts_contact_status", "contact_user_id", "alert_status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    contact_user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    alert_status = Column(String(50), nullable=False, default=AlertStatus.ACTIVE.value)
    started_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    ended_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_active(self) -> bool:
        return self.alert_status == AlertStatus.ACTIVE


class LocationSnapshot(Base, TimestampMixin):
    """Latest known position of a user; overwritten in place."""

    __tablename__ = "location_tracking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    latitude = Column(Numeric(10, 8, asdecimal=False), nullable=False)
    longitude = Column(Numeric(11, 8, asdecimal=False), nullable=False)
    accuracy = Column(Float, nullable=True)
