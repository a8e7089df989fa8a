"""Pydantic schemas for location alerts and location snapshots."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field

from app.constants.ids import MAX_ID
from app.constants.statuses import AlertStatus
from app.schemas.common import Envelope

Latitude = Annotated[
    float,
    Field(ge=-90, le=90, validation_alias=AliasChoices("lat", "latitude")),
]
Longitude = Annotated[
    float,
    Field(ge=-180, le=180, validation_alias=AliasChoices("lon", "longitude")),
]


class AlertCreate(BaseModel):
    """Request schema for alerting a contact with the caller's coordinates."""

    contact_user_id: int = Field(
        ...,
        gt=0,
        le=MAX_ID,
        validation_alias=AliasChoices("contactUserId", "contact_user_id"),
    )
    latitude: Latitude
    longitude: Longitude

    model_config = {"extra": "forbid"}


class LocationUpdate(BaseModel):
    """Request schema for updating the caller's current location."""

    latitude: Latitude
    longitude: Longitude
    accuracy: float | None = Field(None, ge=0, description="Radius in meters")

    model_config = {"extra": "forbid"}


class AlertRead(BaseModel):
    id: int
    user_id: int
    contact_user_id: int
    alert_status: AlertStatus
    started_at: datetime
    ended_at: datetime | None = None
    updated_at: datetime

    model_config = {"from_attributes": True}


class IncomingAlertRead(BaseModel):
    """An active alert addressed to the caller, with the sender's last location.

    Location fields are null when the sender has never reported a location.
    """

    alert_id: int
    user_id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    accuracy: float | None = None
    started_at: datetime
    location_updated_at: datetime | None = None


class LocationRead(BaseModel):
    user_id: int
    latitude: float
    longitude: float
    accuracy: float | None = None
    updated_at: datetime

    model_config = {"from_attributes": True}


class AlertResponse(Envelope):
    alert: AlertRead


class IncomingAlertListResponse(Envelope):
    alerts: list[IncomingAlertRead]


class LocationResponse(Envelope):
    location: LocationRead
