"""Location API: alerts to contacts and the caller's location snapshot."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.auth.identity import CurrentUser, get_current_user
from app.commands.location import (
    SendAlertCommand,
    StopAlertCommand,
    UpdateLocationCommand,
)
from app.constants.ids import MAX_ID
from app.db import get_db
from app.schemas.location import (
    AlertCreate,
    AlertRead,
    AlertResponse,
    IncomingAlertListResponse,
    IncomingAlertRead,
    LocationRead,
    LocationResponse,
    LocationUpdate,
)
from app.services.location_alert_service import LocationAlertService

alerts_router = APIRouter(prefix="/alerts", tags=["Location"])
location_router = APIRouter(prefix="/location", tags=["Location"])


@alerts_router.post("", response_model=AlertResponse, status_code=201)
def send_alert(
    data: AlertCreate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AlertResponse:
    """Alert a contact. Replaces any active alert to the same contact."""
    alert = SendAlertCommand(db).execute(
        current_user.id, data.contact_user_id, data.latitude, data.longitude
    )
    return AlertResponse(alert=AlertRead.model_validate(alert))


@alerts_router.get("/incoming", response_model=IncomingAlertListResponse)
def list_incoming_alerts(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> IncomingAlertListResponse:
    """Active alerts addressed to the caller, with each sender's last location."""
    rows = LocationAlertService(db).get_incoming(current_user.id)
    return IncomingAlertListResponse(alerts=[IncomingAlertRead(**r) for r in rows])


@alerts_router.post("/{alert_id}/stop", response_model=AlertResponse)
def stop_alert(
    alert_id: int = Path(gt=0, le=MAX_ID),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> AlertResponse:
    alert = StopAlertCommand(db).execute(alert_id, current_user.id)
    return AlertResponse(alert=AlertRead.model_validate(alert))


@location_router.post("", response_model=LocationResponse)
def update_location(
    data: LocationUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> LocationResponse:
    snapshot = UpdateLocationCommand(db).execute(
        current_user.id, data.latitude, data.longitude, data.accuracy
    )
    return LocationResponse(location=LocationRead.model_validate(snapshot))
