"""Tests for request body models."""

import pytest
from pydantic import ValidationError

from app.schemas.contact import ContactCreate
from app.schemas.conversation import MessageCreate
from app.schemas.invitation import InvitationCreate
from app.schemas.location import AlertCreate, LocationUpdate


def test_invitation_create_accepts_camel_and_snake_case():
    assert InvitationCreate.model_validate({"receiverId": 3}).receiver_id == 3
    assert InvitationCreate.model_validate({"receiver_id": 3}).receiver_id == 3


def test_invitation_create_forbids_extra_fields():
    with pytest.raises(ValidationError):
        InvitationCreate.model_validate({"receiverId": 3, "status": "accepted"})


def test_message_create_type_aliases():
    assert (
        MessageCreate.model_validate({"content": "x", "type": "image"}).message_type
        == "image"
    )
    assert (
        MessageCreate.model_validate({"content": "x", "messageType": "file"}).message_type
        == "file"
    )
    assert MessageCreate.model_validate({"content": "x"}).message_type is None


def test_alert_create_short_and_long_coordinate_names():
    short = AlertCreate.model_validate({"contactUserId": 2, "lat": 10, "lon": -20})
    long = AlertCreate.model_validate(
        {"contactUserId": 2, "latitude": 10, "longitude": -20}
    )
    assert (short.latitude, short.longitude) == (10.0, -20.0)
    assert (long.latitude, long.longitude) == (10.0, -20.0)


@pytest.mark.parametrize(
    "payload",
    [
        {"lat": 90.0001, "lon": 0},
        {"lat": 0, "lon": -180.0001},
        {"lat": "north", "lon": 0},
        {"lon": 0},
    ],
)
def test_location_update_rejects_invalid_coordinates(payload):
    with pytest.raises(ValidationError):
        LocationUpdate.model_validate(payload)


def test_location_update_boundaries_are_inclusive():
    update = LocationUpdate.model_validate({"lat": -90, "lon": 180})
    assert update.accuracy is None


def test_contact_create_requires_positive_id():
    with pytest.raises(ValidationError):
        ContactCreate.model_validate({"contactUserId": 0})
