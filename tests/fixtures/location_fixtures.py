"""Fixtures for contacts, alerts and location snapshots."""

import pytest

from app.constants.statuses import AlertStatus
from app.models.contact import UserContact
from app.models.location import LocationAlert, LocationSnapshot


@pytest.fixture(scope="function")
def setup_contact(db, setup_user, setup_another_user):
    """Directed edge setup_user -> setup_another_user."""
    contact = UserContact(user_id=setup_user.id, contact_user_id=setup_another_user.id)
    db.add(contact)
    db.commit()
    db.refresh(contact)
    return contact


@pytest.fixture(scope="function")
def setup_alert(db, setup_contact):
    """Active alert along setup_contact."""
    alert = LocationAlert(
        user_id=setup_contact.user_id,
        contact_user_id=setup_contact.contact_user_id,
        alert_status=AlertStatus.ACTIVE.value,
    )
    db.add(alert)
    db.commit()
    db.refresh(alert)
    return alert


@pytest.fixture(scope="function")
def setup_location(db, setup_user, faker):
    """Location snapshot for setup_user."""
    snapshot = LocationSnapshot(
        user_id=setup_user.id,
        latitude=float(faker.latitude()),
        longitude=float(faker.longitude()),
        accuracy=12.5,
    )
    db.add(snapshot)
    db.commit()
    db.refresh(snapshot)
    return snapshot
