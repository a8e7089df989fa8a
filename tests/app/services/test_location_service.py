"""Tests for LocationService."""

import pytest

from app.models.location import LocationSnapshot
from app.services.location_service import LocationService


def test_upsert_snapshot_inserts_then_overwrites(db, setup_user):
    svc = LocationService(db)
    svc.upsert_snapshot(setup_user.id, 10.5, 20.25, accuracy=5.0)
    db.commit()
    snapshot = svc.upsert_snapshot(setup_user.id, -33.8688, 151.2093, accuracy=8.0)
    db.commit()

    assert db.query(LocationSnapshot).count() == 1
    assert snapshot.latitude == pytest.approx(-33.8688)
    assert snapshot.longitude == pytest.approx(151.2093)
    assert snapshot.accuracy == pytest.approx(8.0)


def test_upsert_snapshot_can_preserve_accuracy(db, setup_location):
    svc = LocationService(db)
    snapshot = svc.upsert_snapshot(
        setup_location.user_id, 1.0, 2.0, set_accuracy=False
    )
    db.commit()

    assert snapshot.latitude == pytest.approx(1.0)
    assert snapshot.accuracy == pytest.approx(12.5)

