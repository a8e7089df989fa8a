"""Tests for ConversationService."""

from datetime import timedelta

import pytest

from app.models.conversation import Conversation, ConversationDeletedBy
from app.services.conversation_service import ConversationService, canonical_pair


def test_canonical_pair_orders_ids():
    assert canonical_pair(9, 3) == (3, 9)
    assert canonical_pair(3, 9) == (3, 9)


def test_canonical_pair_rejects_same_user():
    with pytest.raises(ValueError):
        canonical_pair(4, 4)


def test_get_or_create_for_pair_is_order_independent(
    db, setup_user, setup_another_user
):
    """Both argument orders resolve to one conversation row."""
    svc = ConversationService(db)
    first, created = svc.get_or_create_for_pair(setup_user.id, setup_another_user.id)
    db.commit()
    second, created_again = svc.get_or_create_for_pair(
        setup_another_user.id, setup_user.id
    )
    db.commit()

    assert created is True
    assert created_again is False
    assert first.id == second.id
    assert first.user1_id < first.user2_id
    assert db.query(Conversation).count() == 1


def test_get_for_participant(db, setup_conversation, setup_user, user_factory):
    svc = ConversationService(db)
    outsider = user_factory()
    assert svc.get_for_participant(setup_conversation.id, setup_user.id) is not None
    assert svc.get_for_participant(setup_conversation.id, outsider.id) is None


def test_list_for_user_returns_other_participant(
    db, setup_conversation, setup_user, setup_another_user
):
    rows = ConversationService(db).list_for_user(setup_user.id)
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == setup_conversation.id
    assert row["other_user_id"] == setup_another_user.id
    assert row["other_user_email"] == setup_another_user.email


def test_list_for_user_orders_by_updated_at(
    db, setup_conversation, setup_user, user_factory
):
    """Most recently touched conversation comes first."""
    svc = ConversationService(db)
    third = user_factory()
    newer, _ = svc.get_or_create_for_pair(setup_user.id, third.id)
    db.commit()

    setup_conversation.updated_at = newer.updated_at - timedelta(minutes=5)
    db.commit()
    assert [r["id"] for r in svc.list_for_user(setup_user.id)] == [
        newer.id,
        setup_conversation.id,
    ]

    svc.touch(setup_conversation)
    db.commit()
    assert svc.list_for_user(setup_user.id)[0]["id"] == setup_conversation.id


def test_mark_deleted_hides_for_that_user_only(
    db, setup_conversation, setup_user, setup_another_user
):
    svc = ConversationService(db)
    assert svc.mark_deleted(setup_conversation.id, setup_user.id) is True
    db.commit()

    assert svc.list_for_user(setup_user.id) == []
    assert len(svc.list_for_user(setup_another_user.id)) == 1


def test_mark_deleted_keeps_first_timestamp(db, setup_conversation, setup_user):
    """A second delete is a no-op; the first deleted_at wins."""
    svc = ConversationService(db)
    svc.mark_deleted(setup_conversation.id, setup_user.id)
    db.commit()
    first = svc.get_deletion_mark(setup_conversation.id, setup_user.id).deleted_at

    assert svc.mark_deleted(setup_conversation.id, setup_user.id) is False
    db.commit()
    db.expire_all()

    assert db.query(ConversationDeletedBy).count() == 1
    assert svc.get_deletion_mark(setup_conversation.id, setup_user.id).deleted_at == first


def test_clear_deletion_mark(db, setup_conversation, setup_user):
    svc = ConversationService(db)
    svc.mark_deleted(setup_conversation.id, setup_user.id)
    db.commit()

    assert svc.clear_deletion_mark(setup_conversation.id, setup_user.id) == 1
    assert svc.clear_deletion_mark(setup_conversation.id, setup_user.id) == 0
    db.commit()
    assert len(svc.list_for_user(setup_user.id)) == 1
