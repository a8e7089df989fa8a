"""Tests for InvitationService."""

from app.constants.statuses import InvitationStatus
from app.models.invitation import ChatInvitation
from app.services.invitation_service import InvitationService


def test_upsert_pending_creates_invitation(db, setup_user, setup_another_user):
    """upsert_pending inserts a pending row for a new pair."""
    svc = InvitationService(db)
    invitation = svc.upsert_pending(setup_user.id, setup_another_user.id)
    db.commit()
    assert invitation.id is not None
    assert invitation.status == InvitationStatus.PENDING
    assert invitation.sender_email == setup_user.email
    assert invitation.receiver_email == setup_another_user.email


def test_upsert_pending_resets_declined_row(db, setup_invitation):
    """Re-sending after a decline reuses the same row and resets it to pending."""
    svc = InvitationService(db)
    svc.set_status(setup_invitation, InvitationStatus.DECLINED)
    db.commit()

    again = svc.upsert_pending(setup_invitation.sender_id, setup_invitation.receiver_id)
    db.commit()

    assert again.id == setup_invitation.id
    assert again.status == InvitationStatus.PENDING
    assert db.query(ChatInvitation).count() == 1


def test_get_invitation_not_found(db):
    assert InvitationService(db).get_invitation(999999) is None


def test_upsert_pending_is_directed(db, setup_invitation):
    """The reverse direction is a different invitation."""
    reverse = InvitationService(db).upsert_pending(
        setup_invitation.receiver_id, setup_invitation.sender_id
    )
    db.commit()

    assert reverse.id != setup_invitation.id
    assert db.query(ChatInvitation).count() == 2


def test_pending_lists_only_include_pending(
    db, setup_invitation, setup_user, setup_another_user, user_factory
):
    """Received and sent lists contain pending invitations only."""
    svc = InvitationService(db)
    third = user_factory()
    declined = svc.upsert_pending(setup_user.id, third.id)
    svc.set_status(declined, InvitationStatus.DECLINED)
    db.commit()

    received = svc.get_pending_received(setup_another_user.id)
    assert [i.id for i in received] == [setup_invitation.id]

    sent = svc.get_pending_sent(setup_user.id)
    assert [i.id for i in sent] == [setup_invitation.id]
    assert svc.get_pending_received(third.id) == []
