"""Tests for the invitation commands."""

import pytest

from app.commands.messaging import (
    AcceptInvitationCommand,
    CancelInvitationCommand,
    DeclineInvitationCommand,
    SendInvitationCommand,
)
from app.constants.statuses import InvitationStatus
from app.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    StateError,
    ValidationError,
)
from app.models.conversation import Conversation
from app.models.invitation import ChatInvitation


def test_send_invitation_to_self_is_rejected(db, setup_user):
    with pytest.raises(ValidationError, match="yourself"):
        SendInvitationCommand(db).execute(setup_user.id, setup_user.id)


def test_send_invitation_to_unknown_user(db, setup_user):
    with pytest.raises(NotFoundError, match="User not found"):
        SendInvitationCommand(db).execute(setup_user.id, setup_user.id + 1000)
    assert db.query(ChatInvitation).count() == 0


def test_invite_decline_reinvite_ends_pending_with_single_row(
    db, setup_user, setup_another_user
):
    invitation = SendInvitationCommand(db).execute(setup_user.id, setup_another_user.id)
    DeclineInvitationCommand(db).execute(invitation.id, setup_another_user.id)

    again = SendInvitationCommand(db).execute(setup_user.id, setup_another_user.id)

    assert again.id == invitation.id
    assert again.status == InvitationStatus.PENDING
    assert db.query(ChatInvitation).count() == 1


def test_accept_creates_canonical_conversation(
    db, setup_invitation, setup_user, setup_another_user
):
    conversation = AcceptInvitationCommand(db).execute(
        setup_invitation.id, setup_another_user.id
    )
    db.refresh(setup_invitation)

    assert setup_invitation.status == InvitationStatus.ACCEPTED
    assert conversation.user1_id == min(setup_user.id, setup_another_user.id)
    assert conversation.user2_id == max(setup_user.id, setup_another_user.id)


def test_double_accept_yields_one_conversation(db, setup_invitation, setup_another_user):
    first = AcceptInvitationCommand(db).execute(
        setup_invitation.id, setup_another_user.id
    )
    second = AcceptInvitationCommand(db).execute(
        setup_invitation.id, setup_another_user.id
    )

    assert first.id == second.id
    assert db.query(Conversation).count() == 1


def test_accept_reuses_conversation_from_reverse_invitation(
    db, setup_invitation, setup_user, setup_another_user
):
    """Invitations in both directions lead to the same conversation."""
    first = AcceptInvitationCommand(db).execute(
        setup_invitation.id, setup_another_user.id
    )
    reverse = SendInvitationCommand(db).execute(setup_another_user.id, setup_user.id)
    second = AcceptInvitationCommand(db).execute(reverse.id, setup_user.id)

    assert first.id == second.id
    assert db.query(Conversation).count() == 1


def test_accept_by_sender_is_forbidden(db, setup_invitation, setup_user):
    with pytest.raises(PermissionDeniedError):
        AcceptInvitationCommand(db).execute(setup_invitation.id, setup_user.id)
    assert db.query(Conversation).count() == 0


def test_accept_missing_invitation(db, setup_user):
    with pytest.raises(NotFoundError, match="Invitation not found"):
        AcceptInvitationCommand(db).execute(424242, setup_user.id)


def test_accept_declined_invitation_is_state_error(
    db, setup_invitation, setup_another_user
):
    DeclineInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)
    with pytest.raises(StateError):
        AcceptInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)
    assert db.query(Conversation).count() == 0


def test_decline_only_by_receiver(db, setup_invitation, setup_user):
    with pytest.raises(PermissionDeniedError):
        DeclineInvitationCommand(db).execute(setup_invitation.id, setup_user.id)


def test_decline_twice_is_state_error(db, setup_invitation, setup_another_user):
    DeclineInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)
    with pytest.raises(StateError):
        DeclineInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)


def test_cancel_by_sender(db, setup_invitation, setup_user):
    invitation = CancelInvitationCommand(db).execute(setup_invitation.id, setup_user.id)
    assert invitation.status == InvitationStatus.CANCELED


def test_cancel_only_by_sender(db, setup_invitation, setup_another_user):
    with pytest.raises(PermissionDeniedError):
        CancelInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)


def test_cancel_accepted_invitation_is_state_error(
    db, setup_invitation, setup_user, setup_another_user
):
    AcceptInvitationCommand(db).execute(setup_invitation.id, setup_another_user.id)
    with pytest.raises(StateError, match="Only pending invitations can be canceled"):
        CancelInvitationCommand(db).execute(setup_invitation.id, setup_user.id)
